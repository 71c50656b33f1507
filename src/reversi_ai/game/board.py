"""
Reversi board geometry.

Board: 8 rows x 8 columns stored as a numpy int8 matrix.
Cells: 0 = empty, +1 = Light disk, -1 = Dark disk.
Coordinates: (row, col) tuples, 0-indexed, row-major order.
"""

from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from reversi_ai.errors import InvalidCoordinateError

BOARD_SIZE = 8
BOARD_AREA = BOARD_SIZE * BOARD_SIZE

EMPTY = 0

Coord = Tuple[int, int]

# (delta_row, delta_col) for the eight compass directions
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, 0),   # N
    (-1, 1),   # NE
    (0, 1),    # E
    (1, 1),    # SE
    (1, 0),    # S
    (1, -1),   # SW
    (0, -1),   # W
    (-1, -1),  # NW
)


class Side(IntEnum):
    """The two players. Values double as the Light-positive score sign."""
    LIGHT = 1
    DARK = -1

    def opposite(self) -> "Side":
        return Side(-self.value)

    def __str__(self):
        return self.name.capitalize()


def in_bounds(coord: Coord) -> bool:
    row, col = coord
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def all_coords() -> Iterator[Coord]:
    """All 64 coordinates in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield (row, col)


class Board:
    """
    Fixed 8x8 grid of cells.

    The board is a plain container: it knows nothing about whose turn it is
    or which moves are legal (see reversi_ai.game.rules).
    """

    __slots__ = ("cells",)

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        if cells.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {cells.shape}")
        self.cells = cells.astype(np.int8, copy=False)

    @classmethod
    def initial(cls) -> "Board":
        """Standard opening: Light on the main diagonal, Dark on the other."""
        board = cls()
        board.cells[3, 3] = Side.LIGHT
        board.cells[4, 4] = Side.LIGHT
        board.cells[3, 4] = Side.DARK
        board.cells[4, 3] = Side.DARK
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[Side]]]) -> "Board":
        """Build a board from 8 rows of Side-or-None entries."""
        cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        for r, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {BOARD_SIZE}")
            for c, cell in enumerate(row):
                cells[r, c] = EMPTY if cell is None else int(cell)
        return cls(cells)

    def to_rows(self) -> List[List[Optional[Side]]]:
        return [[None if v == EMPTY else Side(int(v)) for v in row] for row in self.cells]

    def copy(self) -> "Board":
        return Board(self.cells.copy())

    def cell(self, coord: Coord) -> Optional[Side]:
        """Side occupying the cell, or None when empty."""
        if not in_bounds(coord):
            raise InvalidCoordinateError(f"Coordinate {coord} is off the board", coord=coord)
        value = self.cells.item(coord)
        return None if value == EMPTY else Side(value)

    def place(self, coord: Coord, side: Side):
        if not in_bounds(coord):
            raise InvalidCoordinateError(f"Coordinate {coord} is off the board", coord=coord)
        self.cells[coord] = side

    def count(self, side: Side) -> int:
        return int(np.count_nonzero(self.cells == side))

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.cells == EMPTY))

    def disk_count(self) -> int:
        return BOARD_AREA - self.empty_count()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __hash__(self):
        return hash(self.cells.tobytes())

    def __repr__(self):
        symbols = {EMPTY: ".", int(Side.LIGHT): "O", int(Side.DARK): "X"}
        rows = ["".join(symbols[int(v)] for v in row) for row in self.cells]
        return "Board(\n  " + "\n  ".join(rows) + "\n)"
