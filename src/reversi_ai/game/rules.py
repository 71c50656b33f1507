"""
Reversi rules engine.

A Turn is an immutable snapshot of the game: board, status and cached disk
counts. Every accepted move produces a new Turn; the previous one is never
touched, so search can explore many branches from one ancestor and a match
can rewind its history for undo.

Status after a move:
    1. the opponent can move      -> Running(opponent)
    2. else the mover can move    -> Running(mover)   (opponent passes)
    3. else                       -> Ended
"""

from dataclasses import dataclass
from typing import List, Optional

from reversi_ai.errors import EndedGameError, IllegalMoveError
from reversi_ai.game.board import (
    BOARD_AREA,
    BOARD_SIZE,
    DIRECTIONS,
    EMPTY,
    Board,
    Coord,
    Side,
    all_coords,
    in_bounds,
)


@dataclass(frozen=True)
class Status:
    """Running with a side to move, or Ended (side_to_move is None)."""
    side_to_move: Optional[Side] = None

    @classmethod
    def running(cls, side: Side) -> "Status":
        return cls(side)

    @classmethod
    def ended(cls) -> "Status":
        return cls(None)

    @property
    def is_ended(self) -> bool:
        return self.side_to_move is None

    def __str__(self):
        if self.is_ended:
            return "Ended"
        return f"Running({self.side_to_move})"


@dataclass(frozen=True, eq=False)
class Turn:
    board: Board
    status: Status
    score_light: int
    score_dark: int

    @classmethod
    def initial(cls) -> "Turn":
        """Four center disks, Dark to move."""
        return cls(Board.initial(), Status.running(Side.DARK), 2, 2)

    @classmethod
    def custom(cls, board: Board, side_to_move: Optional[Side]) -> "Turn":
        """
        Build a Turn from an arbitrary position.

        The status is normalised with the same pass/end rule used after a
        move: if side_to_move cannot play, the other side gets the turn, and
        if neither can, the game is Ended.
        """
        board = board.copy()
        if side_to_move is None:
            status = Status.ended()
        elif has_legal_move(board, side_to_move):
            status = Status.running(side_to_move)
        elif has_legal_move(board, side_to_move.opposite()):
            status = Status.running(side_to_move.opposite())
        else:
            status = Status.ended()
        return cls(board, status, board.count(Side.LIGHT), board.count(Side.DARK))

    @property
    def side_to_move(self) -> Optional[Side]:
        return self.status.side_to_move

    @property
    def is_ended(self) -> bool:
        return self.status.is_ended

    @property
    def score_diff(self) -> int:
        """Light disks minus Dark disks."""
        return self.score_light - self.score_dark

    @property
    def tempo(self) -> int:
        """Number of disks on the board (4 at the start, 64 on a full board)."""
        return self.score_light + self.score_dark

    @property
    def empty_count(self) -> int:
        return BOARD_AREA - self.tempo

    def winner(self) -> Optional[Side]:
        """Side with more disks, or None on a tie."""
        if self.score_diff > 0:
            return Side.LIGHT
        if self.score_diff < 0:
            return Side.DARK
        return None

    def cell(self, coord: Coord) -> Optional[Side]:
        return self.board.cell(coord)

    def __eq__(self, other):
        if not isinstance(other, Turn):
            return NotImplemented
        return (self.status == other.status
                and self.score_light == other.score_light
                and self.score_dark == other.score_dark
                and self.board == other.board)

    def __hash__(self):
        return hash((self.board, self.status))


def _capture_line(cells, row: int, col: int, d_row: int, d_col: int, mover: int) -> int:
    """
    Length of the capturing line from (row, col) in one direction.

    Walks over contiguous opponent disks; returns their count if the run is
    closed by a mover disk, 0 if it hits an empty cell or the board edge.
    """
    opponent = -mover
    r, c = row + d_row, col + d_col
    run = 0
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
        value = cells.item(r, c)
        if value == opponent:
            run += 1
        elif value == mover:
            return run
        else:
            return 0
        r += d_row
        c += d_col
    return 0


def _is_legal_for(board: Board, coord: Coord, side: Side) -> bool:
    if not in_bounds(coord):
        return False
    row, col = coord
    cells = board.cells
    if cells.item(row, col) != EMPTY:
        return False
    mover = int(side)
    for d_row, d_col in DIRECTIONS:
        if _capture_line(cells, row, col, d_row, d_col, mover) > 0:
            return True
    return False


def has_legal_move(board: Board, side: Side) -> bool:
    """Whether side has at least one legal move on board."""
    return any(_is_legal_for(board, coord, side) for coord in all_coords())


def legal(turn: Turn, coord: Coord) -> bool:
    """True iff the side to move may play coord."""
    if turn.is_ended:
        return False
    return _is_legal_for(turn.board, coord, turn.side_to_move)


def legal_moves(turn: Turn) -> List[Coord]:
    """All legal moves for the side to move, in row-major order."""
    if turn.is_ended:
        return []
    side = turn.side_to_move
    return [coord for coord in all_coords() if _is_legal_for(turn.board, coord, side)]


def flips(turn: Turn, coord: Coord) -> List[Coord]:
    """Opponent disks that playing coord would capture (empty if illegal)."""
    if turn.is_ended or not in_bounds(coord):
        return []
    row, col = coord
    cells = turn.board.cells
    if cells.item(row, col) != EMPTY:
        return []
    mover = int(turn.side_to_move)
    captured = []
    for d_row, d_col in DIRECTIONS:
        run = _capture_line(cells, row, col, d_row, d_col, mover)
        for step in range(1, run + 1):
            captured.append((row + step * d_row, col + step * d_col))
    return captured


def apply(turn: Turn, coord: Coord) -> Turn:
    """
    Play coord for the side to move and return the resulting Turn.

    The input Turn is left unchanged.

    Raises:
        EndedGameError: the game is already over
        IllegalMoveError: coord captures nothing or is not an empty board cell
    """
    if turn.is_ended:
        raise EndedGameError("Game ended, cannot make a move", coord=coord)

    captured = flips(turn, coord)
    if not captured:
        raise IllegalMoveError(coord, side=str(turn.side_to_move))

    mover = turn.side_to_move
    board = turn.board.copy()
    for flipped in captured:
        board.cells[flipped] = mover
    board.cells[coord] = mover

    gained = len(captured) + 1
    if mover == Side.LIGHT:
        score_light = turn.score_light + gained
        score_dark = turn.score_dark - len(captured)
    else:
        score_light = turn.score_light - len(captured)
        score_dark = turn.score_dark + gained

    opponent = mover.opposite()
    if has_legal_move(board, opponent):
        status = Status.running(opponent)
    elif has_legal_move(board, mover):
        status = Status.running(mover)
    else:
        status = Status.ended()

    return Turn(board, status, score_light, score_dark)


def try_apply(turn: Turn, coord: Coord) -> Optional[Turn]:
    """Like apply, but returns None instead of raising on an illegal move."""
    if not legal(turn, coord):
        return None
    return apply(turn, coord)
