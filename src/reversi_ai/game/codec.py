"""
Text protocol for out-of-process opponents.

The external program receives two strings and answers with two bytes:

- status: "O" Light to move, "X" Dark to move, "." game ended
- board:  64 characters, row-major, 'O' Light disk, 'X' Dark disk, '.' empty
- answer: two bytes, the chosen row index then column index (0-7)

Example:
    board_to_string(Turn.initial().board)
    -> "...........................OX......XO..........................."
"""

from typing import Optional

from reversi_ai.errors import ProtocolError
from reversi_ai.game.board import BOARD_AREA, BOARD_SIZE, EMPTY, Board, Coord, Side, in_bounds
from reversi_ai.game.rules import Status, Turn

LIGHT_CHAR = "O"
DARK_CHAR = "X"
EMPTY_CHAR = "."

_CELL_TO_CHAR = {int(Side.LIGHT): LIGHT_CHAR, int(Side.DARK): DARK_CHAR, EMPTY: EMPTY_CHAR}
_CHAR_TO_CELL = {v: k for k, v in _CELL_TO_CHAR.items()}


def status_to_string(status: Status) -> str:
    if status.is_ended:
        return EMPTY_CHAR
    return LIGHT_CHAR if status.side_to_move == Side.LIGHT else DARK_CHAR


def string_to_side(status_string: str) -> Optional[Side]:
    """Side to move encoded by a status token; None for an ended game."""
    if not status_string:
        raise ProtocolError("Empty status string")
    token = status_string[0]
    if token == LIGHT_CHAR:
        return Side.LIGHT
    if token == DARK_CHAR:
        return Side.DARK
    if token == EMPTY_CHAR:
        return None
    raise ProtocolError("Invalid status token", token=token)


def board_to_string(board: Board) -> str:
    return "".join(_CELL_TO_CHAR[v] for v in board.cells.flatten().tolist())


def string_to_board(board_string: str) -> Board:
    if len(board_string) != BOARD_AREA:
        raise ProtocolError("Board string must have 64 characters", length=len(board_string))
    board = Board()
    for index, char in enumerate(board_string):
        if char not in _CHAR_TO_CELL:
            raise ProtocolError("Invalid board character", char=char, index=index)
        board.cells[divmod(index, BOARD_SIZE)] = _CHAR_TO_CELL[char]
    return board


def string_to_turn(board_string: str, status_string: str) -> Turn:
    """
    Rebuild a Turn from its protocol strings.

    The status token is taken at face value: a position where the encoded side
    cannot move is normalised by Turn.custom like any other custom position.
    """
    return Turn.custom(string_to_board(board_string), string_to_side(status_string))


def encode_move(coord: Coord) -> bytes:
    if not in_bounds(coord):
        raise ProtocolError("Move out of range", coord=coord)
    return bytes(coord)


def decode_move(data: bytes) -> Coord:
    """Read the two-byte (row, col) answer of an external opponent."""
    if len(data) < 2:
        raise ProtocolError("Move answer must contain two bytes", length=len(data))
    coord = (data[0], data[1])
    if not in_bounds(coord):
        raise ProtocolError("Move out of range", coord=coord)
    return coord
