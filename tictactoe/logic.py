import random
from dataclasses import dataclass
from enum import Enum

# Field:
# 0 1 2
# 3 4 5
# 6 7 8
BOARD_SIZE = 9
CENTER = 4

# Rows, then columns, then diagonals. Move selection relies on this order.
WIN_PATTERNS = (
    frozenset((0, 1, 2)), frozenset((3, 4, 5)), frozenset((6, 7, 8)),
    frozenset((0, 3, 6)), frozenset((1, 4, 7)), frozenset((2, 5, 8)),
    frozenset((0, 4, 8)), frozenset((2, 4, 6)),
)


class BoardError(Exception):
    pass


class CellOccupiedError(BoardError):
    def __init__(self, index):
        super().__init__(f"Cell {index} is already occupied")
        self.index = index


class NoAvailableCellError(BoardError):
    def __init__(self):
        super().__init__("No free cell left on the board")


class InvalidCellError(BoardError, ValueError):
    def __init__(self, index):
        super().__init__(f"Cell index must be in 0..{BOARD_SIZE - 1}, got {index!r}")
        self.index = index


class Player(Enum):
    HUMAN = "human"
    COMPUTER = "computer"

    @property
    def mark(self):
        return 'X' if self is Player.HUMAN else 'O'


@dataclass(frozen=True)
class Move:
    player: Player
    board_index: int

    @property
    def indicator(self):
        return self.player.mark


def reset():
    """Fresh board with all 9 cells empty."""
    return (None,) * BOARD_SIZE


def is_occupied(board, index):
    return any(move is not None and move.board_index == index for move in board)


def moves_of(board, player):
    return {move.board_index for move in board if move is not None and move.player is player}


def empty_cells(board):
    return [i for i in range(BOARD_SIZE) if not is_occupied(board, i)]


def apply_move(board, player, index):
    """Returns a new board with the player's mark at index. The input board is left as is."""
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_SIZE:
        raise InvalidCellError(index)
    if is_occupied(board, index):
        raise CellOccupiedError(index)

    cells = list(board)
    cells[index] = Move(player, index)
    return tuple(cells)


def winning_pattern(board, player):
    positions = moves_of(board, player)
    for pattern in WIN_PATTERNS:
        if pattern <= positions:
            return tuple(sorted(pattern))
    return None


def check_win(board, player):
    return winning_pattern(board, player) is not None


def check_draw(board):
    # Only "board is full": the caller checks for a win first
    return all(move is not None for move in board)


def _complete_line(board, player):
    # First pattern where the player holds two cells and the third one is free
    positions = moves_of(board, player)
    for pattern in WIN_PATTERNS:
        missing = pattern - positions
        if len(missing) == 1:
            index = next(iter(missing))
            if not is_occupied(board, index):
                return index
    return None


def select_computer_move(board, rng=None):
    """
    Picks the computer's next cell.

    Order: win right now, block the human, take the center,
    otherwise any free cell at random.
    """
    free = empty_cells(board)
    if not free:
        raise NoAvailableCellError()

    index = _complete_line(board, Player.COMPUTER)
    if index is not None:
        return index

    index = _complete_line(board, Player.HUMAN)
    if index is not None:
        return index

    if CENTER in free:
        return CENTER

    return (rng or random).choice(free)
