from enum import Enum

from tictactoe.logic import (Player, reset, apply_move, check_win, check_draw,
                             winning_pattern, select_computer_move)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"


WIN_STATUS = {
    Player.HUMAN: GameStatus.HUMAN_WON,
    Player.COMPUTER: GameStatus.COMPUTER_WON,
}


class GameOverError(Exception):
    def __init__(self, status):
        super().__init__(f"Game is already over ({status.value}), reset it first")
        self.status = status


class GameSession:
    def __init__(self, rng=None):
        self.rng = rng
        self.reset()

    def reset(self):
        self.board = reset()
        self.status = GameStatus.IN_PROGRESS
        self.winning_line = ()  # Cells of the completed pattern, for highlighting
        self.last_player = None

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def awaiting_computer(self):
        return not self.is_over and self.last_player is Player.HUMAN

    def play_human(self, index):
        self._place(Player.HUMAN, index)
        return self.status

    def play_computer(self):
        if self.is_over:
            raise GameOverError(self.status)

        index = select_computer_move(self.board, self.rng)
        self._place(Player.COMPUTER, index)
        return index

    def _place(self, player, index):
        if self.is_over:
            raise GameOverError(self.status)

        # apply_move raises before anything here changes
        self.board = apply_move(self.board, player, index)
        self.last_player = player

        if check_win(self.board, player):
            self.status = WIN_STATUS[player]
            self.winning_line = winning_pattern(self.board, player)
        elif check_draw(self.board):
            self.status = GameStatus.DRAW
