from dataclasses import dataclass

from tictactoe.session import GameStatus


@dataclass(frozen=True)
class AlertItem:
    title: str
    message: str
    button_title: str


# One message per way the game can end
class AlertContext:
    human_wins = AlertItem(title="YOU WIN!",
                           message="Congrats! You've beaten the robot",
                           button_title="Hell yeah")

    computer_wins = AlertItem(title="LOSER!",
                              message="You should think about training your brain",
                              button_title="Hell no")

    draw = AlertItem(title="DRAW",
                     message="Bruh moment",
                     button_title="Hell bruh")


def alert_for(status):
    return {
        GameStatus.HUMAN_WON: AlertContext.human_wins,
        GameStatus.COMPUTER_WON: AlertContext.computer_wins,
        GameStatus.DRAW: AlertContext.draw,
    }.get(status)
