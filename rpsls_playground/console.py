"""Interactive text front end.

Everything that reads from or writes to the terminal lives here. Raw text
is turned into a `Move` before it reaches the game, so the core never sees
an invalid move.
"""

from .algorithms import ROSTER, resolve_character
from .engine import Move, Outcome
from .game import Game, RoundResult, Session

SHORT_MOVE_OPTIONS = {
    "r": Move.ROCK,
    "p": Move.PAPER,
    "sc": Move.SCISSORS,
    "l": Move.LIZARD,
    "sp": Move.SPOCK,
}

COMPUTER_NAMES = list(ROSTER)


class InvalidMoveError(ValueError):
    """Text that does not name a move."""


def parse_move(text: str) -> Move:
    """Turn a full move name or short alias into a `Move`."""
    choice = text.strip().lower()
    if choice in SHORT_MOVE_OPTIONS:
        return SHORT_MOVE_OPTIONS[choice]
    try:
        return Move(choice)
    except ValueError:
        hint = " Enter either 'sc' for scissors or 'sp' for spock." if choice == "s" else ""
        raise InvalidMoveError(f"'{text}' is not a valid move.{hint}") from None


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def prompt_name() -> str:
    while True:
        name = input("What's your name?\n").strip()
        if name:
            return name
        print("Sorry, you must enter a name.")


def select_move() -> Move:
    while True:
        choice = input("Choose a move: rock, paper, scissors, lizard, or spock:\n")
        try:
            return parse_move(choice)
        except InvalidMoveError as e:
            print(e)
            print("The choice you made was invalid. Please make a valid move.")


def select_opponent() -> str:
    while True:
        choice = input(f"Choose an opponent: {', '.join(COMPUTER_NAMES)}:\n").strip()
        character = resolve_character(choice)
        if character is not None:
            return character
        print("You must enter a valid opponent name.")


def play_again() -> bool:
    while True:
        response = input("Do you want to play again? (y/n)\n").strip().lower()
        if response in ("y", "n", "yes", "no"):
            return response in ("y", "yes")
        print("You should enter either 'y' or 'n'.")


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def display_score(game: Game):
    width = max(len(game.human.name), len(game.computer.name))
    print("-----------")
    print("Score Board")
    print(f"{game.human.name.ljust(width)}: {game.human.score}")
    print(f"{game.computer.name.ljust(width)}: {game.computer.score}")
    print("-----------")


def display_round(game: Game, result: RoundResult):
    print(f"{game.human.name} chose: {result.human_move.value}")
    print(f"{game.computer.name} chose: {result.opponent_move.value}")
    if result.outcome is Outcome.HUMAN_WINS:
        print(f"{game.human.name} won!")
    elif result.outcome is Outcome.OPPONENT_WINS:
        print(f"{game.computer.name} won!")
    else:
        print("It's a tie!")


def display_game_result(game: Game):
    print(f"*** {game.winner.name} won the game! ***")


# ---------------------------------------------------------------------------
# Loop
# ---------------------------------------------------------------------------

def play_game(session: Session) -> Game:
    game = session.new_game()
    print("\nNEW GAME!\n")
    display_score(game)
    while not game.is_over:
        result = game.play_round(select_move())
        display_round(game, result)
        display_score(game)
    display_game_result(game)
    return game


def run(session: Session):
    """Play games until the human declines a rematch."""
    print("Welcome to Rock, Paper, Scissors, Lizard, Spock!")
    print(f"You are playing against {session.computer.name}.")
    while True:
        play_game(session)
        if not play_again():
            break
    print("Thanks for playing Rock, Paper, Scissors, Lizard, Spock. Goodbye!")
