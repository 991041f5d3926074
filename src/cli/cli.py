from typing import Optional

from holdem_trainer.charts.chart import Action
from holdem_trainer.core.card import format_cards
from holdem_trainer.trainer.hand_reading import HandReadingRound
from holdem_trainer.trainer.quiz import QuizSession
from .display import display_board, display_chart, display_entry, display_reading, display_verdict
from .setup import Session, get_position

MENU = [
    ("Chart", "chart"),
    ("Flashcards", "flash"),
    ("Quick Quiz", "quiz"),
    ("Hand Reading", "reading"),
    ("Change Position", "position"),
    ("Quit", "quit"),
]


def get_guess() -> Optional[Action]:
    """Prompt for R/C/F (or M); blank or 'q' ends the drill."""
    while True:
        choice = input("Your action [R]aise/[C]all/[F]old ([Q] to stop): ").strip()
        if not choice or choice.lower() == "q":
            return None
        try:
            return Action.from_string(choice)
        except ValueError:
            print("Invalid action, try again.")


def run_chart(session: Session) -> None:
    """Show the chart, then explain hand codes until the user presses Enter."""
    chart = session.chart_config.to_chart()
    display_chart(chart, session.position)
    while True:
        code = input("Hand code to explain (e.g. AKs, QJo, 77) or Enter to go back: ").strip()
        if not code:
            return
        try:
            display_entry(code, session.position, chart.entry(session.position, code))
        except ValueError as e:
            print(e)


def run_drill(session: Session, length: Optional[int]) -> None:
    """Flashcards when ``length`` is None, otherwise a fixed-length quiz."""
    quiz = QuizSession(
        session.chart_config.to_chart(),
        session.position,
        length=length,
        rng=session.rng,
        weights=session.chart_config.flashcard_weights,
    )
    while quiz.current is not None:
        print(f"\n[{quiz.position}] {quiz.current.code}")
        guess = get_guess()
        if guess is None:
            break
        display_verdict(quiz, quiz.answer(guess))
        quiz.next()
    print(f"\nFinal score: {quiz.score}")


def run_reading(session: Session) -> None:
    """Deal boards and reveal the holding ranking on request."""
    while True:
        round_ = HandReadingRound.deal(session.rng)
        display_board(round_.board)
        input("Work out the nuts, then press Enter to reveal...")
        nuts = round_.nuts
        print(f"Nuts: {format_cards(nuts.holding, pretty=True)} ({nuts.best_hand.description})")
        display_reading(round_)
        again = input("\nAnother board? [Y/n]: ").strip().lower()
        if again.startswith("n"):
            return


def run_trainer(session: Session) -> None:
    """Main menu loop."""
    while True:
        print(f"\n=== Hold'em Trainer ({session.position}) ===")
        for num, (label, _) in enumerate(MENU, 1):
            print(f"{num}: {label}")
        choice = input(f"Enter number (1-{len(MENU)}): ").strip()
        if not (choice.isdigit() and 1 <= int(choice) <= len(MENU)):
            print("Invalid choice, try again.")
            continue

        mode = MENU[int(choice) - 1][1]
        if mode == "chart":
            run_chart(session)
        elif mode == "flash":
            run_drill(session, None)
        elif mode == "quiz":
            run_drill(session, session.quiz_length)
        elif mode == "reading":
            run_reading(session)
        elif mode == "position":
            session.position = get_position(str(session.position))
        else:
            print("Goodbye.")
            return
