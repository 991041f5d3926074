from typing import Sequence

from holdem_trainer.charts.chart import Action, ChartEntry, Position, StartingHandChart
from holdem_trainer.charts.hand_codes import RANKS
from holdem_trainer.core.card import Card, format_cards
from holdem_trainer.evaluation.hand_description import describer
from holdem_trainer.trainer.hand_reading import HandReadingRound, display_holding
from holdem_trainer.trainer.quiz import QuizSession


def display_chart(chart: StartingHandChart, position: Position) -> None:
    """Print the 13x13 chart for a position, one action letter per cell."""
    print(f"\n=== {chart.name}: {position} ===")
    description = chart.descriptions.get(position)
    if description:
        print(description)

    print("\n    " + " ".join(f"{rank:>3}" for rank in RANKS))
    for rank, row in zip(RANKS, chart.matrix(position)):
        print(f"{rank:>3} " + " ".join(f"{cell.action.value:>3}" for cell in row))

    counts = chart.action_counts(position)
    print("\n" + " | ".join(f"{action.label}: {counts[action]}" for action in Action))
    print("Upper right is suited, lower left offsuit, diagonal pairs.")


def display_entry(code: str, position: Position, entry: ChartEntry) -> None:
    """Print the explanation behind one chart cell."""
    print(f"\n{code} from {position}: {entry.action.label}")
    print(f"  {entry.reason}")
    if entry.detailed_reason and entry.detailed_reason != entry.reason:
        print(f"  {entry.detailed_reason}")
    for example in entry.examples:
        print(f"  - {example}")


def display_verdict(session: QuizSession, correct: bool) -> None:
    """Print the result of the last answer and the running score."""
    question = session.current
    verdict = "Correct!" if correct else f"Wrong. The chart says {question.action.label}."
    print(verdict)
    display_entry(question.code, question.position, question.entry)
    remaining = f" | {session.remaining} left" if session.remaining is not None else ""
    print(f"Score: {session.score} ({session.score.accuracy:.0%}){remaining}")


def display_board(board: Sequence[Card]) -> None:
    print("\n=== Board ===")
    print(f"  {format_cards(board, pretty=True)}")


def display_reading(round_: HandReadingRound) -> None:
    """Print every category on the board, strongest first, with subgroup separators."""
    for place, group in enumerate(round_.groups, 1):
        print(f"\n#{place} {group.category.display_name} ({group.total_combos} combos)")
        for index, subgroup in enumerate(group.subgroups):
            if index:
                print("  ---")
            for ranked in subgroup.holdings:
                shown = format_cards(display_holding(ranked, round_.board), pretty=True)
                combos = f" x{ranked.combos}" if ranked.combos > 1 else ""
                print(f"  {shown:<8} {describer.describe_hand_detailed(ranked.best_hand)}{combos}")
    print(f"\nTotal: {round_.total_combos} holdings")
