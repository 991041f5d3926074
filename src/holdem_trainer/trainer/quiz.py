"""Flashcard and quiz drills over a starting-hand chart."""
import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional, Union

from holdem_trainer.charts.chart import Action, ChartEntry, Position, StartingHandChart
from holdem_trainer.charts.hand_codes import all_hand_codes
from holdem_trainer.config.loader import DEFAULT_FLASHCARD_WEIGHTS
from holdem_trainer.core.errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    """A hand code to act on at a position, with the chart's answer."""
    code: str
    position: Position
    entry: ChartEntry

    @property
    def action(self) -> Action:
        return self.entry.action


@dataclass
class Score:
    correct: int = 0
    total: int = 0

    @property
    def accuracy(self) -> float:
        """Fraction answered correctly, 0.0 before any answer."""
        return self.correct / self.total if self.total else 0.0

    def __str__(self) -> str:
        return f"{self.correct}/{self.total}"


def is_correct(guess: Action, action: Action) -> bool:
    """
    A guess matches the chart action exactly, or the chart says Mix and the
    guess is Raise or Call.
    """
    if guess == action:
        return True
    return action == Action.MIX and guess in (Action.RAISE, Action.CALL)


def next_question(
    chart: StartingHandChart,
    position: Union[Position, str],
    rng: Optional[random.Random] = None,
    weights: Optional[Dict[Action, int]] = None,
) -> Question:
    """
    Pick a weighted random hand code for a position.

    Each of the 169 codes is weighted by its chart action (by default
    F=1, M=2, R/C=3) so playable hands come up more often than folds.
    """
    position = Position.from_string(position)
    rng = rng or random.Random()
    weights = weights or DEFAULT_FLASHCARD_WEIGHTS

    codes = all_hand_codes()
    entries = [chart.entry(position, code) for code in codes]
    code_weights = [weights.get(entry.action, 0) for entry in entries]
    if not any(code_weights):
        raise InvalidInputError(f"All flashcard weights are zero for {position}")

    index = rng.choices(range(len(codes)), weights=code_weights, k=1)[0]
    return Question(code=codes[index], position=position, entry=entries[index])


class QuizSession:
    """
    A run of chart questions with scoring.

    With ``length`` set this is a quiz that ends after that many answers; with
    ``length=None`` it is an open-ended flashcard drill.
    """

    def __init__(
        self,
        chart: StartingHandChart,
        position: Union[Position, str],
        length: Optional[int] = 5,
        rng: Optional[random.Random] = None,
        weights: Optional[Dict[Action, int]] = None,
    ):
        if length is not None and length < 1:
            raise InvalidInputError(f"Quiz length must be at least 1, got {length}")
        self.chart = chart
        self.position = Position.from_string(position)
        self.length = length
        self.rng = rng or random.Random()
        self.weights = weights
        self.score = Score()
        self.current: Optional[Question] = None
        self.answered = False
        self.next()

    @property
    def finished(self) -> bool:
        return self.length is not None and self.score.total >= self.length

    @property
    def remaining(self) -> Optional[int]:
        """Questions left to answer, or None for an open-ended drill."""
        if self.length is None:
            return None
        return self.length - self.score.total

    def next(self) -> Optional[Question]:
        """Advance to a fresh question; returns None once the quiz is over."""
        if self.finished:
            self.current = None
            return None
        self.current = next_question(self.chart, self.position, self.rng, self.weights)
        self.answered = False
        return self.current

    def answer(self, guess: Union[Action, str]) -> bool:
        """
        Score a guess for the current question.

        Raises:
            InvalidInputError: If there is no open question or it was already answered
        """
        if self.current is None:
            raise InvalidInputError("The quiz is finished")
        if self.answered:
            raise InvalidInputError(f"{self.current.code} has already been answered")
        if not isinstance(guess, Action):
            guess = Action.from_string(guess)

        correct = is_correct(guess, self.current.action)
        self.answered = True
        self.score.total += 1
        if correct:
            self.score.correct += 1
        logger.debug(
            f"{self.position} {self.current.code}: guessed {guess}, chart says {self.current.action} "
            f"({'correct' if correct else 'wrong'}), score {self.score}"
        )
        return correct

    def reset(self) -> None:
        """Start over with a zero score."""
        self.score = Score()
        self.next()
