"""Five-card hand evaluation and best-hand selection."""
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from holdem_trainer.core.card import Card
from holdem_trainer.core.combinations import combinations
from holdem_trainer.core.errors import InvalidInputError
from holdem_trainer.evaluation.cache import EvaluationCache
from holdem_trainer.evaluation.constants import BOARD_SIZE, HAND_SIZE, HOLDING_SIZE, WHEEL_VALUES
from holdem_trainer.evaluation.hand_description import HandDescriber
from holdem_trainer.evaluation.types import EvaluatedHand, HandCategory


class HandEvaluator:
    """Classifies five-card hands and picks the best five of seven."""

    def __init__(self, cache: Optional[EvaluationCache] = None):
        self.cache = cache if cache is not None else EvaluationCache()
        self.describer = HandDescriber()

    def evaluate_hand(self, cards: Iterable[Card]) -> EvaluatedHand:
        """
        Score exactly five cards.

        Args:
            cards: Five distinct cards in any order

        Returns:
            EvaluatedHand with category, sorted cards, tiebreak and description

        Raises:
            InvalidInputError: If there are not exactly five distinct cards
        """
        cards = list(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidInputError(f"Hand evaluation requires exactly {HAND_SIZE} cards, got {len(cards)}")
        if len(set(cards)) != HAND_SIZE:
            raise InvalidInputError(f"Duplicate cards in hand: {' '.join(str(c) for c in cards)}")

        key = ''.join(sorted(str(card) for card in cards))
        return self.cache.get_evaluation(key, lambda: self._classify(cards))

    def compare_hands(self, hand1: EvaluatedHand, hand2: EvaluatedHand) -> int:
        """
        Compare two evaluated hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        if hand1 > hand2:
            return 1
        elif hand1 < hand2:
            return -1
        return 0

    def best_hand(self, board: Sequence[Card], holding: Sequence[Card]) -> EvaluatedHand:
        """
        Best five-card hand from a five-card board plus a two-card holding.

        All 21 five-card subsets are scored; the first maximal one in subset
        order is returned, so the result is deterministic.

        Raises:
            InvalidInputError: On wrong card counts or any repeated card
        """
        board = list(board)
        holding = list(holding)
        if len(board) != BOARD_SIZE:
            raise InvalidInputError(f"Board must have exactly {BOARD_SIZE} cards, got {len(board)}")
        if len(holding) != HOLDING_SIZE:
            raise InvalidInputError(f"Holding must have exactly {HOLDING_SIZE} cards, got {len(holding)}")

        cards = board + holding
        if len(set(cards)) != len(cards):
            raise InvalidInputError(
                f"Board {' '.join(str(c) for c in board)} and holding "
                f"{' '.join(str(c) for c in holding)} must be seven distinct cards"
            )

        best = None
        for combo in combinations(cards, HAND_SIZE):
            hand = self.evaluate_hand(combo)
            if best is None or hand > best:
                best = hand
        return best

    def _classify(self, cards: List[Card]) -> EvaluatedHand:
        ordered = sorted(cards, key=lambda c: c.rank.numeric, reverse=True)
        values = [card.rank.numeric for card in ordered]
        is_flush = len({card.suit for card in cards}) == 1
        straight_high = self._straight_high(values)

        counts = Counter(values)
        rank_counts = tuple(sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True))
        pattern = [count for _, count in rank_counts]
        grouped = tuple(value for value, _ in rank_counts)

        if is_flush and straight_high == 14:
            category, tiebreak = HandCategory.ROYAL_FLUSH, tuple(values)
        elif is_flush and straight_high:
            # The steel wheel plays its ace low so it sorts below six-high
            category, tiebreak = HandCategory.STRAIGHT_FLUSH, tuple(range(straight_high, straight_high - 5, -1))
        elif pattern[0] == 4:
            category, tiebreak = HandCategory.FOUR_OF_A_KIND, grouped
        elif pattern == [3, 2]:
            category, tiebreak = HandCategory.FULL_HOUSE, grouped
        elif is_flush:
            category, tiebreak = HandCategory.FLUSH, tuple(values)
        elif straight_high:
            category, tiebreak = HandCategory.STRAIGHT, (straight_high,)
        elif pattern[0] == 3:
            category, tiebreak = HandCategory.THREE_OF_A_KIND, grouped
        elif pattern[:2] == [2, 2]:
            category, tiebreak = HandCategory.TWO_PAIR, grouped
        elif pattern[0] == 2:
            category, tiebreak = HandCategory.PAIR, grouped
        else:
            category, tiebreak = HandCategory.HIGH_CARD, tuple(values)

        return EvaluatedHand(
            category=category,
            cards=tuple(ordered),
            tiebreak=tiebreak,
            rank_counts=rank_counts,
            description=self.describer.describe(category, tiebreak),
        )

    @staticmethod
    def _straight_high(values: List[int]) -> Optional[int]:
        """Top card of a straight in ``values`` (5 for the wheel), else None."""
        distinct = sorted(set(values), reverse=True)
        if len(distinct) != HAND_SIZE:
            return None
        if distinct[0] - distinct[-1] == 4:
            return distinct[0]
        if tuple(distinct) == WHEEL_VALUES:
            return 5
        return None


# Create global evaluator instance
evaluator = HandEvaluator()


def evaluate(cards: Iterable[Card]) -> EvaluatedHand:
    """Score exactly five cards with the shared evaluator."""
    return evaluator.evaluate_hand(cards)


def compare(hand1: EvaluatedHand, hand2: EvaluatedHand) -> int:
    """1, -1 or 0 as ``hand1`` beats, loses to, or ties ``hand2``."""
    return evaluator.compare_hands(hand1, hand2)


def best_hand(board: Sequence[Card], holding: Sequence[Card]) -> EvaluatedHand:
    """Best five-card hand from board and holding with the shared evaluator."""
    return evaluator.best_hand(board, holding)
