"""Community-card drill: deal a board and read which holdings make what."""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from holdem_trainer.core.card import Card, Suit
from holdem_trainer.core.deck import draw_board
from holdem_trainer.evaluation.evaluator import best_hand
from holdem_trainer.evaluation.types import HandCategory, RankedHolding, RankedHoldingGroup
from holdem_trainer.reading.holdings import find_holding, rank_all_holdings

logger = logging.getLogger(__name__)

# Suit preference when showing a rank-only holding
DISPLAY_SUIT_ORDER = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)


def display_holding(ranked: RankedHolding, board: Sequence[Card]) -> Tuple[Card, ...]:
    """
    Cards to show for a ranked holding.

    Flush-related holdings are shown exactly. Deduplicated holdings stand for
    every suit variant, so each card is given the first suit (hearts,
    diamonds, clubs, spades) that is not on the board for that rank, with the
    two hole cards in different suits. A suit choice is only used when the
    shown cards still make the same hand as the holding; otherwise the next
    choice is tried, and the stored holding is shown if none fits.
    """
    if ranked.category.is_flush_related:
        return ranked.holding

    on_board = set(board)
    first, second = ranked.holding
    for first_suit in DISPLAY_SUIT_ORDER:
        shown_first = Card(first.rank, first_suit)
        if shown_first in on_board:
            continue
        for second_suit in DISPLAY_SUIT_ORDER:
            shown_second = Card(second.rank, second_suit)
            if second_suit == first_suit or shown_second in on_board:
                continue
            shown = (shown_first, shown_second)
            if best_hand(board, shown) == ranked.best_hand:
                return shown
    return ranked.holding


@dataclass(frozen=True)
class HandReadingRound:
    """
    One board with its full holding ranking.

    Attributes:
        board: The five community cards
        groups: ``rank_all_holdings`` output for the board
    """
    board: Tuple[Card, ...]
    groups: Tuple[RankedHoldingGroup, ...]

    @classmethod
    def for_board(cls, board: Sequence[Card]) -> 'HandReadingRound':
        board = tuple(board)
        return cls(board=board, groups=tuple(rank_all_holdings(board)))

    @classmethod
    def deal(cls, rng: Optional[random.Random] = None) -> 'HandReadingRound':
        """Deal a random board and rank every holding on it."""
        round_ = cls.for_board(draw_board(rng))
        logger.info(
            f"New board {' '.join(str(c) for c in round_.board)}: nuts are "
            f"{round_.nuts.best_hand.description}"
        )
        return round_

    @property
    def nuts(self) -> RankedHolding:
        """The strongest holding on this board."""
        return self.groups[0].holdings[0]

    @property
    def categories(self) -> List[HandCategory]:
        """Categories some holding makes, strongest first."""
        return [group.category for group in self.groups]

    @property
    def total_combos(self) -> int:
        return sum(group.total_combos for group in self.groups)

    def group_for(self, category: HandCategory) -> Optional[RankedHoldingGroup]:
        for group in self.groups:
            if group.category == category:
                return group
        return None

    def category_of(self, holding: Sequence[Card]) -> HandCategory:
        """Category ``holding`` makes on this board."""
        return best_hand(self.board, holding).category

    def check_guess(self, category: HandCategory, holding: Sequence[Card]) -> bool:
        """True when ``holding`` makes exactly ``category`` on this board."""
        return self.category_of(holding) == category

    def rank_of(self, holding: Sequence[Card]) -> int:
        """
        1-based place of ``holding`` among distinct hand strengths on the board.

        Holdings that make the same hand share a place, so the nuts are 1.
        """
        target = find_holding(self.groups, holding).best_hand
        strengths = sorted({ranked.best_hand.sort_key for group in self.groups for ranked in group.holdings},
                           reverse=True)
        return strengths.index(target.sort_key) + 1
