"""Common types for poker evaluation."""
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Hashable, Tuple

from holdem_trainer.core.card import Card


@total_ordering
class HandCategory(Enum):
    """The ten hold'em hand categories, ordered from weakest to strongest."""
    HIGH_CARD = 'high-card'
    PAIR = 'pair'
    TWO_PAIR = 'two-pair'
    THREE_OF_A_KIND = 'three-of-a-kind'
    STRAIGHT = 'straight'
    FLUSH = 'flush'
    FULL_HOUSE = 'full-house'
    FOUR_OF_A_KIND = 'four-of-a-kind'
    STRAIGHT_FLUSH = 'straight-flush'
    ROYAL_FLUSH = 'royal-flush'

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.strength < other.strength

    @property
    def strength(self) -> int:
        """1 for high card up to 10 for a royal flush."""
        return _CATEGORY_STRENGTH[self]

    @property
    def display_name(self) -> str:
        """Title-case name, e.g. 'Three of a Kind'."""
        words = self.value.split('-')
        return ' '.join(w if w in ('of', 'a') else w.capitalize() for w in words)

    @property
    def is_flush_related(self) -> bool:
        """Flush, straight flush and royal flush depend on suits."""
        return self in (HandCategory.FLUSH, HandCategory.STRAIGHT_FLUSH, HandCategory.ROYAL_FLUSH)


_CATEGORY_STRENGTH = {category: index for index, category in enumerate(HandCategory, 1)}


@total_ordering
@dataclass(frozen=True, eq=False)
class EvaluatedHand:
    """
    Result of scoring exactly five cards.

    Hands order by category first and then by ``tiebreak``. Two hands that
    differ only in suits compare equal.

    Attributes:
        category: Hand category
        cards: The five cards, highest rank first
        tiebreak: Category-specific rank values compared lexicographically
        rank_counts: (rank value, count) pairs, most frequent and then highest first
        description: Basic description, e.g. 'Full House, Kings over Sixes'
    """
    category: HandCategory
    cards: Tuple[Card, ...]
    tiebreak: Tuple[int, ...]
    rank_counts: Tuple[Tuple[int, int], ...]
    description: str

    @property
    def sort_key(self) -> Tuple[int, Tuple[int, ...]]:
        return (self.category.strength, self.tiebreak)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EvaluatedHand):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EvaluatedHand):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __str__(self) -> str:
        return f"{self.description} [{' '.join(str(c) for c in self.cards)}]"


@dataclass(frozen=True)
class RankedHolding:
    """A two-card holding paired with the best hand it makes on a board."""
    holding: Tuple[Card, Card]
    best_hand: EvaluatedHand
    combos: int = 1

    @property
    def category(self) -> HandCategory:
        return self.best_hand.category


@dataclass(frozen=True)
class HoldingSubgroup:
    """Holdings that share a grouping key (e.g. the same full house)."""
    key: Hashable
    holdings: Tuple[RankedHolding, ...]

    @property
    def description(self) -> str:
        return self.holdings[0].best_hand.description


@dataclass(frozen=True)
class RankedHoldingGroup:
    """
    All holdings that make one category on a board.

    Attributes:
        category: The shared hand category
        holdings: Deduplicated holdings, strongest first
        total_combos: Number of concrete two-card holdings before deduplication
        subgroups: ``holdings`` split into runs sharing a grouping key
    """
    category: HandCategory
    holdings: Tuple[RankedHolding, ...]
    total_combos: int
    subgroups: Tuple[HoldingSubgroup, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.holdings)

