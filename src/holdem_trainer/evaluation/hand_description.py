from typing import List, Sequence, Tuple

from holdem_trainer.core.card import Rank
from holdem_trainer.evaluation.types import EvaluatedHand, HandCategory


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    BASIC_DESCRIPTIONS = {category: category.display_name for category in HandCategory}

    def describe(self, category: HandCategory, tiebreak: Sequence[int]) -> str:
        """
        Basic description from a category and its tiebreak values.

        Suit-driven categories keep their plain names so every flush lands in
        one group; rank-driven ones name the ranks that define the hand.
        """
        return self._describe(category, tuple(tiebreak), detailed=False)

    def describe_hand(self, hand: EvaluatedHand) -> str:
        """Get a basic description of the hand."""
        return self._describe(hand.category, hand.tiebreak, detailed=False)

    def describe_hand_detailed(self, hand: EvaluatedHand) -> str:
        """Get a detailed description of the hand."""
        return self._describe(hand.category, hand.tiebreak, detailed=True)

    def short_code(self, hand: EvaluatedHand) -> str:
        """
        Compact rank code, e.g. 'KKK66' or '5432A'.

        Ranks are listed most frequent first; straights list the ace last
        when it plays low.
        """
        if hand.category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH) and hand.tiebreak[0] == 5:
            return '5432A'
        return ''.join(str(Rank.from_numeric(value)) * count for value, count in hand.rank_counts)

    def _describe(self, category: HandCategory, tiebreak: Tuple[int, ...], detailed: bool) -> str:
        names = [Rank.from_numeric(value) for value in tiebreak]

        if category == HandCategory.ROYAL_FLUSH:
            return self.BASIC_DESCRIPTIONS[category]
        elif category == HandCategory.STRAIGHT_FLUSH:
            return f"{names[0].full_name}-high Straight Flush" if detailed else "Straight Flush"
        elif category == HandCategory.FOUR_OF_A_KIND:
            quads = f"Four {names[0].plural_name}"
            return f"{quads}, {names[1].full_name} kicker" if detailed else quads
        elif category == HandCategory.FULL_HOUSE:
            return f"Full House, {names[0].plural_name} over {names[1].plural_name}"
        elif category == HandCategory.FLUSH:
            return f"{names[0].full_name}-high Flush" if detailed else "Flush"
        elif category == HandCategory.STRAIGHT:
            return f"{names[0].full_name}-high Straight" if detailed else "Straight"
        elif category == HandCategory.THREE_OF_A_KIND:
            trips = f"Three {names[0].plural_name}"
            return f"{trips}, {self._kickers(names[1:])}" if detailed else trips
        elif category == HandCategory.TWO_PAIR:
            pairs = f"Two Pair, {names[0].plural_name} and {names[1].plural_name}"
            return f"{pairs}, {names[2].full_name} kicker" if detailed else pairs
        elif category == HandCategory.PAIR:
            pair = f"Pair of {names[0].plural_name}"
            return f"{pair}, {self._kickers(names[1:])}" if detailed else pair
        else:
            high = f"{names[0].full_name} High"
            return f"{high}, {self._kickers(names[1:])}" if detailed else high

    @staticmethod
    def _kickers(ranks: List[Rank]) -> str:
        label = 'kicker' if len(ranks) == 1 else 'kickers'
        return f"{'-'.join(rank.full_name for rank in ranks)} {label}"


describer = HandDescriber()
