"""
Rank every two-card holding against a fixed board.

Given a five-card board, each of the 1081 holdings drawn from the other 47
cards is paired with its best hand. Holdings are bucketed by category, split
into subgroups that share a grouping key, deduplicated by rank where suits do
not matter, and sorted strongest first.
"""
import logging
from itertools import groupby
from typing import Dict, Hashable, List, Sequence, Tuple

from holdem_trainer.core.card import Card
from holdem_trainer.core.combinations import combinations
from holdem_trainer.core.deck import remaining
from holdem_trainer.core.errors import InvalidInputError
from holdem_trainer.evaluation.constants import BOARD_SIZE, CATEGORY_ORDER, HOLDING_SIZE, TIEBREAK_GROUPED
from holdem_trainer.evaluation.evaluator import HandEvaluator, evaluator as default_evaluator
from holdem_trainer.evaluation.types import (
    EvaluatedHand, HandCategory, HoldingSubgroup, RankedHolding, RankedHoldingGroup,
)

logger = logging.getLogger(__name__)


def group_key(hand: EvaluatedHand) -> Hashable:
    """
    Key that splits a category into display subgroups.

    Full houses, two pair and quads group by their tiebreak tuple, straights
    by their top card, and everything else by its basic description.
    """
    if hand.category in TIEBREAK_GROUPED:
        return hand.tiebreak
    if hand.category == HandCategory.STRAIGHT:
        return hand.tiebreak[0]
    return hand.description


def rank_key(holding: Sequence[Card]) -> Tuple[int, ...]:
    """Rank multiset of a holding, highest first, ignoring suits."""
    return tuple(sorted((card.rank.numeric for card in holding), reverse=True))


def _deduplicate(category: HandCategory, members: List[RankedHolding]) -> List[RankedHolding]:
    """
    Collapse suit variants inside one category.

    Within each grouping key, the first holding seen for a rank multiset is
    kept and carries the count of every variant folded into it. Flush-related
    categories keep every holding since the suits are what make the hand.
    """
    if category.is_flush_related:
        return members

    retained: Dict[Tuple[Hashable, Tuple[int, ...]], List[RankedHolding]] = {}
    for ranked in members:
        retained.setdefault((group_key(ranked.best_hand), rank_key(ranked.holding)), []).append(ranked)

    return [
        RankedHolding(holding=variants[0].holding, best_hand=variants[0].best_hand, combos=len(variants))
        for variants in retained.values()
    ]


def rank_all_holdings(
    board: Sequence[Card],
    evaluator: HandEvaluator = default_evaluator,
) -> List[RankedHoldingGroup]:
    """
    Enumerate, group and sort every holding on ``board``.

    Args:
        board: Exactly five distinct cards
        evaluator: Evaluator used to score holdings

    Returns:
        One RankedHoldingGroup per category that occurs, strongest category
        first. Holdings inside a group are sorted by descending tiebreak with
        ties kept in enumeration order.

    Raises:
        InvalidInputError: If the board is not five distinct cards
    """
    board = list(board)
    if len(board) != BOARD_SIZE:
        raise InvalidInputError(f"Board must have exactly {BOARD_SIZE} cards, got {len(board)}")
    deck = remaining(board)

    buckets: Dict[HandCategory, List[RankedHolding]] = {}
    for holding in combinations(deck, HOLDING_SIZE):
        ranked = RankedHolding(holding=holding, best_hand=evaluator.best_hand(board, holding))
        buckets.setdefault(ranked.category, []).append(ranked)

    groups = []
    for category in CATEGORY_ORDER:
        members = buckets.get(category)
        if not members:
            continue

        holdings = sorted(_deduplicate(category, members), key=lambda r: r.best_hand.tiebreak, reverse=True)
        subgroups = tuple(
            HoldingSubgroup(key=key, holdings=tuple(run))
            for key, run in groupby(holdings, key=lambda r: group_key(r.best_hand))
        )
        groups.append(RankedHoldingGroup(
            category=category,
            holdings=tuple(holdings),
            total_combos=len(members),
            subgroups=subgroups,
        ))

    logger.debug(
        f"Ranked {sum(g.total_combos for g in groups)} holdings into {len(groups)} categories "
        f"on board {' '.join(str(c) for c in board)}"
    )
    return groups


def find_holding(groups: Sequence[RankedHoldingGroup], holding: Sequence[Card]) -> RankedHolding:
    """
    Locate the entry that represents ``holding`` in ranked output.

    Exact cards are tried first. Failing that, the holding was folded into a
    rank-driven entry, so it is matched by rank multiset outside the flush
    categories.

    Raises:
        InvalidInputError: If the holding is not part of the output
    """
    wanted = set(holding)
    for group in groups:
        for ranked in group.holdings:
            if set(ranked.holding) == wanted:
                return ranked

    target = rank_key(holding)
    for group in groups:
        if group.category.is_flush_related:
            continue
        for ranked in group.holdings:
            if rank_key(ranked.holding) == target:
                return ranked
    raise InvalidInputError(f"Holding {' '.join(str(c) for c in holding)} not found in ranked groups")
