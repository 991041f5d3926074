"""Tests for ranking every holding on a board."""
import logging
import sys

import pytest
from holdem_trainer.core.card import parse_cards
from holdem_trainer.core.errors import InvalidInputError
from holdem_trainer.evaluation.constants import HOLDINGS_PER_BOARD
from holdem_trainer.evaluation.types import HandCategory
from holdem_trainer.reading.holdings import find_holding, group_key, rank_all_holdings, rank_key


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for all tests."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


@pytest.fixture(scope="module")
def paired_board():
    return parse_cards("Ks Kc 6d 5s 3h")


@pytest.fixture(scope="module")
def paired_groups(paired_board):
    return rank_all_holdings(paired_board)


@pytest.fixture(scope="module")
def flush_board():
    return parse_cards("As Ks 9s 5s 2d")


@pytest.fixture(scope="module")
def flush_groups(flush_board):
    return rank_all_holdings(flush_board)


def _group(groups, category):
    return next(group for group in groups if group.category == category)


@pytest.mark.parametrize("groups_fixture", ["paired_groups", "flush_groups"])
def test_exhaustive(request, groups_fixture):
    """Every one of the 1081 holdings is counted exactly once."""
    groups = request.getfixturevalue(groups_fixture)
    assert sum(group.total_combos for group in groups) == HOLDINGS_PER_BOARD
    assert sum(ranked.combos for group in groups for ranked in group.holdings) == HOLDINGS_PER_BOARD


@pytest.mark.parametrize("groups_fixture", ["paired_groups", "flush_groups"])
def test_category_order(request, groups_fixture):
    """Groups run strongest category first with no repeats."""
    groups = request.getfixturevalue(groups_fixture)
    categories = [group.category for group in groups]
    assert categories == sorted(categories, reverse=True)
    assert len(set(categories)) == len(categories)


@pytest.mark.parametrize("groups_fixture", ["paired_groups", "flush_groups"])
def test_within_group_order(request, groups_fixture):
    """Holdings in a group share its category and never increase in strength."""
    groups = request.getfixturevalue(groups_fixture)
    for group in groups:
        assert all(ranked.category == group.category for ranked in group.holdings)
        tiebreaks = [ranked.best_hand.tiebreak for ranked in group.holdings]
        assert tiebreaks == sorted(tiebreaks, reverse=True)


@pytest.mark.parametrize("groups_fixture", ["paired_groups", "flush_groups"])
def test_subgroups_partition_holdings(request, groups_fixture):
    """Subgroups split the holdings into runs with distinct keys."""
    groups = request.getfixturevalue(groups_fixture)
    for group in groups:
        flattened = [ranked for subgroup in group.subgroups for ranked in subgroup.holdings]
        assert flattened == list(group.holdings)
        keys = [subgroup.key for subgroup in group.subgroups]
        assert len(set(keys)) == len(keys)
        for subgroup in group.subgroups:
            assert all(group_key(ranked.best_hand) == subgroup.key for ranked in subgroup.holdings)


def test_deterministic(paired_board, paired_groups):
    """Ranking the same board twice gives identical output."""
    again = rank_all_holdings(paired_board)
    assert [(g.category, g.total_combos) for g in again] == [(g.category, g.total_combos) for g in paired_groups]
    for group1, group2 in zip(again, paired_groups):
        assert [(r.holding, r.combos) for r in group1.holdings] == [(r.holding, r.combos) for r in group2.holdings]


def test_paired_board_nuts(paired_groups):
    """On K♠K♣6♦5♠3♥ the only quads holding is K♥K♦."""
    top = paired_groups[0]
    assert top.category == HandCategory.FOUR_OF_A_KIND
    assert top.total_combos == 1
    assert set(top.holdings[0].holding) == set(parse_cards("Kh Kd"))


def test_paired_board_full_houses(paired_groups):
    """Kings full come first, then the sets that fill up with kings."""
    full_houses = _group(paired_groups, HandCategory.FULL_HOUSE)
    assert [ranked.best_hand.tiebreak for ranked in full_houses.holdings] == [
        (13, 6), (13, 5), (13, 3), (6, 13), (5, 13), (3, 13),
    ]
    assert [ranked.combos for ranked in full_houses.holdings] == [6, 6, 6, 3, 3, 3]
    assert full_houses.total_combos == 27
    assert [subgroup.description for subgroup in full_houses.subgroups][:2] == [
        "Full House, Kings over Sixes",
        "Full House, Kings over Fives",
    ]


def test_kings_full_ranks_above_sixes_full(paired_groups):
    """K♥6♥ sits above 6♠6♣ within the full-house group."""
    full_houses = list(_group(paired_groups, HandCategory.FULL_HOUSE).holdings)
    kings_full = find_holding(paired_groups, parse_cards("Kh 6h"))
    sixes_full = find_holding(paired_groups, parse_cards("6s 6c"))
    assert kings_full.best_hand.tiebreak == (13, 6)
    assert sixes_full.best_hand.tiebreak == (6, 13)
    assert full_houses.index(kings_full) < full_houses.index(sixes_full)


def test_paired_board_straights(paired_groups):
    """Only 7-4 and 4-2 make straights; each collapses 16 suit combos."""
    straights = _group(paired_groups, HandCategory.STRAIGHT)
    assert [subgroup.key for subgroup in straights.subgroups] == [7, 6]
    assert [rank_key(ranked.holding) for ranked in straights.holdings] == [(7, 4), (4, 2)]
    assert [ranked.combos for ranked in straights.holdings] == [16, 16]
    assert straights.total_combos == 32


def test_non_flush_categories_are_deduplicated(paired_groups):
    """Rank-driven groups keep one holding per rank multiset."""
    for group in paired_groups:
        assert not group.category.is_flush_related
        for subgroup in group.subgroups:
            keys = [rank_key(ranked.holding) for ranked in subgroup.holdings]
            assert len(set(keys)) == len(keys)


def test_flush_categories_keep_every_holding(flush_board, flush_groups):
    """Suit-driven groups list every concrete holding."""
    flushes = _group(flush_groups, HandCategory.FLUSH)
    assert flushes is flush_groups[0]
    assert len(flushes.holdings) == flushes.total_combos
    assert all(ranked.combos == 1 for ranked in flushes.holdings)
    assert len({frozenset(ranked.holding) for ranked in flushes.holdings}) == flushes.total_combos
    assert len(flushes.subgroups) == 1


def test_flush_board_nuts(flush_groups):
    """Q♠J♠ makes the nut flush on A♠K♠9♠5♠2♦."""
    nuts = flush_groups[0].holdings[0]
    assert set(nuts.holding) == set(parse_cards("Qs Js"))
    assert nuts.best_hand.tiebreak == (14, 13, 12, 11, 9)


def test_find_folded_holding(paired_groups):
    """A suit variant that was deduplicated resolves to its representative."""
    representative = find_holding(paired_groups, parse_cards("Kd 6c"))
    assert representative.combos == 6
    assert rank_key(representative.holding) == (13, 6)


def test_find_holding_missing():
    """Looking up a holding in empty output is an error."""
    with pytest.raises(InvalidInputError):
        find_holding([], parse_cards("Ah Ad"))


@pytest.mark.parametrize("board", ["Ks Kc 6d 5s", "Ks Kc 6d 5s 3h 2c", "Ks Ks 6d 5s 3h"])
def test_invalid_boards(board):
    """Boards must be five distinct cards."""
    with pytest.raises(InvalidInputError):
        rank_all_holdings(parse_cards(board))
