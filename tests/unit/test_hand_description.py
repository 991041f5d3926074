"""Tests for hand descriptions."""
import pytest
from holdem_trainer.core.card import parse_cards
from holdem_trainer.evaluation.evaluator import evaluate
from holdem_trainer.evaluation.hand_description import HandDescriber
from holdem_trainer.evaluation.types import HandCategory


@pytest.fixture
def describer():
    return HandDescriber()


@pytest.mark.parametrize("cards,expected", [
    ("As Ks Qs Js Ts", "Royal Flush"),
    ("Ks Qs Js Ts 9s", "King-high Straight Flush"),
    ("Ah 2h 3h 4h 5h", "Five-high Straight Flush"),
    ("9c 9d 9h 9s 2c", "Four Nines, Two kicker"),
    ("Kh Kd Kc 6s 6h", "Full House, Kings over Sixes"),
    ("Ah Jh 8h 4h 2h", "Ace-high Flush"),
    ("Ac 2d 3h 4s 5c", "Five-high Straight"),
    ("7c 7d 7h Ks 2c", "Three Sevens, King-Two kickers"),
    ("Jc Jd 4h 4s Ac", "Two Pair, Jacks and Fours, Ace kicker"),
    ("Qc Qd 9h 5s 2c", "Pair of Queens, Nine-Five-Two kickers"),
    ("Ac Jd 9h 5s 3c", "Ace High, Jack-Nine-Five-Three kickers"),
])
def test_detailed_descriptions(describer, cards, expected):
    """Detailed descriptions name the ranks that matter."""
    assert describer.describe_hand_detailed(evaluate(parse_cards(cards))) == expected


@pytest.mark.parametrize("cards,expected", [
    ("Ks Qs Js Ts 9s", "Straight Flush"),
    ("Ah Jh 8h 4h 2h", "Flush"),
    ("Tc Jd Qh Ks Ac", "Straight"),
    ("Kh Kd Kc 6s 6h", "Full House, Kings over Sixes"),
    ("6c 6d 6h Ks 2c", "Three Sixes"),
])
def test_basic_descriptions(describer, cards, expected):
    """Basic descriptions keep suit-driven categories generic."""
    assert describer.describe_hand(evaluate(parse_cards(cards))) == expected


def test_describe_from_tiebreak(describer):
    """Descriptions can be built from a category and tiebreak alone."""
    assert describer.describe(HandCategory.FULL_HOUSE, (6, 13)) == "Full House, Sixes over Kings"
    assert describer.describe(HandCategory.TWO_PAIR, (13, 6, 5)) == "Two Pair, Kings and Sixes"
    assert describer.describe(HandCategory.PAIR, (2, 14, 13, 12)) == "Pair of Twos"


@pytest.mark.parametrize("cards,expected", [
    ("Kh Kd Kc 6s 6h", "KKK66"),
    ("6s 6h 6d Ks Kc", "666KK"),
    ("Jc Jd 4h 4s Ac", "JJ44A"),
    ("Ac Jd 9h 5s 3c", "AJ953"),
    ("Ac 2d 3h 4s 5c", "5432A"),
    ("Ah 2h 3h 4h 5h", "5432A"),
    ("9c 9d 9h 9s 2c", "99992"),
])
def test_short_code(describer, cards, expected):
    """Compact codes list the most frequent ranks first."""
    assert describer.short_code(evaluate(parse_cards(cards))) == expected
