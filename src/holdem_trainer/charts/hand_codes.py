"""Starting-hand codes for the 13x13 preflop grid ('AKs', 'QJo', '77')."""
import re
from typing import List, Optional, Sequence, Union

from holdem_trainer.core.card import Card, Rank
from holdem_trainer.core.errors import InvalidInputError

RANKS: List[str] = [rank.value for rank in Rank]

_CODE_PATTERN = re.compile(r'^([2-9TJQKA])([2-9TJQKA])([so]?)$')


def _rank_str(rank: Union[Rank, str]) -> str:
    value = rank.value if isinstance(rank, Rank) else str(rank).upper()
    if value == '10':
        value = 'T'
    if value not in RANKS:
        raise InvalidInputError(f"Invalid rank: {rank}")
    return value


def code_hand(rank1: Union[Rank, str], rank2: Union[Rank, str], suited: Optional[bool]) -> str:
    """
    Build a grid code from two ranks.

    Pairs come back as e.g. '77' whatever ``suited`` says. Otherwise the higher
    rank leads and the code ends in 's' (suited), 'o' (offsuit), or nothing
    when ``suited`` is None.
    """
    r1, r2 = _rank_str(rank1), _rank_str(rank2)
    if r1 == r2:
        return f"{r1}{r2}"
    high, low = sorted((r1, r2), key=RANKS.index)
    if suited is None:
        return f"{high}{low}"
    return f"{high}{low}{'s' if suited else 'o'}"


def hand_code(holding: Sequence[Card]) -> str:
    """Grid code for a concrete two-card holding."""
    if len(holding) != 2:
        raise InvalidInputError(f"A holding has exactly 2 cards, got {len(holding)}")
    first, second = holding
    if first == second:
        raise InvalidInputError(f"Holding repeats {first}")
    return code_hand(first.rank, second.rank, first.suit == second.suit)


def normalize_code(code: str) -> str:
    """
    Canonical form of a user-typed code: 'kas' -> 'AKs', 'TT' -> 'TT'.

    Raises:
        InvalidInputError: For anything that is not a pair or a suited or
                           offsuit two-rank code
    """
    text = code.strip().replace('10', 'T')
    match = _CODE_PATTERN.match(text[:2].upper() + text[2:].lower())
    if not match:
        raise InvalidInputError(f"Invalid hand code: {code}")
    r1, r2, suffix = match.groups()
    if r1 == r2:
        if suffix:
            raise InvalidInputError(f"Pairs cannot be suited or offsuit: {code}")
        return f"{r1}{r2}"
    if not suffix:
        raise InvalidInputError(f"Hand code needs 's' or 'o': {code}")
    return code_hand(r1, r2, suffix == 's')


def matrix_codes() -> List[List[str]]:
    """
    The 169 codes laid out as a 13x13 grid, aces first.

    Cells above the diagonal are suited, cells below are offsuit, and the
    diagonal holds the pairs.
    """
    return [
        [code_hand(RANKS[i], RANKS[j], i < j) for j in range(len(RANKS))]
        for i in range(len(RANKS))
    ]


def all_hand_codes() -> List[str]:
    """All 169 codes in grid order, row by row."""
    return [code for row in matrix_codes() for code in row]


def combo_count(code: str) -> int:
    """Concrete two-card holdings behind a code: 6 pairs, 4 suited, 12 offsuit."""
    code = normalize_code(code)
    if len(code) == 2:
        return 6
    return 4 if code.endswith('s') else 12
