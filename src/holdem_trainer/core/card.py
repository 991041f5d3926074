"""Card related classes and utilities."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class Suit(Enum):
    """Card suits. Suits carry no ranking in hold'em."""
    SPADES = 's'
    HEARTS = 'h'
    DIAMONDS = 'd'
    CLUBS = 'c'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Unicode pip for display, e.g. '♠'."""
        return _SUIT_SYMBOLS[self]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()


class Rank(Enum):
    """Card ranks, declared from highest to lowest."""
    ACE = 'A'
    KING = 'K'
    QUEEN = 'Q'
    JACK = 'J'
    TEN = 'T'
    NINE = '9'
    EIGHT = '8'
    SEVEN = '7'
    SIX = '6'
    FIVE = '5'
    FOUR = '4'
    THREE = '3'
    TWO = '2'

    def __str__(self) -> str:
        return self.value

    @property
    def numeric(self) -> int:
        """Rank value used for ordering: 2..14, ace high."""
        return _RANK_VALUES[self]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        """Plural used in hand descriptions, e.g. 'Sixes', 'Kings'."""
        if self == Rank.SIX:
            return 'Sixes'
        return f"{self.full_name}s"

    @classmethod
    def from_numeric(cls, value: int) -> 'Rank':
        """Look up a rank by its numeric value. Accepts 1 as the low ace."""
        if value == 1:
            return cls.ACE
        for rank, rank_value in _RANK_VALUES.items():
            if rank_value == value:
                return rank
        raise ValueError(f"Invalid rank value: {value}")


_RANK_VALUES = {rank: 14 - index for index, rank in enumerate(Rank)}

_SUIT_SYMBOLS = {
    Suit.SPADES: '♠',
    Suit.HEARTS: '♥',
    Suit.DIAMONDS: '♦',
    Suit.CLUBS: '♣',
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable and hashable, so they can be used in sets and as
    dictionary keys. Two cards are equal when both rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (spades, hearts, diamonds, clubs)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @property
    def pretty(self) -> str:
        """Display form with a suit symbol, e.g. 'K♠'."""
        return f"{self.rank}{self.suit.symbol}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades. Case is
                      ignored and '10' is accepted for the ten.

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        text = card_str.strip()
        if text[:2] == '10':
            text = 'T' + text[2:]
        if len(text) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = text[0], text[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)


_CARD_PATTERN = re.compile(r'(10|[2-9tjqka])([shdc])', re.IGNORECASE)


def parse_cards(text: str) -> List[Card]:
    """
    Parse a run of cards such as 'Ks Kc 6d 5s 3h' or 'KsKc6d5s3h'.

    Separators (spaces, commas) are optional.

    Raises:
        ValueError: If anything other than cards and separators is present
    """
    stripped = re.sub(r'[\s,]+', '', text)
    matches = _CARD_PATTERN.findall(stripped)
    if ''.join(rank + suit for rank, suit in matches).lower() != stripped.lower():
        raise ValueError(f"Invalid card list: {text}")
    return [Card.from_string(rank + suit) for rank, suit in matches]


def format_cards(cards: Iterable[Card], pretty: bool = False) -> str:
    """Join cards for display, e.g. 'Ks Kc 6d'."""
    return ' '.join(card.pretty if pretty else str(card) for card in cards)
