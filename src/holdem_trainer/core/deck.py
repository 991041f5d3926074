"""Deck implementation and card-universe helpers."""
import logging
import random
from typing import Iterable, List, Optional

from .card import Card, Rank, Suit
from .errors import InvalidInputError

logger = logging.getLogger(__name__)

DECK_SIZE = 52


def full_deck() -> List[Card]:
    """
    Return the 52-card universe in a fixed order.

    Cards are grouped by suit (spades, hearts, diamonds, clubs) and, within a
    suit, run from ace down to deuce.
    """
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def remaining(excluded: Iterable[Card]) -> List[Card]:
    """
    Return the full deck minus the excluded cards, in deck order.

    Args:
        excluded: Cards to leave out (typically a board, or a board plus a holding)

    Returns:
        List of cards not in ``excluded``

    Raises:
        InvalidInputError: If ``excluded`` names the same card twice
    """
    excluded = list(excluded)
    blocked = set(excluded)
    if len(blocked) != len(excluded):
        seen = set()
        duplicates = []
        for card in excluded:
            if card in seen:
                duplicates.append(str(card))
            seen.add(card)
        raise InvalidInputError(f"Duplicate cards in exclusion set: {', '.join(duplicates)}")
    return [card for card in full_deck() if card not in blocked]


class Deck:
    """
    A deck of playing cards.

    Attributes:
        cards: List of cards in the deck; the last card is dealt first
        rng: Random source used for shuffling
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None, rng: Optional[random.Random] = None):
        """
        Initialize a new deck.

        Args:
            cards: Starting cards, defaults to a full 52-card deck
            rng: Random source; a seeded ``random.Random`` makes shuffles repeatable
        """
        self.cards: List[Card] = list(cards) if cards is not None else full_deck()
        self.rng = rng or random.Random()

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle the deck.

        Args:
            times: Number of times to shuffle
        """
        for _ in range(times):
            self.rng.shuffle(self.cards)

    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card from the top of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Returns:
            List of cards (may be fewer than requested if deck runs out)
        """
        cards = []
        for _ in range(count):
            card = self.deal_card()
            if card is None:
                break
            cards.append(card)
        return cards

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.

        Raises:
            ValueError: If card not in deck
        """
        try:
            self.cards.remove(card)
        except ValueError:
            raise ValueError(f"Card {card} not in deck")
        return card

    def remove_cards(self, cards: Iterable[Card]) -> List[Card]:
        """Remove specific cards from the deck."""
        return [self.remove_card(card) for card in cards]

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)


def draw_board(rng: Optional[random.Random] = None) -> List[Card]:
    """Deal a uniformly random five-card board from a fresh shuffled deck."""
    deck = Deck(rng=rng)
    deck.shuffle()
    board = deck.deal_cards(5)
    logger.debug(f"Dealt board {' '.join(str(c) for c in board)}")
    return board


def draw_holding(excluded: Iterable[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """
    Deal a uniformly random two-card holding that avoids ``excluded``.

    Raises:
        InvalidInputError: If ``excluded`` contains duplicates
    """
    deck = Deck(remaining(excluded), rng=rng)
    deck.shuffle()
    return deck.deal_cards(2)
