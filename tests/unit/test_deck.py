"""Tests for deck implementation."""
import random

import pytest
from holdem_trainer.core.card import Card, Rank, Suit, parse_cards
from holdem_trainer.core.deck import Deck, draw_board, draw_holding, full_deck, remaining
from holdem_trainer.core.errors import InvalidInputError


def test_full_deck_contents():
    """The universe holds every rank and suit exactly once."""
    deck = full_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_full_deck_order():
    """Suits run spades, hearts, diamonds, clubs; ranks run ace to deuce."""
    deck = full_deck()
    assert deck[0] == Card(Rank.ACE, Suit.SPADES)
    assert deck[12] == Card(Rank.TWO, Suit.SPADES)
    assert deck[13] == Card(Rank.ACE, Suit.HEARTS)
    assert deck[-1] == Card(Rank.TWO, Suit.CLUBS)
    assert full_deck() == deck


def test_remaining_excludes_board():
    """Remaining cards drop the excluded ones and keep deck order."""
    board = parse_cards("Ks Kc 6d 5s 3h")
    rest = remaining(board)
    assert len(rest) == 47
    assert not set(rest) & set(board)
    assert rest == [card for card in full_deck() if card not in board]


def test_remaining_with_nothing_excluded():
    """An empty exclusion set returns the full deck."""
    assert remaining([]) == full_deck()


def test_remaining_rejects_duplicates():
    """Naming a card twice is an input error."""
    with pytest.raises(InvalidInputError, match="Duplicate"):
        remaining(parse_cards("As As Kd"))
    with pytest.raises(ValueError):
        remaining(parse_cards("2c 2c"))


def test_deck_initialization():
    """Test basic deck creation."""
    deck = Deck()
    assert deck.size == 52
    assert deck.get_cards() == full_deck()


def test_dealing_cards():
    """Test dealing cards from deck."""
    deck = Deck()
    card = deck.deal_card()
    assert isinstance(card, Card)

    cards = deck.deal_cards(5)
    assert len(cards) == 5
    assert deck.size == 46
    assert card not in deck.get_cards()


def test_dealing_empty_deck():
    """Test dealing from empty deck."""
    deck = Deck(cards=[])
    assert deck.size == 0
    assert deck.deal_card() is None
    assert deck.deal_cards(5) == []


def test_remove_card():
    """Removing a card takes it out; removing it again fails."""
    deck = Deck()
    ace = Card(Rank.ACE, Suit.SPADES)
    assert deck.remove_card(ace) == ace
    assert deck.size == 51
    with pytest.raises(ValueError):
        deck.remove_card(ace)


def test_remove_cards():
    """Several cards come out together; a missing one fails."""
    deck = Deck()
    board = parse_cards("Ks Kc 6d 5s 3h")
    assert deck.remove_cards(board) == board
    assert deck.size == 47
    assert deck.get_cards() == remaining(board)
    with pytest.raises(ValueError):
        deck.remove_cards(parse_cards("Ah Ks"))


def test_seeded_shuffle_is_repeatable():
    """Two decks shuffled with the same seed end up in the same order."""
    deck1 = Deck(rng=random.Random(7))
    deck2 = Deck(rng=random.Random(7))
    deck1.shuffle()
    deck2.shuffle()
    assert deck1.get_cards() == deck2.get_cards()
    assert sorted(map(str, deck1.get_cards())) == sorted(map(str, full_deck()))


def test_draw_board():
    """Boards are five distinct cards and repeat under a fixed seed."""
    board = draw_board(random.Random(42))
    assert len(board) == 5
    assert len(set(board)) == 5
    assert draw_board(random.Random(42)) == board


def test_draw_holding_avoids_excluded():
    """Holdings never reuse board cards."""
    board = parse_cards("Ks Kc 6d 5s 3h")
    rng = random.Random(3)
    for _ in range(50):
        holding = draw_holding(board, rng)
        assert len(holding) == 2
        assert holding[0] != holding[1]
        assert not set(holding) & set(board)
