"""Hold'em training package: hand evaluation, holding ranking and preflop charts."""

from holdem_trainer.core.card import Card, Rank, Suit, parse_cards
from holdem_trainer.core.combinations import combinations
from holdem_trainer.core.deck import Deck, draw_board, draw_holding, full_deck, remaining
from holdem_trainer.core.errors import InvalidInputError
from holdem_trainer.evaluation.evaluator import HandEvaluator, best_hand, compare, evaluate
from holdem_trainer.evaluation.types import EvaluatedHand, HandCategory, RankedHolding, RankedHoldingGroup
from holdem_trainer.reading.holdings import rank_all_holdings

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_cards",
    "combinations",
    "Deck",
    "draw_board",
    "draw_holding",
    "full_deck",
    "remaining",
    "InvalidInputError",
    "HandEvaluator",
    "best_hand",
    "compare",
    "evaluate",
    "EvaluatedHand",
    "HandCategory",
    "RankedHolding",
    "RankedHoldingGroup",
    "rank_all_holdings",
]
