"""Constants for hand evaluation and holding enumeration."""
from holdem_trainer.evaluation.types import HandCategory

HAND_SIZE = 5
BOARD_SIZE = 5
HOLDING_SIZE = 2

# C(47, 2): two-card holdings left once a five-card board is dealt
HOLDINGS_PER_BOARD = 1081

# Strongest first; used for grouping output
CATEGORY_ORDER = sorted(HandCategory, reverse=True)

# Categories whose grouping key is the full tiebreak tuple
TIEBREAK_GROUPED = frozenset({
    HandCategory.FULL_HOUSE,
    HandCategory.TWO_PAIR,
    HandCategory.FOUR_OF_A_KIND,
})

WHEEL_VALUES = (14, 5, 4, 3, 2)
