"""Preflop starting-hand chart model."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple, Union

from holdem_trainer.charts.hand_codes import all_hand_codes, matrix_codes, normalize_code
from holdem_trainer.core.errors import InvalidInputError


class Action(Enum):
    """Chart actions."""
    RAISE = 'R'
    CALL = 'C'
    FOLD = 'F'
    MIX = 'M'  # raise/call or raise/fold depending on the table

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_string(cls, text: str) -> 'Action':
        """Parse 'R', 'raise', 'Call', ... case-insensitively."""
        value = text.strip().upper()
        for action in cls:
            if value in (action.value, action.name):
                return action
        raise InvalidInputError(f"Unknown action: {text}")


class Position(Enum):
    """Six-max table positions, earliest to act first."""
    UTG = 'UTG'
    MP = 'MP'
    CO = 'CO'
    BTN = 'BTN'
    SB = 'SB'
    BB = 'BB'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, text: Union['Position', str]) -> 'Position':
        if isinstance(text, Position):
            return text
        value = text.strip().upper()
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"Unknown position: {text}")


@dataclass(frozen=True)
class ChartEntry:
    """What to do with one hand code at one position, and why."""
    action: Action
    reason: str
    detailed_reason: str = ''
    examples: Tuple[str, ...] = ()


DEFAULT_FOLD = ChartEntry(
    action=Action.FOLD,
    reason="Too weak to play from this position.",
    detailed_reason="This hand is too weak to play profitably from the current position. "
                    "Wait for a stronger hand.",
    examples=("Wait for a stronger hand", "Pick hands that suit your position"),
)


@dataclass(frozen=True)
class MatrixCell:
    """One cell of the 13x13 chart grid."""
    code: str
    action: Action
    reason: str
    detailed_reason: str
    examples: Tuple[str, ...]


@dataclass
class StartingHandChart:
    """
    Per-position hand-code to action mapping.

    Codes missing from a position are folds and resolve to ``default_fold``.

    Attributes:
        name: Display name of the chart
        ranges: Position -> normalized hand code -> ChartEntry
        descriptions: Position -> short note on how that seat plays
        default_fold: Entry returned for codes absent from a range
    """
    name: str
    ranges: Dict[Position, Dict[str, ChartEntry]]
    descriptions: Dict[Position, str] = field(default_factory=dict)
    default_fold: ChartEntry = DEFAULT_FOLD

    @property
    def positions(self) -> List[Position]:
        return [position for position in Position if position in self.ranges]

    def entry(self, position: Union[Position, str], code: str) -> ChartEntry:
        """
        Look up a hand code at a position.

        Raises:
            InvalidInputError: Unknown position or malformed code
        """
        position = Position.from_string(position)
        if position not in self.ranges:
            raise InvalidInputError(f"Chart '{self.name}' has no range for {position}")
        return self.ranges[position].get(normalize_code(code), self.default_fold)

    def action(self, position: Union[Position, str], code: str) -> Action:
        return self.entry(position, code).action

    def matrix(self, position: Union[Position, str]) -> List[List[MatrixCell]]:
        """13x13 grid of cells for a position, aces in the top-left corner."""
        rows = []
        for codes in matrix_codes():
            row = []
            for code in codes:
                entry = self.entry(position, code)
                row.append(MatrixCell(
                    code=code,
                    action=entry.action,
                    reason=entry.reason,
                    detailed_reason=entry.detailed_reason or entry.reason,
                    examples=entry.examples,
                ))
            rows.append(row)
        return rows

    def action_counts(self, position: Union[Position, str]) -> Dict[Action, int]:
        """How many of the 169 codes map to each action."""
        counts = {action: 0 for action in Action}
        for code in all_hand_codes():
            counts[self.action(position, code)] += 1
        return counts
