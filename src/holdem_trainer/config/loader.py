"""Load starting-hand charts from JSON configuration files."""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from holdem_trainer.charts.chart import Action, ChartEntry, DEFAULT_FOLD, Position, StartingHandChart
from holdem_trainer.charts.hand_codes import normalize_code
from holdem_trainer.config.settings import DEFAULT_CHART_FILE
from holdem_trainer.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_FLASHCARD_WEIGHTS: Dict[Action, int] = {
    Action.FOLD: 1,
    Action.MIX: 2,
    Action.RAISE: 3,
    Action.CALL: 3,
}


class ChartConfigError(ValueError):
    """Raised when a chart file is malformed."""


def _parse_entry(position: str, code: str, data: Dict[str, Any]) -> ChartEntry:
    if not isinstance(data, dict):
        raise ChartConfigError(f"{position}/{code}: entry must be an object")
    if 'action' not in data or 'reason' not in data:
        raise ChartConfigError(f"{position}/{code}: entry needs 'action' and 'reason'")
    try:
        action = Action(data['action'])
    except ValueError:
        raise ChartConfigError(f"{position}/{code}: unknown action '{data['action']}'")
    return ChartEntry(
        action=action,
        reason=data['reason'],
        detailed_reason=data.get('detailedReason', ''),
        examples=tuple(data.get('examples', ())),
    )


@dataclass
class ChartConfig:
    """
    Parsed chart file.

    Attributes:
        name: Display name of the chart
        positions: Position -> hand code -> entry
        descriptions: Position -> short note on how the seat plays
        default_fold: Entry for codes the file leaves out
        flashcard_weights: Relative pick weight per action for flashcards
    """
    name: str
    positions: Dict[Position, Dict[str, ChartEntry]]
    descriptions: Dict[Position, str] = field(default_factory=dict)
    default_fold: ChartEntry = DEFAULT_FOLD
    flashcard_weights: Dict[Action, int] = field(default_factory=lambda: dict(DEFAULT_FLASHCARD_WEIGHTS))

    @classmethod
    def from_file(cls, filepath: Path) -> 'ChartConfig':
        """
        Load a ChartConfig from a JSON file.

        Args:
            filepath: Path to JSON chart file

        Returns:
            ChartConfig instance
        """
        logger.info(f"Loading chart from {filepath}")
        with open(filepath, 'r', encoding='utf-8') as f:
            return cls.from_json(f.read())

    @classmethod
    def from_json(cls, json_str: str) -> 'ChartConfig':
        """
        Create a ChartConfig from a JSON string.

        Raises:
            ChartConfigError: If JSON is invalid or missing required fields
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ChartConfigError(f"Invalid JSON: {e}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChartConfig':
        """
        Create a ChartConfig from decoded JSON.

        Raises:
            ChartConfigError: On missing fields, unknown positions or actions,
                              or malformed hand codes
        """
        if not isinstance(data, dict):
            raise ChartConfigError("Chart configuration must be a JSON object")

        required_fields = {'name', 'positions'}
        missing = required_fields - set(data.keys())
        if missing:
            raise ChartConfigError(f"Missing required fields: {missing}")

        positions: Dict[Position, Dict[str, ChartEntry]] = {}
        descriptions: Dict[Position, str] = {}
        for position_name, position_data in data['positions'].items():
            try:
                position = Position.from_string(position_name)
            except InvalidInputError as e:
                raise ChartConfigError(str(e))
            if 'hands' not in position_data:
                raise ChartConfigError(f"{position_name}: missing 'hands'")

            hands: Dict[str, ChartEntry] = {}
            for code, entry_data in position_data['hands'].items():
                try:
                    normalized = normalize_code(code)
                except InvalidInputError as e:
                    raise ChartConfigError(f"{position_name}: {e}")
                if normalized in hands:
                    raise ChartConfigError(f"{position_name}: duplicate entry for {normalized}")
                hands[normalized] = _parse_entry(position_name, normalized, entry_data)
            positions[position] = hands

            if 'description' in position_data:
                descriptions[position] = position_data['description']

        missing_positions = [p.value for p in Position if p not in positions]
        if missing_positions:
            logger.warning(f"Chart '{data['name']}' has no range for {', '.join(missing_positions)}")

        default_fold = DEFAULT_FOLD
        if 'defaultFold' in data:
            default_fold = _parse_entry('defaultFold', '*', {'action': Action.FOLD.value, **data['defaultFold']})
            if default_fold.action != Action.FOLD:
                raise ChartConfigError("defaultFold must use action 'F'")

        return cls(
            name=data['name'],
            positions=positions,
            descriptions=descriptions,
            default_fold=default_fold,
            flashcard_weights=cls._parse_weights(data.get('flashcardWeights', {})),
        )

    @staticmethod
    def _parse_weights(raw: Dict[str, Any]) -> Dict[Action, int]:
        weights = dict(DEFAULT_FLASHCARD_WEIGHTS)
        for key, value in raw.items():
            try:
                action = Action(key)
            except ValueError:
                logger.warning(f"Ignoring flashcard weight for unknown action '{key}'")
                continue
            if not isinstance(value, int) or value < 0:
                raise ChartConfigError(f"Flashcard weight for {key} must be a non-negative integer")
            weights[action] = value
        return weights

    def to_chart(self) -> StartingHandChart:
        return StartingHandChart(
            name=self.name,
            ranges=self.positions,
            descriptions=self.descriptions,
            default_fold=self.default_fold,
        )


def load_chart_config(filepath: Optional[Path] = None) -> ChartConfig:
    """Load a chart file, defaulting to the packaged chart."""
    return ChartConfig.from_file(Path(filepath) if filepath else DEFAULT_CHART_FILE)


def load_chart(filepath: Optional[Path] = None) -> StartingHandChart:
    """Load a StartingHandChart, defaulting to the packaged chart."""
    return load_chart_config(filepath).to_chart()
