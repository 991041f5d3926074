"""Configuration settings for the trainer."""

import os
from pathlib import Path
from typing import Optional, Type

PACKAGE_ROOT = Path(__file__).parents[1]
DEFAULT_CHART_FILE = PACKAGE_ROOT / "data" / "charts" / "default_chart.json"


def _optional_int(value: Optional[str]) -> Optional[int]:
    """Parse an optional integer environment value."""
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Base configuration class."""

    # Chart settings
    CHART_FILE = Path(os.environ.get("HOLDEM_TRAINER_CHART") or DEFAULT_CHART_FILE)
    DEFAULT_POSITION = os.environ.get("HOLDEM_TRAINER_POSITION", "CO")

    # Quiz settings
    QUIZ_LENGTH = int(os.environ.get("HOLDEM_TRAINER_QUIZ_LENGTH", "5"))

    # Randomness; unset means a fresh seed per run
    SEED = _optional_int(os.environ.get("HOLDEM_TRAINER_SEED"))

    # Logging settings
    LOG_LEVEL = os.environ.get("HOLDEM_TRAINER_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("HOLDEM_TRAINER_LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    CHART_FILE = DEFAULT_CHART_FILE
    QUIZ_LENGTH = 5
    SEED = 1234
    LOG_LEVEL = "DEBUG"


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": Config,
    "default": Config,
}


def get_config(name: Optional[str] = None) -> Type[Config]:
    """Select a configuration class by name, falling back to HOLDEM_TRAINER_ENV."""
    name = name or os.environ.get("HOLDEM_TRAINER_ENV", "default")
    try:
        return config[name]
    except KeyError:
        raise ValueError(f"Unknown configuration: {name}. Choose from {', '.join(sorted(config))}")
