import argparse
import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Type

from holdem_trainer.charts.chart import Position
from holdem_trainer.config.loader import ChartConfig, load_chart_config
from holdem_trainer.config.settings import Config, get_config


@dataclass
class Session:
    """Everything a trainer run needs."""
    chart_config: ChartConfig
    position: Position
    quiz_length: int
    rng: random.Random


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hold'em chart and hand-reading trainer")
    parser.add_argument("--chart", type=Path, help="Chart JSON file")
    parser.add_argument("--position", type=str.upper, choices=[p.value for p in Position],
                        help="Starting position")
    parser.add_argument("--quiz-length", type=_positive_int, help="Questions per quick quiz")
    parser.add_argument("--seed", type=int, help="Seed for repeatable boards and questions")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO")
    parser.add_argument("--env", help="Configuration name (development, testing, production)")
    return parser.parse_args(argv)


def setup_logging(level: str, log_format: str) -> None:
    """Send log output to stdout at the requested level."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_position(default: str) -> Position:
    """Prompt user to select a table position."""
    positions = list(Position)
    print("Select a position:")
    for num, position in enumerate(positions, 1):
        print(f"{num}: {position}")

    while True:
        choice = input(f"Enter number (1-{len(positions)}) [default: {default}]: ").strip()
        if not choice:
            return Position.from_string(default)
        if choice.isdigit() and 1 <= int(choice) <= len(positions):
            return positions[int(choice) - 1]
        try:
            return Position.from_string(choice)
        except ValueError:
            print("Invalid choice, try again.")


def setup_session(argv: Optional[List[str]] = None) -> Session:
    """Build a session from command line options and configuration."""
    args = parse_args(argv)
    settings: Type[Config] = get_config(args.env)

    setup_logging(args.log_level or settings.LOG_LEVEL, settings.LOG_FORMAT)

    quiz_length = args.quiz_length if args.quiz_length is not None else settings.QUIZ_LENGTH
    if quiz_length < 1:
        raise ValueError(f"Quiz length must be at least 1, got {quiz_length}")

    seed = args.seed if args.seed is not None else settings.SEED
    chart_config = load_chart_config(args.chart or settings.CHART_FILE)
    position = Position.from_string(args.position) if args.position else get_position(settings.DEFAULT_POSITION)

    return Session(
        chart_config=chart_config,
        position=position,
        quiz_length=quiz_length,
        rng=random.Random(seed),
    )
