"""Cache managers for poker evaluation data."""
import logging
from typing import Callable, Dict

from holdem_trainer.evaluation.types import EvaluatedHand

logger = logging.getLogger(__name__)


class EvaluationCache:
    """
    Singleton cache of five-card evaluations.

    Keys are the canonical (sorted) card strings, so the same five cards in
    any order share an entry. Enumerating one board touches roughly eleven
    thousand distinct five-card hands; the cache is flushed once it grows past
    ``max_entries`` so long drill sessions stay bounded.
    """
    _instance = None
    _evaluations: Dict[str, EvaluatedHand] = {}
    max_entries = 250_000

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(EvaluationCache, cls).__new__(cls)
        return cls._instance

    def get_evaluation(self, key: str, evaluate: Callable[[], EvaluatedHand]) -> EvaluatedHand:
        """Return the cached evaluation for ``key``, computing it on a miss."""
        hand = self._evaluations.get(key)
        if hand is None:
            if len(self._evaluations) >= self.max_entries:
                logger.info(f"Evaluation cache reached {self.max_entries} entries, clearing")
                self._evaluations.clear()
            hand = evaluate()
            self._evaluations[key] = hand
        return hand

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self._evaluations)} cached evaluations")
        self._evaluations.clear()

    def __len__(self) -> int:
        return len(self._evaluations)
