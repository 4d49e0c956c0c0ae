from abc import ABC, abstractmethod
import random

from loguru import logger

from bitevo.exceptions import SelectionError


class ParentPoolSelector(ABC):
    @abstractmethod
    def __call__(
        self, scores: list[float], total: int, rng: random.Random
    ) -> list[int]:
        """Return indices into ``scores`` of the genes chosen as parents."""


class RouletteWheelSelector(ParentPoolSelector):
    """Fitness-proportional selection without replacement.

    Scores are taken once; each draw removes the picked entry so later draws
    renormalise over what is left. Scores are expected to be non-negative.
    """

    def pick(self, scores: list[float], rng: random.Random) -> int:
        total = sum(scores)
        if total == 0:
            raise SelectionError("score sum is zero")

        r = rng.random()
        for i, score in enumerate(scores):
            r -= score / total
            if r < 0:
                return i
        # float drift can leave r >= 0 after the full walk
        return len(scores) - 1

    def __call__(
        self, scores: list[float], total: int, rng: random.Random
    ) -> list[int]:
        logger.debug(
            "RouletteWheelSelector: selecting {} from {} genes", total, len(scores)
        )
        remaining_indices = list(range(len(scores)))
        remaining_scores = list(scores)
        selected = []

        for _ in range(total):
            idx = self.pick(remaining_scores, rng)
            selected.append(remaining_indices.pop(idx))
            remaining_scores.pop(idx)

        return selected
