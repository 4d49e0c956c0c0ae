from abc import ABC, abstractmethod
import random

from bitevo.genes.bit_vector import BitVector


class MutationOperator(ABC):
    @abstractmethod
    def __call__(
        self, gene: BitVector, bit_size: int, probability: float, rng: random.Random
    ) -> bool:
        """Mutate ``gene`` in place; return whether it was changed."""


class SingleBitFlipMutation(MutationOperator):
    """With ``probability``, invert one uniformly chosen bit in [0, bit_size)."""

    def __call__(
        self, gene: BitVector, bit_size: int, probability: float, rng: random.Random
    ) -> bool:
        if rng.random() >= probability:
            return False
        return gene.flip(int(bit_size * rng.random()))
