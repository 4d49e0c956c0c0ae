from abc import ABC, abstractmethod
import random

from bitevo.exceptions import EmptyBreedingPoolError
from bitevo.genes.bit_vector import BitVector


class CrossoverOperator(ABC):
    @abstractmethod
    def __call__(
        self, pool: list[BitVector], bit_size: int, rng: random.Random
    ) -> BitVector:
        """Produce one child from parents drawn out of ``pool``."""


class UniformCrossover(CrossoverOperator):
    """Two parents drawn with replacement; each bit inherited from either at 1/2."""

    def __call__(
        self, pool: list[BitVector], bit_size: int, rng: random.Random
    ) -> BitVector:
        if not pool:
            raise EmptyBreedingPoolError("cannot breed from an empty selection pool")

        a = pool[int(len(pool) * rng.random())]
        b = pool[int(len(pool) * rng.random())]
        return self.mix(a, b, bit_size, rng)

    @staticmethod
    def mix(
        a: BitVector, b: BitVector, bit_size: int, rng: random.Random
    ) -> BitVector:
        child = BitVector.for_bits(bit_size)
        for i in range(bit_size):
            bit = a.get(i) if rng.random() < 0.5 else b.get(i)
            child.edit(i, bit or 0)
        return child
