"""Reference scoring functions for exercising the engine."""

from __future__ import annotations

from dataclasses import dataclass

from bitevo.genes.bit_vector import BitVector, ScoreFunction

# Decoded 5-bit values are divided by this to map [0, 31] onto roughly [0, 4.1].
QUARTIC_SCALE = 7.5


def squared_value_score(gene: BitVector, bit_size: int = 5) -> float:
    """Monotone score ``(value + 1) ** 2``; the optimum is the all-ones gene."""
    return float((gene.to_number(bit_size) + 1) ** 2)


def quartic(x: float) -> float:
    """x^4/4 - 11x^3/6 + 9x^2/2 - 9x/2 + 3, with local minima at x=1 and x=3."""
    return x**4 / 4 - 11 * x**3 / 6 + 9 / 2 * x**2 - 9 * x / 2 + 3


def quartic_minimum_score(gene: BitVector, bit_size: int = 5) -> float:
    """Map quartic minimisation to a positive score peaking at x = 3."""
    x = gene.to_number(bit_size) / QUARTIC_SCALE
    return 2 ** (-2 * (quartic(x) - 3))


@dataclass(frozen=True)
class Problem:
    name: str
    score_fn: ScoreFunction
    scale: float = 1.0

    def decode(self, gene: BitVector, bit_size: int) -> float:
        return gene.to_number(bit_size) / self.scale


PROBLEMS: dict[str, Problem] = {
    "squared_value": Problem("squared_value", squared_value_score),
    "quartic_minimum": Problem(
        "quartic_minimum", quartic_minimum_score, scale=QUARTIC_SCALE
    ),
}
