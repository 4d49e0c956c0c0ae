from bitevo.evolution.strategies.crossover import CrossoverOperator, UniformCrossover
from bitevo.evolution.strategies.mutation import (
    MutationOperator,
    SingleBitFlipMutation,
)
from bitevo.evolution.strategies.selectors import (
    ParentPoolSelector,
    RouletteWheelSelector,
)

__all__ = [
    "CrossoverOperator",
    "MutationOperator",
    "ParentPoolSelector",
    "RouletteWheelSelector",
    "SingleBitFlipMutation",
    "UniformCrossover",
]
