from bitevo.evolution.engine import (
    GenerationStats,
    Population,
    PopulationConfig,
    PopulationMetrics,
)
from bitevo.genes import BitVector, Gene, ScoreFunction

__all__ = [
    "BitVector",
    "Gene",
    "GenerationStats",
    "Population",
    "PopulationConfig",
    "PopulationMetrics",
    "ScoreFunction",
]
