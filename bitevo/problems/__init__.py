from bitevo.problems.scoring import (
    PROBLEMS,
    Problem,
    quartic,
    quartic_minimum_score,
    squared_value_score,
)

__all__ = [
    "PROBLEMS",
    "Problem",
    "quartic",
    "quartic_minimum_score",
    "squared_value_score",
]
