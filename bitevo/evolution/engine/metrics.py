from __future__ import annotations

from datetime import datetime

import numpy as np
from pydantic import BaseModel, Field


class GenerationStats(BaseModel):
    """Score summary of one generation, taken from its selection snapshot."""

    generation: int = Field(description="1-based index of the generation step")
    best_score: float
    mean_score: float
    std_score: float
    min_score: float

    @classmethod
    def from_scores(cls, generation: int, scores: list[float]) -> "GenerationStats":
        values = np.asarray(scores, dtype=float)
        return cls(
            generation=generation,
            best_score=float(values.max()),
            mean_score=float(values.mean()),
            std_score=float(values.std()),
            min_score=float(values.min()),
        )


class PopulationMetrics(BaseModel):
    """Running counters for a Population."""

    total_generations: int = Field(
        default=0, description="Total number of completed generation steps"
    )
    mutations_applied: int = Field(
        default=0, description="Total number of single-bit mutations applied"
    )
    selection_failures: int = Field(
        default=0, description="Generation steps aborted during selection"
    )
    crossover_failures: int = Field(
        default=0, description="Generation steps aborted during crossover"
    )
    resets: int = Field(default=0, description="Number of reset() calls")
    last_generation_time: datetime | None = Field(
        default=None, description="Timestamp of last completed generation"
    )
    last_stats: GenerationStats | None = Field(
        default=None, description="Score summary of the last completed generation"
    )

    def record_generation(self, stats: GenerationStats, mutations: int) -> None:
        self.total_generations += 1
        self.mutations_applied += mutations
        self.last_stats = stats
        self.last_generation_time = datetime.now()

    def to_dict(self) -> dict[str, int | float | str | None]:
        return {
            "total_generations": self.total_generations,
            "mutations_applied": self.mutations_applied,
            "selection_failures": self.selection_failures,
            "resets": self.resets,
            "crossover_failures": self.crossover_failures,
            "last_generation_time": (
                self.last_generation_time.isoformat()
                if self.last_generation_time
                else None
            ),
            "best_score": self.last_stats.best_score if self.last_stats else None,
            "mean_score": self.last_stats.mean_score if self.last_stats else None,
        }
