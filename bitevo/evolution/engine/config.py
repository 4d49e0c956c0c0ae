from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class PopulationConfig(BaseModel):
    """Parameters controlling Population behaviour."""

    bit_size: int = Field(gt=0, description="Logical bits per gene")
    gene_count: int = Field(gt=0, description="Population size")
    temp_gene_count: int = Field(
        ge=0, description="Selection pool size (parents per generation)"
    )
    mutation_p: float = Field(
        description="Per-gene probability of one random bit flip per generation"
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the default random generator (None = OS entropy)",
    )
    log_interval: int = Field(
        default=100, gt=0, description="Generations between progress log lines"
    )

    @model_validator(mode="after")
    def validate_pool_size(self):
        if self.temp_gene_count > self.gene_count:
            raise ValueError(
                f"temp_gene_count ({self.temp_gene_count}) is bigger than "
                f"gene_count ({self.gene_count})"
            )
        return self

    @property
    def byte_size(self) -> int:
        return (self.bit_size + 7) // 8
