from __future__ import annotations

import math
import random

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from bitevo.evolution.engine.config import PopulationConfig
from bitevo.evolution.engine.metrics import GenerationStats, PopulationMetrics
from bitevo.evolution.strategies.crossover import CrossoverOperator, UniformCrossover
from bitevo.evolution.strategies.mutation import (
    MutationOperator,
    SingleBitFlipMutation,
)
from bitevo.evolution.strategies.selectors import (
    ParentPoolSelector,
    RouletteWheelSelector,
)
from bitevo.exceptions import EvolutionError, PopulationConfigError, SelectionError
from bitevo.genes.bit_vector import BitVector, ScoreFunction

__all__ = ["Population"]


class Population:
    """
    Generational bit-string GA:
    - step_generation runs selection -> crossover -> mutation to completion.
    - temp_genes holds references to the parents chosen in the last step. They
      are never mutated and stay readable until the next step clears the list.
    - genes is replaced by a fresh list of children on every step.
    """

    def __init__(
        self,
        bit_size: int,
        gene_count: int,
        temp_gene_count: int,
        mutation_p: float,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
        log_interval: int = 100,
        selector: ParentPoolSelector | None = None,
        crossover: CrossoverOperator | None = None,
        mutation: MutationOperator | None = None,
    ):
        try:
            self.config = PopulationConfig(
                bit_size=bit_size,
                gene_count=gene_count,
                temp_gene_count=temp_gene_count,
                mutation_p=mutation_p,
                seed=seed,
                log_interval=log_interval,
            )
        except PydanticValidationError as exc:
            raise PopulationConfigError(str(exc)) from exc

        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.selector = selector or RouletteWheelSelector()
        self.crossover = crossover or UniformCrossover()
        self.mutation = mutation or SingleBitFlipMutation()

        self.metrics = PopulationMetrics()
        self.temp_genes: list[BitVector] = []
        self.genes: list[BitVector] = self._fresh_genes()

        logger.info(
            "[Population] Init | bit_size={}, gene_count={}, temp_gene_count={}, mutation_p={}",
            bit_size,
            gene_count,
            temp_gene_count,
            mutation_p,
        )

    @classmethod
    def from_config(
        cls, config: PopulationConfig, rng: random.Random | None = None, **kwargs
    ) -> "Population":
        return cls(
            config.bit_size,
            config.gene_count,
            config.temp_gene_count,
            config.mutation_p,
            rng,
            seed=config.seed,
            log_interval=config.log_interval,
            **kwargs,
        )

    @property
    def bit_size(self) -> int:
        return self.config.bit_size

    @property
    def gene_count(self) -> int:
        return self.config.gene_count

    @property
    def temp_gene_count(self) -> int:
        return self.config.temp_gene_count

    @property
    def mutation_p(self) -> float:
        return self.config.mutation_p

    def reset(self) -> None:
        """Replace every gene with a freshly randomized one."""
        self.genes = self._fresh_genes()
        self.metrics.resets += 1
        logger.info("[Population] Reset | gene_count={}", self.gene_count)

    def step_generation(self, score_fn: ScoreFunction) -> None:
        """Advance one generation.

        ``score_fn`` must be pure and non-negative; an all-zero score total
        among the remaining candidates raises SelectionError. A failed step
        is not rolled back.
        """
        generation = self.metrics.total_generations + 1
        self.temp_genes.clear()

        try:
            scores = self._selection(score_fn)
        except SelectionError as exc:
            self.metrics.selection_failures += 1
            logger.error(
                "[Population] Generation {} failed during selection: {}",
                generation,
                exc,
            )
            raise

        try:
            self._crossover()
        except EvolutionError as exc:
            self.metrics.crossover_failures += 1
            logger.error(
                "[Population] Generation {} failed during crossover: {}",
                generation,
                exc,
            )
            raise
        mutations = self._mutation()

        stats = GenerationStats.from_scores(generation, scores)
        self.metrics.record_generation(stats, mutations)
        if generation % self.config.log_interval == 0:
            logger.info(
                "[Population] Generation {} | best={:.4f} mean={:.4f} mutations={}",
                generation,
                stats.best_score,
                stats.mean_score,
                self.metrics.mutations_applied,
            )

    def get(self, score_fn: ScoreFunction) -> tuple[BitVector, float]:
        """Return the highest-scoring gene and its score.

        The first gene wins ties. An empty population yields an empty
        placeholder gene scored ``-inf``.
        """
        best_gene = BitVector()
        best_score = -math.inf
        for gene in self.genes:
            score = score_fn(gene)
            if score > best_score:
                best_gene, best_score = gene, score
        return best_gene, best_score

    def run(
        self, score_fn: ScoreFunction, generations: int
    ) -> tuple[BitVector, float]:
        for _ in range(generations):
            self.step_generation(score_fn)
        return self.get(score_fn)

    def _fresh_genes(self) -> list[BitVector]:
        genes = []
        for _ in range(self.gene_count):
            gene = BitVector(self.config.byte_size)
            gene.randomize(self.rng)
            genes.append(gene)
        return genes

    def _selection(self, score_fn: ScoreFunction) -> list[float]:
        scores = [score_fn(gene) for gene in self.genes]
        for idx in self.selector(scores, self.temp_gene_count, self.rng):
            self.temp_genes.append(self.genes[idx])
        logger.debug(
            "[Population] Selection | picked {} of {}",
            len(self.temp_genes),
            len(self.genes),
        )
        return scores

    def _crossover(self) -> None:
        self.genes = [
            self.crossover(self.temp_genes, self.bit_size, self.rng)
            for _ in range(self.gene_count)
        ]
        logger.debug("[Population] Crossover | produced {}", len(self.genes))

    def _mutation(self) -> int:
        mutated = sum(
            1
            for gene in self.genes
            if self.mutation(gene, self.bit_size, self.mutation_p, self.rng)
        )
        logger.debug("[Population] Mutation | flipped {} genes", mutated)
        return mutated
