from functools import partial
import time

import hydra
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from bitevo.evolution.engine import Population, PopulationConfig
from bitevo.exceptions import EvolutionError
from bitevo.problems import PROBLEMS
from bitevo.utils.logger_setup import setup_logger


def run_experiment(cfg: DictConfig) -> float:
    start_time = time.time()

    if cfg.problem not in PROBLEMS:
        raise ValueError(
            f"Unknown problem '{cfg.problem}', expected one of {sorted(PROBLEMS)}"
        )
    problem = PROBLEMS[cfg.problem]

    population_config = PopulationConfig(**OmegaConf.to_container(cfg.population))
    score_fn = partial(problem.score_fn, bit_size=population_config.bit_size)
    population = Population.from_config(population_config)

    logger.info("=" * 60)
    logger.info("Problem: {}", problem.name)
    logger.info("Max generations: {}", cfg.max_generations)

    try:
        gene, score = population.run(score_fn, cfg.max_generations)
    except EvolutionError as e:
        logger.error("Evolution failed after {} generations: {}",
                     population.metrics.total_generations, e)
        raise

    value = problem.decode(gene, population_config.bit_size)
    logger.info(
        "Best gene {} | decoded={:.4f} score={:.4f}",
        gene.get_binary(population_config.bit_size),
        value,
        score,
    )
    logger.info("Metrics: {}", population.metrics.to_dict())
    logger.info("Total duration: {:.2f} seconds", time.time() - start_time)
    logger.info("=" * 60)
    return value


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    logger.info(f"Log file: {log_file_path}")
    run_experiment(cfg)


if __name__ == "__main__":
    main()
