from __future__ import annotations

from bitevo.evolution.engine.config import PopulationConfig
from bitevo.evolution.engine.core import Population
from bitevo.evolution.engine.metrics import GenerationStats, PopulationMetrics
