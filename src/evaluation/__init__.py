"""
Evaluation tooling for the item-administration engine.

- simulation: Monte-Carlo attempts by simulated learners through the real engine
"""

from .simulation import (
    LearnerResult,
    SimulationConfig,
    SimulationResult,
    generate_catalog,
    probability_correct,
    run_simulation,
    simulate_attempt,
)

__all__ = [
    "LearnerResult",
    "SimulationConfig",
    "SimulationResult",
    "generate_catalog",
    "probability_correct",
    "run_simulation",
    "simulate_attempt",
]
