"""
Simulation of adaptive quiz attempts.

Runs simulated learners through the real engine (session, pool, ledger,
attempt store) to check the properties hosts rely on: every attempt
terminates, no question is administered twice within an attempt, and the
administered level tracks the learner's true level.

Simulated learners answer correctly with probability

    P(correct) = 1 / (1 + exp(-(true_level - question_level) / spread))

which is only a response generator; the engine itself does no ability
estimation.
"""

from __future__ import annotations

import logging
import math
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from ..engine.selector import NextItemSelector
from ..engine.session import AdaptiveQuizSession
from ..models.attempt import Attempt
from ..models.quiz_configuration import QuizConfiguration
from ..services.attempt_store import InMemoryAttemptStore
from ..services.catalog import InMemoryQuestionCatalog
from ..services.event_logger import RecordingEventLogger
from ..services.interfaces import QuestionDefinition
from ..services.ledger import LedgerRegistry

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    n_learners: int = 200
    questions_per_level: int = 10
    spread: float = 1.0  # Steepness of the response curve
    seed: int = 42


@dataclass
class LearnerResult:
    """Per-learner simulation results."""

    true_level: int
    final_level: int
    questions_administered: int
    stopping_reason: str
    administered_question_ids: List[int] = field(default_factory=list)
    administered_levels: List[int] = field(default_factory=list)
    responses: List[bool] = field(default_factory=list)

    @property
    def has_repeats(self) -> bool:
        return len(set(self.administered_question_ids)) != len(self.administered_question_ids)


@dataclass
class SimulationResult:
    """Aggregate simulation results."""

    config: SimulationConfig
    learner_results: List[LearnerResult]
    mean_questions: float
    mean_abs_level_error: float
    level_error_sd: float
    proportion_correct: float
    stopping_reason_counts: Dict[str, int]
    level_exposure: Dict[int, int]
    attempts_with_repeats: int

    def to_dict(self) -> Dict:
        return {
            "n_learners": self.config.n_learners,
            "mean_questions": self.mean_questions,
            "mean_abs_level_error": self.mean_abs_level_error,
            "level_error_sd": self.level_error_sd,
            "proportion_correct": self.proportion_correct,
            "stopping_reason_counts": dict(self.stopping_reason_counts),
            "level_exposure": dict(self.level_exposure),
            "attempts_with_repeats": self.attempts_with_repeats,
        }


def probability_correct(true_level: int, question_level: int, spread: float = 1.0) -> float:
    """Chance that a learner at `true_level` answers a `question_level` question correctly."""
    return 1.0 / (1.0 + math.exp(-(true_level - question_level) / spread))


def generate_catalog(quiz: QuizConfiguration, questions_per_level: int = 10) -> InMemoryQuestionCatalog:
    """Synthetic catalog with `questions_per_level` questions on every level of the quiz."""
    questions = []
    for level in range(quiz.lowestlevel, quiz.highestlevel + 1):
        for i in range(1, questions_per_level + 1):
            qid = level * 1000 + i
            questions.append(QuestionDefinition(id=qid, level=level, name=f"L{level}-Q{i}"))
    return InMemoryQuestionCatalog(questions)


def simulate_attempt(
    quiz: QuizConfiguration,
    catalog: InMemoryQuestionCatalog,
    true_level: int,
    rng: np.random.Generator,
    selector_seed: Optional[int] = None,
    spread: float = 1.0,
) -> LearnerResult:
    """
    Drive one attempt through the engine until it stops.

    The loop mirrors a hosting quiz runner: ask the session for the next
    slot, let the learner answer, record the answer, repeat.
    """
    store = InMemoryAttemptStore()
    attempt_data = store.create()
    attempt = Attempt(attempt_data.id, store)

    registry = LedgerRegistry()
    ledger = registry.create()
    session = AdaptiveQuizSession(
        ledger=ledger,
        catalog=catalog,
        used_questions=registry,
        level=quiz.startinglevel,
        selector=NextItemSelector(random.Random(selector_seed)),
        event_logger=RecordingEventLogger(),
    )

    result = LearnerResult(
        true_level=true_level,
        final_level=quiz.startinglevel,
        questions_administered=0,
        stopping_reason="",
    )

    while session.start_attempt(attempt, quiz):
        slot = session.question_slot_number()
        question = catalog.load(ledger.question_id_of(slot))

        correct = bool(rng.random() < probability_correct(true_level, question.level, spread))
        ledger.process_answer(slot, question.max_mark if correct else 0.0)
        store.record_question_attempted(attempt_data.id)

        result.administered_question_ids.append(question.id)
        result.administered_levels.append(question.level)
        result.responses.append(correct)

    result.stopping_reason = session.attempt_stop_criteria()
    result.final_level = session.level()
    result.questions_administered = len(result.administered_question_ids)
    return result


def run_simulation(quiz: QuizConfiguration, sim_config: Optional[SimulationConfig] = None) -> SimulationResult:
    """
    Simulate `n_learners` attempts with true levels drawn uniformly from the quiz range.

    Args:
        quiz: Quiz configuration to simulate
        sim_config: Simulation settings (defaults if None)

    Returns:
        SimulationResult with per-learner and aggregate metrics
    """
    sim_config = sim_config or SimulationConfig()
    rng = np.random.default_rng(sim_config.seed)
    catalog = generate_catalog(quiz, sim_config.questions_per_level)

    true_levels = rng.integers(quiz.lowestlevel, quiz.highestlevel + 1, size=sim_config.n_learners)
    learner_results = [
        simulate_attempt(
            quiz,
            catalog,
            int(true_level),
            rng,
            selector_seed=sim_config.seed + i,
            spread=sim_config.spread,
        )
        for i, true_level in enumerate(true_levels)
    ]

    questions = np.array([r.questions_administered for r in learner_results], dtype=float)
    errors = np.array([r.final_level - r.true_level for r in learner_results], dtype=float)
    responses = np.concatenate(
        [np.array(r.responses, dtype=float) for r in learner_results if r.responses] or [np.zeros(0)]
    )
    levels = np.concatenate(
        [np.array(r.administered_levels, dtype=int) for r in learner_results if r.administered_levels]
        or [np.zeros(0, dtype=int)]
    )
    exposure = np.bincount(levels, minlength=quiz.highestlevel + 1) if levels.size else np.zeros(0, dtype=int)

    result = SimulationResult(
        config=sim_config,
        learner_results=learner_results,
        mean_questions=float(np.mean(questions)) if questions.size else 0.0,
        mean_abs_level_error=float(np.mean(np.abs(errors))) if errors.size else 0.0,
        level_error_sd=float(np.std(errors)) if errors.size else 0.0,
        proportion_correct=float(np.mean(responses)) if responses.size else 0.0,
        stopping_reason_counts=dict(Counter(r.stopping_reason for r in learner_results)),
        level_exposure={
            level: int(exposure[level])
            for level in range(quiz.lowestlevel, quiz.highestlevel + 1)
            if level < exposure.size
        },
        attempts_with_repeats=sum(1 for r in learner_results if r.has_repeats),
    )

    logger.info(
        f"Simulated {sim_config.n_learners} attempts: mean questions {result.mean_questions:.1f}, "
        f"mean |level error| {result.mean_abs_level_error:.2f}"
    )
    return result
