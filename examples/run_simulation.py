"""
Simulated placement runs

Drives simulated learners through the adaptive engine and prints how well the
administered level tracks each learner's true level.

Usage:
    python examples/run_simulation.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.config import configure_logging
from src.evaluation import SimulationConfig, run_simulation
from src.models.quiz_configuration import QuizConfiguration


def main():
    configure_logging()

    print("=" * 80)
    print("ADAPTIVE PLACEMENT SIMULATION")
    print("=" * 80)
    print()

    quiz = QuizConfiguration(
        id=1, lowestlevel=1, highestlevel=10, startinglevel=5, maximumquestions=15
    )
    result = run_simulation(quiz, SimulationConfig(n_learners=200, questions_per_level=10))

    print(f"{'Metric':<30} {'Value':>12}")
    print("-" * 80)
    print(f"{'Mean questions':<30} {result.mean_questions:>12.2f}")
    print(f"{'Mean |final - true level|':<30} {result.mean_abs_level_error:>12.2f}")
    print(f"{'Level error SD':<30} {result.level_error_sd:>12.2f}")
    print(f"{'Proportion correct':<30} {result.proportion_correct:>12.2%}")
    print(f"{'Attempts with repeats':<30} {result.attempts_with_repeats:>12d}")
    print()

    print("STOPPING REASONS:")
    print("-" * 80)
    for reason, count in sorted(result.stopping_reason_counts.items(), key=lambda kv: -kv[1]):
        print(f"  {count:>5}  {reason}")
    print()

    print("LEVEL EXPOSURE:")
    print("-" * 80)
    total = sum(result.level_exposure.values()) or 1
    for level, count in result.level_exposure.items():
        bar = "█" * int(50 * count / total)
        print(f"  {level:>3} {count:>6} {bar}")


if __name__ == "__main__":
    main()
