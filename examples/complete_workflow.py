"""
Complete workflow example: Quiz configuration → Catalog → Attempt → Item administration

Demonstrates how a hosting quiz runner drives the engine:
1. Validate the quiz configuration
2. Load the question catalog from JSON
3. Create a JSON-backed attempt
4. Ask the configured strategy for the next item until it stops
5. Grade each answer on the question ledger
"""

import random
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import config, configure_logging
from src.engine import build_item_administration
from src.models.attempt import Attempt
from src.models.quiz_configuration import QuizConfiguration
from src.services.attempt_store import JsonAttemptStore
from src.services.catalog import load_catalog
from src.services.event_logger import LoggingEventLogger
from src.services.ledger import LedgerRegistry


def main():
    configure_logging()
    config.prepare_fs()

    # ==================== Step 1: Quiz configuration ====================
    print("=" * 60)
    print("STEP 1: Validating quiz configuration")
    print("=" * 60)

    quiz = QuizConfiguration.from_dict(
        {
            "id": 1,
            "name": "Fractions placement",
            "lowestlevel": "1",  # repaired to an integer
            "highestlevel": 5,
            "startinglevel": 2,
            "maximumquestions": 6,
        }
    )
    print(f"✓ Quiz {quiz.name!r}: levels {quiz.lowestlevel}-{quiz.highestlevel}, "
          f"start {quiz.startinglevel}, max {quiz.maximumquestions} questions")
    print()

    # ==================== Step 2: Catalog ====================
    print("=" * 60)
    print("STEP 2: Loading question catalog")
    print("=" * 60)

    catalog = load_catalog(Path(__file__).parent / "data" / "fractions_catalog.json")
    print(f"✓ Loaded {len(catalog)} questions on levels {catalog.levels()}")
    print()

    # ==================== Step 3: Attempt ====================
    print("=" * 60)
    print("STEP 3: Creating attempt")
    print("=" * 60)

    store = JsonAttemptStore()
    attempt_data = store.create()
    attempt = Attempt(attempt_data.id, store)
    registry = LedgerRegistry()
    ledger = registry.create()
    print(f"✓ Attempt {attempt_data.id} stored in {config.paths.attempts_dir}")
    print()

    # ==================== Step 4: Administration loop ====================
    print("=" * 60)
    print("STEP 4: Administering questions")
    print("=" * 60)

    rng = random.Random(3)
    previous_slot = None
    level = quiz.startinglevel
    while True:
        administration = build_item_administration(
            "adaptive",
            attempt=attempt,
            quiz=quiz,
            ledger=ledger,
            catalog=catalog,
            used_questions=registry,
            level=level,
            event_logger=LoggingEventLogger(),
        )
        evaluation = administration.evaluate_ability_to_administer_next_item(previous_slot)
        if evaluation.is_stopped:
            print(f"\n■ Stopped: {evaluation.stoppage_reason}")
            break

        slot = evaluation.next_item.slot
        question = catalog.load(ledger.question_id_of(slot))
        level = question.level

        # ==================== Step 5: Grading ====================
        correct = rng.random() < 0.6
        ledger.process_answer(slot, question.max_mark if correct else 0.0)
        store.record_question_attempted(attempt_data.id)
        previous_slot = slot

        marker = "✓" if correct else "✗"
        print(f"  {marker} Slot {slot}: [{question.level}] {question.name} - {question.text}")

    store.complete(attempt_data.id)
    final = store.read(attempt_data.id)
    print(f"\n✓ Attempt {final.id} {final.attemptstate} after {final.questionsattempted} questions")


if __name__ == "__main__":
    main()
