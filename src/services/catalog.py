"""
In-memory question catalog with a JSON loader.
"""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Set

from ..errors import UnknownQuestionError
from ..utils.validation import validate_question_catalog
from .interfaces import QuestionCatalog, QuestionDefinition

logger = logging.getLogger(__name__)


class InMemoryQuestionCatalog(QuestionCatalog):
    """
    Question catalog indexed by difficulty level.

    Usage:
        catalog = InMemoryQuestionCatalog.from_levels({101: 1, 102: 1, 201: 2})
        catalog.questions_at_level(1, exclude={101})  # {102}
    """

    def __init__(self, questions: Iterable[QuestionDefinition] = ()):
        self._questions: Dict[int, QuestionDefinition] = {}
        self._by_level: Dict[int, Set[int]] = defaultdict(set)
        for question in questions:
            self.add(question)

    @classmethod
    def from_levels(cls, levels: Mapping[int, int]) -> InMemoryQuestionCatalog:
        """Build a catalog from a {question_id: level} mapping."""
        return cls(QuestionDefinition(id=qid, level=level) for qid, level in levels.items())

    def add(self, question: QuestionDefinition) -> None:
        if question.id in self._questions:
            raise ValueError(f"Question {question.id} already in catalog")
        self._questions[question.id] = question
        self._by_level[question.level].add(question.id)

    def questions_at_level(self, level: int, exclude: Set[int] = frozenset()) -> Set[int]:
        return self._by_level.get(level, set()) - set(exclude)

    def load(self, question_id: int) -> QuestionDefinition:
        try:
            return self._questions[question_id]
        except KeyError:
            raise UnknownQuestionError(question_id) from None

    def levels(self) -> List[int]:
        """Levels holding at least one question, ascending."""
        return sorted(level for level, ids in self._by_level.items() if ids)

    def __len__(self) -> int:
        return len(self._questions)


def load_catalog(path: Path | str) -> InMemoryQuestionCatalog:
    """
    Load a catalog from a JSON document shaped like
    {"questions": [{"id": 1, "level": 3, ...}, ...]}.

    Raises:
        ValueError: If the document fails validation
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)

    result = validate_question_catalog(document)
    if not result.valid:
        raise ValueError(f"Invalid question catalog {path}:\n" + "\n".join(result.errors))

    catalog = InMemoryQuestionCatalog(QuestionDefinition(**q) for q in result.data["questions"])
    logger.info(f"Loaded {len(catalog)} questions across {len(catalog.levels())} levels from {path}")
    return catalog
