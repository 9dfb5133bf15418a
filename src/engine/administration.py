"""
Item administration interface.

Every strategy answers the same question for a running attempt: can a next
item be administered, and if so which one. Hosts depend only on this
interface and pick the concrete strategy through configuration
(see `src.engine.factory`).
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.evaluation import ItemAdministrationEvaluation


class ItemAdministration(ABC):
    """Decides on the next item of an attempt."""

    @abstractmethod
    def evaluate_ability_to_administer_next_item(
        self, previous_question_slot: Optional[int]
    ) -> ItemAdministrationEvaluation:
        """
        Args:
            previous_question_slot: Slot of the previously administered
                question, or None for a fresh attempt

        Returns:
            Evaluation holding either the next item or a stoppage reason
        """
