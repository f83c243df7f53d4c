"""
Category data model.

A named grouping of activities.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List


@dataclass(frozen=True)
class Category:
    """
    A category and the activities it is currently linked to.
    Re-registering a category replaces the whole object.
    """
    name: str
    activities: FrozenSet[str] = field(default_factory=frozenset)

    def sorted_activities(self) -> List[str]:
        """
        Linked activities in name order.

        Returns:
            Sorted list of activity names (empty if none)
        """
        return sorted(self.activities)
