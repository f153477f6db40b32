"""
FilterState model for the Courtside schedule viewer.

This module contains the FilterMode enumeration and the FilterState dataclass
which together describe what the viewer is currently showing. The state is
only changed through FilterStateService transitions.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Set


class FilterMode(Enum):
    """Time relevance filter."""
    NOW = "now"
    DAY = "day"
    ALL = "all"


@dataclass
class FilterState:
    """
    Current filter selection of a viewing session.

    Attributes:
        mode: Active time filter
        selected_day: Chosen ``D.M.YYYY`` day, only meaningful in DAY mode
        selected_courts: Courts narrowing the result, applies in every mode
    """
    mode: FilterMode = FilterMode.NOW
    selected_day: Optional[str] = None
    selected_courts: Set[str] = field(default_factory=set)

    def to_json(self) -> Dict[str, Any]:
        """
        Convert FilterState to JSON-serializable dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "mode": self.mode.value,
            "selected_day": self.selected_day,
            "selected_courts": sorted(self.selected_courts),
        }

    def copy(self) -> "FilterState":
        """Return an independent copy of this state."""
        return FilterState(
            mode=self.mode,
            selected_day=self.selected_day,
            selected_courts=set(self.selected_courts),
        )
