"""
Tournament configuration model for the Courtside schedule viewer.

Holds the ordered list of tournament days and which of them is the last day.
The configuration is read from a small JSON file so a new edition of the cup
only needs a new file, not a code change.
"""
import json
import os
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from ..utils import format_date, parse_schedule_date
from ..utils.constants import DEFAULT_TOURNAMENT_DAYS, TOURNAMENT_NAME


class ConfigError(ValueError):
    """Raised when a tournament configuration is invalid."""
    pass


@dataclass
class TournamentConfig:
    """
    Calendar of a tournament.

    Attributes:
        days: Tournament days in ``D.M.YYYY`` form, earliest first
        last_day: Explicit final day; defaults to the last entry of ``days``
        name: Display name of the tournament
    """
    days: List[str] = field(default_factory=lambda: list(DEFAULT_TOURNAMENT_DAYS))
    last_day: Optional[str] = None
    name: str = TOURNAMENT_NAME

    def __post_init__(self) -> None:
        self.validate()

    @property
    def first_day(self) -> Optional[str]:
        return self.days[0] if self.days else None

    @property
    def final_day(self) -> Optional[str]:
        """The configured last day, falling back to the latest listed day."""
        if self.last_day:
            return self.last_day
        return self.days[-1] if self.days else None

    def first_date(self) -> Optional[date]:
        return parse_schedule_date(self.first_day) if self.first_day else None

    def final_date(self) -> Optional[date]:
        return parse_schedule_date(self.final_day) if self.final_day else None

    def validate(self) -> None:
        """
        Check that every day is a canonical ``D.M.YYYY`` date and that the
        days are in order.

        Schedule records are matched against these days as exact strings, so
        a zero padded day such as ``09.1.2026`` is rejected.

        Raises:
            ConfigError: If a day is not a canonical ``D.M.YYYY`` date, the days
                         are not ascending, or the last day precedes the first day
        """
        parsed = [self._parse_day(day, "tournament day") for day in self.days]

        if any(later <= earlier for earlier, later in zip(parsed, parsed[1:])):
            raise ConfigError("Tournament days must be listed earliest first")

        if self.last_day is not None:
            last = self._parse_day(self.last_day, "last day")
            if parsed and last < parsed[0]:
                raise ConfigError("Last day cannot precede the first tournament day")

    @staticmethod
    def _parse_day(day: str, label: str) -> date:
        value = parse_schedule_date(day)
        if value is None:
            raise ConfigError(f"Invalid {label}: {day!r}")
        if format_date(value) != day:
            raise ConfigError(f"{label.capitalize()} must be written as {format_date(value)!r}, not {day!r}")
        return value

    def to_json(self) -> Dict[str, Any]:
        return {"name": self.name, "days": list(self.days), "last_day": self.final_day}

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "TournamentConfig":
        """
        Create a configuration from a JSON dictionary.

        Args:
            data: Dictionary with ``days`` and optional ``last_day`` and ``name``

        Returns:
            New TournamentConfig instance

        Raises:
            ConfigError: If the dictionary does not describe a valid calendar
        """
        if not isinstance(data, dict):
            raise ConfigError("Tournament configuration must be a JSON object")

        days = data.get("days", list(DEFAULT_TOURNAMENT_DAYS))
        if not isinstance(days, list) or not all(isinstance(d, str) for d in days):
            raise ConfigError("'days' must be a list of D.M.YYYY strings")

        return TournamentConfig(
            days=list(days),
            last_day=data.get("last_day"),
            name=data.get("name", TOURNAMENT_NAME),
        )

    @staticmethod
    def load(file_path: str) -> "TournamentConfig":
        """
        Load a configuration from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigError: If the file content is invalid
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Tournament config not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {file_path}: {e}") from e

        return TournamentConfig.from_json(data)
