"""
Preferences service for the Courtside schedule viewer.

This module handles saving and loading the viewer's theme preference to and
from a JSON file. The theme is the only thing the viewer persists.
"""
import json
import logging
import os
from typing import Optional

from ..utils.constants import DEFAULT_PREFERENCES_FILE, DEFAULT_THEME, THEMES

logger = logging.getLogger(__name__)


class PreferencesService:
    """
    Service for persisting the theme preference to a JSON file.

    When no preference has been saved, the theme follows ``system_theme``
    (what the client reports it prefers), falling back to light.
    """

    def __init__(self, file_path: str = DEFAULT_PREFERENCES_FILE):
        self.file_path = file_path

    def load_theme(self) -> Optional[str]:
        """
        Load the saved theme.

        Returns:
            ``"light"`` or ``"dark"``, or None when nothing usable was saved
        """
        if not os.path.exists(self.file_path):
            return None

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.file_path, e)
            return None

        theme = data.get("theme") if isinstance(data, dict) else None
        return theme if theme in THEMES else None

    def resolve_theme(self, system_theme: Optional[str] = None) -> str:
        """Saved theme, else the system preference, else the default."""
        saved = self.load_theme()
        if saved:
            return saved
        if system_theme in THEMES:
            return system_theme
        return DEFAULT_THEME

    def save_theme(self, theme: str) -> None:
        """
        Save the theme preference.

        Raises:
            ValueError: If the theme is not ``light`` or ``dark``
            OSError: If the file cannot be written
        """
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r}")

        directory = os.path.dirname(self.file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)

        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump({"theme": theme}, f, indent=2)

    def toggle_theme(self, system_theme: Optional[str] = None) -> str:
        """
        Switch between light and dark and save the result.

        Returns:
            The newly active theme
        """
        current = self.resolve_theme(system_theme)
        new_theme = "light" if current == "dark" else "dark"
        self.save_theme(new_theme)
        return new_theme
