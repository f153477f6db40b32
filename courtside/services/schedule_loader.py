"""
Schedule loading for the Courtside schedule viewer.

This module reads the schedule records once at startup, either from a JSON
file, a JSON string, or a published HTML page that embeds the records in a
``<script id="presentation-data">`` element. Any problem with the overall
shape of the data is fatal: the caller gets a single ScheduleLoadError and
nothing is rendered.
"""
import json
import logging
import os
from typing import Any, List

from bs4 import BeautifulSoup

from ..models import RecordStore, ScheduleEntry
from ..utils.constants import EMBEDDED_DATA_ID, SCHEDULE_FIELDS

logger = logging.getLogger(__name__)


class ScheduleLoadError(ValueError):
    """Raised when the schedule data cannot be loaded."""
    pass


class ScheduleLoader:
    """Loads schedule records into a RecordStore."""

    @staticmethod
    def load_from_file(file_path: str) -> RecordStore:
        """
        Load schedule records from a JSON or HTML file.

        Args:
            file_path: Path to a ``.json`` file or an HTML page with embedded data

        Returns:
            RecordStore with every record of the file

        Raises:
            ScheduleLoadError: If the file is missing, unreadable or malformed
        """
        if not os.path.exists(file_path):
            raise ScheduleLoadError(f"Schedule file not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ScheduleLoadError(f"Cannot read schedule file {file_path}: {e}") from e

        if file_path.lower().endswith((".html", ".htm")):
            return ScheduleLoader.load_from_html(content)
        return ScheduleLoader.load_from_json(content)

    @staticmethod
    def load_from_html(html: str) -> RecordStore:
        """
        Load schedule records embedded in an HTML page.

        Raises:
            ScheduleLoadError: If the data element is missing or malformed
        """
        soup = BeautifulSoup(html, "html.parser")
        script = soup.find("script", id=EMBEDDED_DATA_ID)
        if script is None:
            raise ScheduleLoadError(f"No element with id '{EMBEDDED_DATA_ID}' in page")
        return ScheduleLoader.load_from_json(script.string or "")

    @staticmethod
    def load_from_json(text: str) -> RecordStore:
        """
        Load schedule records from a JSON string.

        Raises:
            ScheduleLoadError: If the text is not a JSON array of records
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ScheduleLoadError(f"Invalid schedule JSON: {e}") from e
        return ScheduleLoader.load_records(data)

    @staticmethod
    def load_records(data: Any) -> RecordStore:
        """
        Build a RecordStore from already decoded JSON data.

        Field values are taken as-is; unusual dates or times are not rejected
        here and simply never match a time filter.

        Raises:
            ScheduleLoadError: If ``data`` is not a list of complete records
        """
        if not isinstance(data, list):
            raise ScheduleLoadError("Schedule data must be a JSON array")

        entries: List[ScheduleEntry] = []
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise ScheduleLoadError(f"Record {index} is not an object")

            for wire in SCHEDULE_FIELDS.values():
                if wire not in record:
                    raise ScheduleLoadError(f"Record {index} is missing '{wire}'")
                if not isinstance(record[wire], str):
                    raise ScheduleLoadError(f"Record {index} field '{wire}' must be a string")

            entries.append(ScheduleEntry.from_json(record))

        logger.info("Loaded %d schedule entries", len(entries))
        return RecordStore(entries)
