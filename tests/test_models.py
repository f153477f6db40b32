"""
Unit tests for the Courtside models.

Tests ScheduleEntry, RecordStore, FilterState and TournamentConfig.
"""
import json
import os
import tempfile
import unittest
from dataclasses import FrozenInstanceError
from datetime import date

from courtside.models import (
    ConfigError, FilterMode, FilterState, RecordStore, ScheduleEntry, TournamentConfig
)


class TestScheduleEntry(unittest.TestCase):

    def setUp(self) -> None:
        self.entry = ScheduleEntry(
            group="U13 Girls A",
            schedule_date="9.1.2026",
            start_time="09:05",
            end_time="10:40",
            court=" Court 1 &Court 2 ",
            presentation_link="https://example.org/u13",
        )

    def test_minutes(self) -> None:
        self.assertEqual(self.entry.start_minutes, 9 * 60 + 5)
        self.assertEqual(self.entry.end_minutes, 10 * 60 + 40)

    def test_courts_are_split_and_trimmed(self) -> None:
        self.assertEqual(self.entry.courts(), ["Court 1", "Court 2"])

    def test_single_court(self) -> None:
        entry = ScheduleEntry("G", "9.1.2026", "09:00", "10:00", "Court 3", "")
        self.assertEqual(entry.courts(), ["Court 3"])

    def test_json_round_trip_uses_wire_names(self) -> None:
        data = self.entry.to_json()
        self.assertEqual(data["Group"], "U13 Girls A")
        self.assertEqual(data["PresentationLink"], "https://example.org/u13")
        self.assertEqual(ScheduleEntry.from_json(data), self.entry)

    def test_entries_are_immutable(self) -> None:
        with self.assertRaises(FrozenInstanceError):
            self.entry.court = "Court 9"


class TestRecordStore(unittest.TestCase):

    def test_store_keeps_order_and_copies_input(self) -> None:
        entries = [
            ScheduleEntry("A", "9.1.2026", "09:00", "10:00", "Court 1", ""),
            ScheduleEntry("B", "10.1.2026", "09:00", "10:00", "Court 1", ""),
        ]
        store = RecordStore(entries)
        entries.append(ScheduleEntry("C", "9.1.2026", "09:00", "10:00", "Court 1", ""))

        self.assertEqual(len(store), 2)
        self.assertEqual([e.group for e in store], ["A", "B"])
        self.assertEqual([e.group for e in store.entries_on("10.1.2026")], ["B"])
        self.assertIsInstance(store.entries, tuple)


class TestFilterState(unittest.TestCase):

    def test_defaults(self) -> None:
        state = FilterState()
        self.assertIs(state.mode, FilterMode.NOW)
        self.assertEqual(state.to_json(), {"mode": "now", "selected_day": None, "selected_courts": []})

    def test_copy_is_independent(self) -> None:
        state = FilterState(FilterMode.DAY, "9.1.2026", {"Court 2", "Court 1"})
        clone = state.copy()
        state.selected_courts.clear()
        self.assertEqual(clone.to_json()["selected_courts"], ["Court 1", "Court 2"])


class TestTournamentConfig(unittest.TestCase):

    def test_defaults(self) -> None:
        config = TournamentConfig()
        self.assertEqual(config.days, ["9.1.2026", "10.1.2026", "11.1.2026"])
        self.assertEqual(config.final_day, "11.1.2026")
        self.assertEqual(config.first_date(), date(2026, 1, 9))
        self.assertEqual(config.final_date(), date(2026, 1, 11))

    def test_explicit_last_day(self) -> None:
        config = TournamentConfig(days=["9.1.2026", "10.1.2026"], last_day="11.1.2026")
        self.assertEqual(config.final_day, "11.1.2026")

    def test_no_days(self) -> None:
        config = TournamentConfig(days=[])
        self.assertIsNone(config.first_day)
        self.assertIsNone(config.final_date())

    def test_invalid_day(self) -> None:
        with self.assertRaises(ConfigError):
            TournamentConfig(days=["31.2.2026"])

    def test_days_must_ascend(self) -> None:
        with self.assertRaises(ConfigError):
            TournamentConfig(days=["10.1.2026", "9.1.2026"])

    def test_last_day_before_first_day(self) -> None:
        with self.assertRaises(ConfigError):
            TournamentConfig(days=["9.1.2026"], last_day="1.1.2026")

    def test_zero_padded_days_are_rejected(self) -> None:
        with self.assertRaisesRegex(ConfigError, "9.1.2026"):
            TournamentConfig(days=["09.1.2026", "10.1.2026", "11.1.2026"])
        with self.assertRaises(ConfigError):
            TournamentConfig(days=["9.1.2026", "10.1.2026", "11.01.2026"])
        with self.assertRaises(ConfigError):
            TournamentConfig(days=["9.1.2026"], last_day="11.01.2026")

    def test_padded_file_fails_to_load(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "tournament.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"days": ["09.01.2026", "10.01.2026"]}, f)

            with self.assertRaises(ConfigError):
                TournamentConfig.load(path)

    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "tournament.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"name": "Winter Cup", "days": ["6.2.2027", "7.2.2027"]}, f)

            config = TournamentConfig.load(path)

        self.assertEqual(config.name, "Winter Cup")
        self.assertEqual(config.final_day, "7.2.2027")
        self.assertEqual(config.to_json()["last_day"], "7.2.2027")

    def test_load_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            TournamentConfig.load("/nonexistent/tournament.json")

    def test_from_json_rejects_bad_shapes(self) -> None:
        with self.assertRaises(ConfigError):
            TournamentConfig.from_json(["9.1.2026"])
        with self.assertRaises(ConfigError):
            TournamentConfig.from_json({"days": "9.1.2026"})


if __name__ == "__main__":
    unittest.main()
