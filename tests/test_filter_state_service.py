import unittest
from datetime import datetime

from courtside.models import FilterMode, FilterState, TournamentConfig
from courtside.services import FilterStateService


class FilterStateServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = FilterState()
        self.config = TournamentConfig(days=["9.1.2026", "10.1.2026", "11.1.2026"])
        self.service = FilterStateService(self.state, self.config)
        self.during = datetime(2026, 1, 10, 12, 0)
        self.before = datetime(2025, 12, 1, 12, 0)

    def test_initial_state(self) -> None:
        self.assertIs(self.state.mode, FilterMode.NOW)
        self.assertIsNone(self.state.selected_day)
        self.assertEqual(self.state.selected_courts, set())

    def test_entering_day_mode_picks_today(self) -> None:
        self.service.set_mode("day", self.during)
        self.assertIs(self.state.mode, FilterMode.DAY)
        self.assertEqual(self.state.selected_day, "10.1.2026")

    def test_entering_day_mode_outside_tournament_picks_first_day(self) -> None:
        self.service.set_mode(FilterMode.DAY, self.before)
        self.assertEqual(self.state.selected_day, "9.1.2026")

    def test_entering_day_mode_without_days_falls_back_to_all(self) -> None:
        service = FilterStateService(self.state, TournamentConfig(days=[]))
        result = service.set_mode(FilterMode.DAY, self.during)
        self.assertIs(result, FilterMode.ALL)
        self.assertIs(self.state.mode, FilterMode.ALL)
        self.assertIsNone(self.state.selected_day)

    def test_entering_day_mode_keeps_selected_day(self) -> None:
        self.service.set_mode(FilterMode.DAY, self.during)
        self.service.select_day("11.1.2026")
        self.service.set_mode(FilterMode.DAY, self.during)
        self.assertEqual(self.state.selected_day, "11.1.2026")

    def test_leaving_day_mode_clears_day_and_courts(self) -> None:
        self.service.set_mode(FilterMode.DAY, self.during)
        self.service.select_day("11.1.2026")
        self.service.toggle_court("Court 1")

        self.service.set_mode(FilterMode.NOW, self.during)
        self.assertIsNone(self.state.selected_day)
        self.assertEqual(self.state.selected_courts, set())

        # back to day mode: the heuristic runs again
        self.service.set_mode(FilterMode.DAY, self.during)
        self.assertEqual(self.state.selected_day, "10.1.2026")

    def test_mode_change_clears_courts(self) -> None:
        self.service.toggle_court("Court 2")
        self.service.set_mode(FilterMode.ALL, self.during)
        self.assertEqual(self.state.selected_courts, set())

    def test_select_day_clears_courts(self) -> None:
        self.service.set_mode(FilterMode.DAY, self.during)
        self.service.toggle_court("Court 2")
        self.service.select_day("9.1.2026")
        self.assertEqual(self.state.selected_day, "9.1.2026")
        self.assertEqual(self.state.selected_courts, set())

    def test_select_day_switches_to_day_mode(self) -> None:
        self.service.select_day("9.1.2026")
        self.assertIs(self.state.mode, FilterMode.DAY)

    def test_toggle_court_is_symmetric(self) -> None:
        self.service.set_mode(FilterMode.DAY, self.during)
        self.assertTrue(self.service.toggle_court("Court 1"))
        self.assertTrue(self.service.toggle_court("Court 2"))
        self.assertFalse(self.service.toggle_court("Court 1"))
        self.assertEqual(self.state.selected_courts, {"Court 2"})
        self.assertIs(self.state.mode, FilterMode.DAY)
        self.assertEqual(self.state.selected_day, "10.1.2026")

    def test_unknown_mode_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.service.set_mode("tomorrow", self.during)
        self.assertIs(self.state.mode, FilterMode.NOW)

    def test_mode_names_are_case_insensitive(self) -> None:
        self.assertIs(FilterStateService.parse_mode(" ALL "), FilterMode.ALL)


if __name__ == "__main__":
    unittest.main()
