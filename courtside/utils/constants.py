"""
Constants for the Courtside schedule viewer.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Courtside"
TOURNAMENT_NAME = "Dybbøl Cup"

# Tournament calendar defaults (D.M.YYYY, earliest first).
# Overridden by the tournament config file when one is supplied.
DEFAULT_TOURNAMENT_DAYS = ["9.1.2026", "10.1.2026", "11.1.2026"]

# Filter timing
EARLY_VISIBILITY_MIN = 30  # games show up in "now" this long before they start
UPCOMING_LIMIT = 3

# Refresh intervals for the periodic ticks
NOW_REFRESH_SECONDS = 60
CLOCK_REFRESH_SECONDS = 1

# Wire names of the schedule records
SCHEDULE_FIELDS = {
    "group": "Group",
    "schedule_date": "ScheduleDate",
    "start_time": "StartTime",
    "end_time": "EndTime",
    "court": "Court",
    "presentation_link": "PresentationLink",
}

# Element id of the embedded schedule data in a published page
EMBEDDED_DATA_ID = "presentation-data"

# Court separator for combined court labels ("Court 1 & Court 2")
COURT_SEPARATOR = "&"

# Theme preference
THEMES = ("light", "dark")
DEFAULT_THEME = "light"
DEFAULT_PREFERENCES_FILE = "preferences.json"

# Render hints passed to listeners
HINT_NORMAL = "normal"
HINT_UPCOMING = "upcoming-fallback"
HINT_TOURNAMENT_OVER = "tournament-over"
HINT_EMPTY = "empty"

# User-facing messages
MSG_LOAD_FAILED = "Failed to load schedule data"
MSG_NOTHING_LIVE = "No games in progress right now"
MSG_NEXT_GAMES = "Next games:"
MSG_NO_GROUPS = "No groups found"
MSG_TOURNAMENT_OVER = "The tournament is over!"
MSG_TOURNAMENT_OVER_DETAIL = "Thanks for this year! See you at the next cup"
