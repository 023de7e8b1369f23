"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Night premium window, minutes since midnight: [01:00, 06:00)
NIGHT_WINDOW_START = 60
NIGHT_WINDOW_END = 360

DEFAULT_HISTORY_LIMIT = 100
DEFAULT_REQUEST_TIMEOUT = 20

EMPTY_DAY_LABEL = "-"
WORKED_PLACEHOLDER_LABEL = "Gewerkt"
