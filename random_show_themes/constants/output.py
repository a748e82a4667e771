"""Output and logging constants."""

# Column headers shared by the table and CSV outputs
HEADER_SONG = "Song"
HEADER_SHOW = "Show"
HEADER_TYPE = "Type"
RESULT_HEADERS = (HEADER_SONG, HEADER_SHOW, HEADER_TYPE)

# Table width used when the terminal size cannot be detected
DEFAULT_TABLE_WIDTH = 60
DEFAULT_TABLE_HEIGHT = 20

# Readable output line
READABLE_LINE_PATTERN = "{theme} [{category}] from {title}"

# Logging
PACKAGE_LOGGER_NAME = "random_show_themes"

# datetime.isoformat() timespec per --timestamp choice ("ns" is capped at microseconds)
TIMESTAMP_TIMESPECS = {
    "sec": "seconds",
    "ms": "milliseconds",
    "ns": "microseconds",
}
