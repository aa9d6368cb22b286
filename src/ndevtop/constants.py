"""
Constants for ndevtop.
"""

APP_NAME: str = "ndevtop"
VERSION: str = "1.0.0"

# Refresh interval in seconds when neither the CLI nor settings give one
DEFAULT_INTERVAL: int = 3

# Longest accepted refresh interval (one day)
MAX_INTERVAL: int = 24 * 60 * 60

# Default glob for per-device counter directories (Linux sysfs)
NDEV_STAT_PATH_PATTERN: str = "/sys/class/net/*/statistics"

# Maximum length of the device name filter typed into the prompt
FILTER_MAX_LENGTH: int = 15

# Column widths of the device table
NAME_COLUMN_WIDTH: int = 15
RATE_COLUMN_WIDTH: int = 11

# Number of rows reserved for the key help header
HEADER_HEIGHT: int = 6

INTERVAL_PROMPT: str = "set interval (secs): "
FILTER_PROMPT: str = "set name filter: "
