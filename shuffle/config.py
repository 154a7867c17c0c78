# config.py
"""
Library configuration constants for the Shuffle card stack
"""

# Logging
LOGGER_NAME = "shuffle"
LOG_FILE_NAME = "shuffle.log"
LOG_MAX_BYTES = 1_048_576  # 1 MiB per file before rotation
LOG_BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Stack defaults
DEFAULT_SHIFT_DISTANCE = 1
DEFAULT_VISIBLE_CARDS = 2  # top card plus the one peeking underneath
