"""Shared constants for relink dot-directories and artefact locations."""

RELINK_HOME_EXT = ".relink"  # user-level state directory suffix

# Repository-level configuration file, looked up at the scanned root
CONFIG_FILENAME = ".relink.json"

LOG_FILENAME = "relink.log"

# Exit codes
EXIT_CLEAN = 0
EXIT_BROKEN = 1
EXIT_INVALID_PLAN = 2
