"""
Runtime configuration for the redemption desk.
Values are read from the environment once at import; the core modules take
explicit parameters and only the CLI consults this module.
"""

import logging
import os

# Debug flag
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Logging level name for util.logging (WARNING keeps the prompt readable)
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

# Mapping file parsing
CSV_DELIMITER = os.getenv("CSV_DELIMITER", ",")
REPORT_SKIPPED_ROWS = os.getenv("REPORT_SKIPPED_ROWS", "true").lower() == "true"

# Interactive loop
EXIT_COMMAND = os.getenv("EXIT_COMMAND", "exit")

# Version string
VERSION = "1.0.0"

UNUSABLE_DELIMITERS = ('"', "\r", "\n")


def get_log_level():
    """Get configured log level name, DEBUG when debug mode is on."""
    if DEBUG:
        return "DEBUG"
    return LOG_LEVEL


def get_csv_delimiter():
    """Get the mapping file delimiter."""
    return CSV_DELIMITER


def get_exit_command():
    """Get the literal input that ends the interactive loop."""
    return EXIT_COMMAND


def delimiter_issues(delimiter, name="CSV_DELIMITER"):
    """Return problems with a CSV delimiter, empty if it is usable."""
    if len(delimiter) != 1:
        return [f"{name} must be a single character, got {delimiter!r}"]
    if delimiter in UNUSABLE_DELIMITERS:
        return [f"{name} cannot be a quote or line break, got {delimiter!r}"]
    return []


def validate_config():
    """Validate configuration and return any issues."""
    issues = delimiter_issues(CSV_DELIMITER)

    # DEBUG overrides LOG_LEVEL, so the level name only matters without it
    if not DEBUG and not isinstance(logging.getLevelName(LOG_LEVEL), int):
        issues.append(f"Invalid LOG_LEVEL: {LOG_LEVEL}")

    if not EXIT_COMMAND or any(c.isspace() for c in EXIT_COMMAND):
        issues.append(f"EXIT_COMMAND must be a single word, got {EXIT_COMMAND!r}")

    return issues
