"""
Structured operation logging for the redemption desk.
Mapping loads, lookups and redemption outcomes are all logged through here.
"""

import logging
from typing import Any, Dict


class StructuredLogger:
    """Structured logger for mapping loads, lookups and redemptions."""

    def __init__(self, name: str = "redemption_desk", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.set_level(level)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def set_level(self, level: str) -> None:
        """Set the logger level from a level name such as 'INFO'."""
        self.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None,
                      level: int = logging.INFO):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    def log_mapping_load(self, source: str, loaded: int, skipped: int = 0, status: str = "success"):
        """Log the outcome of loading a staff-to-team mapping file."""
        details = {"source": source, "loaded": loaded}
        if skipped:
            details["skipped_rows"] = skipped

        level = logging.INFO if status == "success" else logging.ERROR
        self.log_operation("mapping.load", status, details, level=level)

    def log_lookup(self, staff_id: str, status: str, team_name: str = None):
        """Log a staff pass lookup. Staff ids are masked to their last four characters."""
        details = {"staff_id": mask_identifier(staff_id)}
        if team_name is not None:
            details["team_name"] = team_name

        self.log_operation("lookup", status, details, level=logging.DEBUG)

    def log_redemption(self, team_name: str, status: str, details: Dict[str, Any] = None):
        """Log a redemption attempt for a team."""
        log_details = {"team_name": team_name}
        if details:
            log_details.update(details)

        level = logging.INFO if status in ("success", "rejected") else logging.WARNING
        self.log_operation(f"redemption.{status}", status, log_details, level=level)


def mask_identifier(value: str, visible: int = 4) -> str:
    """Mask all but the last `visible` characters of an identifier."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


# Global logger instance
logger = StructuredLogger()
