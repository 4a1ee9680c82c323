"""
Exceptions raised by the redemption desk core.
"""

from typing import Optional

from .schema import RedemptionRecord


class RedemptionDeskError(Exception):
    """Base class for redemption desk errors."""


class MappingLoadError(RedemptionDeskError):
    """The mapping file could not be opened or parsed as CSV."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class AlreadyRedeemedError(RedemptionDeskError):
    """A redemption already exists for the team."""

    def __init__(self, team_name: str, record: Optional[RedemptionRecord] = None):
        super().__init__("team has already redeemed their gift")
        self.team_name = team_name
        self.record = record
