"""
Redemption desk - resolves a staff pass to a team and redeems for that team.
Returns plain outcome values; formatting is left to the caller.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from util.logging import logger
from .errors import AlreadyRedeemedError
from .mapping import lookup_team
from .redemption import RedemptionGuard
from .schema import RedemptionRecord

NOT_FOUND = "not_found"
REDEEMED = "redeemed"
ALREADY_REDEEMED = "already_redeemed"


@dataclass(frozen=True)
class DeskOutcome:
    staff_id: str
    status: str  # not_found, redeemed, already_redeemed
    team_name: Optional[str] = None
    redemption: Optional[RedemptionRecord] = None

    @property
    def found(self) -> bool:
        return self.status != NOT_FOUND


class RedemptionDesk:
    """Per-request flow over a lookup table and a RedemptionGuard."""

    def __init__(self, lookup: Mapping[str, str], guard: RedemptionGuard):
        self.lookup = lookup
        self.guard = guard

    def process(self, staff_id: str) -> DeskOutcome:
        """Look up the staff pass and redeem for its team if still eligible."""
        team_name = lookup_team(self.lookup, staff_id)
        if team_name is None:
            logger.log_lookup(staff_id, "miss")
            return DeskOutcome(staff_id=staff_id, status=NOT_FOUND)

        logger.log_lookup(staff_id, "hit", team_name)

        if not self.guard.is_eligible(team_name):
            return DeskOutcome(
                staff_id=staff_id,
                status=ALREADY_REDEEMED,
                team_name=team_name,
                redemption=self.guard.get_redemption(team_name),
            )

        try:
            record = self.guard.add_redemption(team_name)
        except AlreadyRedeemedError as e:
            # Another caller redeemed between the check and the add
            return DeskOutcome(
                staff_id=staff_id,
                status=ALREADY_REDEEMED,
                team_name=team_name,
                redemption=e.record,
            )

        return DeskOutcome(
            staff_id=staff_id,
            status=REDEEMED,
            team_name=team_name,
            redemption=record,
        )
