"""
Redemption guard - in-memory store allowing at most one redemption per team.

Every read and write of the team_name -> RedemptionRecord map happens under a
single lock, and add_redemption holds it across the whole check-then-create
sequence, so concurrent callers for the same team get exactly one success.
"""

import threading
import time
from typing import Callable, Dict, List, Optional

from util.logging import logger
from .errors import AlreadyRedeemedError
from .schema import RedemptionRecord

Clock = Callable[[], int]


def epoch_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class RedemptionGuard:
    """Tracks which teams have redeemed.

    A team moves from not-redeemed to redeemed exactly once; there is no way
    back and records are never updated or removed.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or epoch_millis
        self._lock = threading.Lock()
        self._redemptions: Dict[str, RedemptionRecord] = {}

    def is_eligible(self, team_name: str) -> bool:
        """True if the team has not redeemed yet."""
        with self._lock:
            return team_name not in self._redemptions

    def add_redemption(self, team_name: str) -> RedemptionRecord:
        """Record a redemption for the team.

        Raises AlreadyRedeemedError, leaving the store untouched, if the team
        has already redeemed.
        """
        with self._lock:
            existing = self._redemptions.get(team_name)
            if existing is None:
                record = RedemptionRecord(team_name=team_name, redeemed_at=self._clock())
                self._redemptions[team_name] = record

        if existing is not None:
            logger.log_redemption(team_name, "rejected", {"redeemed_at": existing.redeemed_at})
            raise AlreadyRedeemedError(team_name, existing)

        logger.log_redemption(team_name, "success", {"redeemed_at": record.redeemed_at})
        return record

    def get_redemption(self, team_name: str) -> Optional[RedemptionRecord]:
        """Get the team's redemption record, if any."""
        with self._lock:
            return self._redemptions.get(team_name)

    def redemptions(self) -> List[RedemptionRecord]:
        """Snapshot of all redemptions in the order they were made."""
        with self._lock:
            return list(self._redemptions.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._redemptions)
