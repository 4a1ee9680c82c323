"""
Record types shared by the mapping loader and the redemption guard.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class MappingRecord:
    staff_id: str
    team_name: str
    created_at: int  # epoch milliseconds


@dataclass(frozen=True)
class RedemptionRecord:
    team_name: str
    redeemed_at: int  # epoch milliseconds


@dataclass
class MappingLoadReport:
    source: str
    records: List[MappingRecord] = field(default_factory=list)
    skipped_rows: int = 0

    @property
    def loaded_rows(self) -> int:
        return len(self.records)
