"""
Mapping loader - turns the staff pass CSV into MappingRecords and a read-only
staff_id -> team_name lookup table.

The file is expected to start with a header row (staff_pass_id,team_name,created_at)
which is always skipped. Data rows with fewer than three fields or a created_at
that is not a base-10 integer are dropped without raising; only a file that cannot
be opened or read as CSV fails the load.
"""

import csv
import re
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .errors import MappingLoadError
from .schema import MappingLoadReport, MappingRecord

EXPECTED_HEADER = ("staff_pass_id", "team_name", "created_at")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_BASE10_INT = re.compile(r"[+-]?[0-9]+")


class MappingRow(BaseModel):
    """One data row of the mapping file."""
    staff_pass_id: str
    team_name: str
    created_at: int

    @field_validator('created_at', mode='before')
    @classmethod
    def created_at_must_be_base10_int64(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            value = v
        elif isinstance(v, str) and _BASE10_INT.fullmatch(v):
            value = int(v, 10)
        else:
            raise ValueError('created_at must be a base-10 integer')
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError('created_at out of 64-bit range')
        return value

    def to_record(self) -> MappingRecord:
        return MappingRecord(
            staff_id=self.staff_pass_id,
            team_name=self.team_name,
            created_at=self.created_at,
        )


def _read_rows(file_path: str, delimiter: str) -> List[List[str]]:
    """Read every non-blank CSV row, raising MappingLoadError on structural failure."""
    try:
        with open(file_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f, delimiter=delimiter, strict=True)
            return [row for row in reader if row]
    except OSError as e:
        raise MappingLoadError(file_path, "unable to open CSV file") from e
    except UnicodeDecodeError as e:
        raise MappingLoadError(file_path, "CSV file is not valid UTF-8") from e
    except csv.Error as e:
        raise MappingLoadError(file_path, f"error reading CSV file ({e})") from e


def parse_rows(rows: Iterable[List[str]], source: str = "<rows>") -> MappingLoadReport:
    """Parse CSV rows (header included) into a MappingLoadReport."""
    report = MappingLoadReport(source=source)

    for index, row in enumerate(rows):
        if index == 0:
            # First row is the header, whatever it contains
            continue
        if len(row) < 3:
            report.skipped_rows += 1
            continue
        try:
            parsed = MappingRow(
                staff_pass_id=row[0],
                team_name=row[1],
                created_at=row[2],
            )
        except ValidationError:
            report.skipped_rows += 1
            continue
        report.records.append(parsed.to_record())

    return report


def load_mapping_report(file_path: str, delimiter: str = ",") -> MappingLoadReport:
    """Load the mapping file and report how many data rows were skipped."""
    rows = _read_rows(file_path, delimiter)
    return parse_rows(rows, source=str(file_path))


def load_mapping_from_csv(file_path: str, delimiter: str = ",") -> List[MappingRecord]:
    """Load the mapping file into MappingRecords, preserving file order."""
    return load_mapping_report(file_path, delimiter).records


def build_lookup(records: Iterable[MappingRecord]) -> Mapping[str, str]:
    """Project records into a read-only staff_id -> team_name table.

    Later records overwrite earlier ones with the same staff_id.
    """
    lookup = {}
    for record in records:
        lookup[record.staff_id] = record.team_name
    return MappingProxyType(lookup)


def lookup_team(lookup: Mapping[str, str], staff_id: str) -> Optional[str]:
    """Return the team for a staff pass id, or None if it is unknown."""
    return lookup.get(staff_id)
