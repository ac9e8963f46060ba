"""
Data records for the weekly sheep market metrics.

Both records are frozen: they are built once per run and afterwards only
compared or serialised. JSON keys follow the snapshot file format that is
already published, so field names and wire keys differ slightly
(``sheep_week_index`` is stored as ``sheepweekindex``).
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

# Snapshot slots in parse order: first parsed row is the current week
WEEK_SLOTS = ["this_week", "last_week", "two_weeks_ago", "three_weeks_ago"]


@dataclass(frozen=True)
class WeeklyRow:
    """One row of the weekly metrics table.

    Everything except ``sheep_week_index`` has been reduced to digits and
    minus signs. Values stay strings; nothing is converted to a number.
    A cell that was missing from a truncated block is ``None``.
    """
    sheep_week_index: Optional[str]
    total_head_inc_reoffers: Optional[str]
    clearance_rate_mm: Optional[str]
    amount_over_reserve: Optional[str]
    arli_ckg_dw: Optional[str]
    arl_change_sheepindex: Optional[str]
    total_head_change_sheepindex: Optional[str]
    clearance_rate_change_sheepindex: Optional[str]
    vor_change_sheepindex: Optional[str]

    def to_dict(self) -> Dict[str, Optional[str]]:
        data = {}
        for f in fields(self):
            data[_wire_key(f.name)] = getattr(self, f.name)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeeklyRow":
        """Build a row from its JSON form; raises KeyError on a missing key"""
        return cls(**{f.name: data[_wire_key(f.name)] for f in fields(cls)})


def _wire_key(field_name: str) -> str:
    if field_name == "sheep_week_index":
        return "sheepweekindex"
    return field_name


@dataclass(frozen=True)
class MetricsSnapshot:
    """The persisted result of one scrape run"""
    updated_at: str
    this_week: Optional[WeeklyRow] = None
    last_week: Optional[WeeklyRow] = None
    two_weeks_ago: Optional[WeeklyRow] = None
    three_weeks_ago: Optional[WeeklyRow] = None

    def rows_dict(self) -> Dict[str, Optional[Dict[str, Optional[str]]]]:
        """The four week slots without the timestamp"""
        rows = {}
        for slot in WEEK_SLOTS:
            row = getattr(self, slot)
            rows[slot] = row.to_dict() if row is not None else None
        return rows

    def to_dict(self) -> Dict[str, Any]:
        data = {"updated_at": self.updated_at}
        data.update(self.rows_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetricsSnapshot":
        """Build a snapshot from its JSON form.

        Raises ``KeyError`` or ``TypeError`` when ``data`` is not shaped like
        a snapshot; callers decide how fatal that is.
        """
        if not isinstance(data, dict):
            raise TypeError(f"snapshot must be a JSON object, got {type(data).__name__}")

        rows = {}
        for slot in WEEK_SLOTS:
            row_data = data.get(slot)
            rows[slot] = WeeklyRow.from_dict(row_data) if row_data is not None else None

        return cls(updated_at=data["updated_at"], **rows)
