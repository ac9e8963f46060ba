"""
Parses the rendered Power BI table text into weekly rows.

The report has no usable DOM structure once rendered, so the table is read
from its plain text. Every table row starts with a "Select Row" line followed
by the week identifier and eight metric cells, one per line.
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional

from .models import WEEK_SLOTS, MetricsSnapshot, WeeklyRow

logger = logging.getLogger(__name__)

BLOCK_MARKER = "Select Row"
BLOCK_SIZE = 11  # marker + week index + 8 metric cells + trailing cell

# Offsets 2-9 inside a block, in table column order
NUMERIC_FIELDS = [
    "total_head_inc_reoffers",
    "clearance_rate_mm",
    "amount_over_reserve",
    "arli_ckg_dw",
    "arl_change_sheepindex",
    "total_head_change_sheepindex",
    "clearance_rate_change_sheepindex",
    "vor_change_sheepindex",
]

NON_NUMERIC_PATTERN = re.compile(r'[^0-9-]')


def split_lines(text: str) -> List[str]:
    """Split text into trimmed, non-empty lines"""
    lines = [line.strip() for line in text.split("\n")]
    return [line for line in lines if line]


def clean_numeric(value: Optional[str]) -> Optional[str]:
    """Drop everything except ASCII digits and '-' ("1,234 head" -> "1234").

    Decimal points go too, so "110.5" becomes "1105".
    """
    if value is None:
        return None
    return NON_NUMERIC_PATTERN.sub("", value)


def count_markers(lines: List[str]) -> int:
    return sum(1 for line in lines if line == BLOCK_MARKER)


def parse_rows(lines: List[str]) -> List[WeeklyRow]:
    """Extract one WeeklyRow per "Select Row" marker, in page order"""
    rows = []

    for i, line in enumerate(lines):
        if line != BLOCK_MARKER:
            continue

        block = lines[i:i + BLOCK_SIZE]

        logger.info(f"→ Parsing row {len(rows) + 1}:")
        logger.info(f"  Block: {' | '.join(block[:3])}")

        if len(block) < BLOCK_SIZE:
            logger.warning(
                f"Row {len(rows) + 1} block has only {len(block)} of {BLOCK_SIZE} lines; "
                "missing cells will be null"
            )

        cells = [_cell(block, offset) for offset in range(1, len(NUMERIC_FIELDS) + 2)]

        row = WeeklyRow(
            sheep_week_index=cells[0],
            **{name: clean_numeric(value) for name, value in zip(NUMERIC_FIELDS, cells[1:])}
        )
        rows.append(row)

    return rows


def _cell(block: List[str], offset: int) -> Optional[str]:
    if offset < len(block):
        return block[offset]
    return None


def build_snapshot(rows: List[WeeklyRow], updated_at: Optional[datetime] = None) -> MetricsSnapshot:
    """Assign rows to week slots by position; extra rows are ignored, missing slots stay null"""
    if updated_at is None:
        updated_at = datetime.now(timezone.utc)

    slots = {}
    for index, slot in enumerate(WEEK_SLOTS):
        slots[slot] = rows[index] if index < len(rows) else None

    return MetricsSnapshot(updated_at=updated_at.isoformat(), **slots)
