"""
Snapshot file handling: load the previous run, decide whether anything
changed, and replace the file when it did.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .errors import SnapshotLoadError
from .models import MetricsSnapshot

logger = logging.getLogger(__name__)


def load_previous_snapshot(path: Union[str, Path]) -> Optional[MetricsSnapshot]:
    """Return the stored snapshot, or None when there is no file yet.

    A file that exists but does not hold a snapshot is fatal.
    """
    path = Path(path)

    if not path.exists():
        logger.info("ℹ No previous metrics file found")
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        snapshot = MetricsSnapshot.from_dict(data)
    except (OSError, ValueError) as e:
        raise SnapshotLoadError(f"Could not read previous metrics from {path}: {e}") from e
    except (KeyError, TypeError) as e:
        raise SnapshotLoadError(f"Previous metrics in {path} are not a valid snapshot: {e!r}") from e

    logger.info("✓ Loaded previous metrics for comparison")
    return snapshot


def canonical_rows(snapshot: MetricsSnapshot) -> str:
    """Canonical text of the week rows; ``updated_at`` is left out"""
    return json.dumps(snapshot.rows_dict(), sort_keys=True, ensure_ascii=False)


def has_changed(previous: Optional[MetricsSnapshot], current: MetricsSnapshot) -> bool:
    """True when there is no previous snapshot or any row value differs"""
    if previous is None:
        return True
    return canonical_rows(previous) != canonical_rows(current)


def save_snapshot(snapshot: MetricsSnapshot, path: Union[str, Path]) -> Path:
    """Replace the snapshot file with ``snapshot``, pretty-printed"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = path.with_name(path.name + ".tmp")
    with open(tmp_path, 'w', encoding='utf-8') as f:
        json.dump(snapshot.to_dict(), f, indent=2, ensure_ascii=False)
    tmp_path.replace(path)

    return path
