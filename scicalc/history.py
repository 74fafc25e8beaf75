"""History log export and record parsing.

Each record is one line of the form ``"5 + 3 = 8"`` or ``"√(9) = 3"``. The
export is the only thing the calculator ever writes to disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from .errors import HistoryEntryError

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "calculator-history.txt"


def export_history(history: Iterable[str]) -> str:
    return "\n".join(history)


def write_history(path: Union[str, Path], history: Iterable[str]) -> Path:
    """Write the history as plain text, one record per line."""
    path = Path(path)
    records = list(history)
    path.write_text(export_history(records), encoding="utf-8")
    logger.info("exported %d history records to %s", len(records), path)
    return path


def result_of(entry: str) -> str:
    """Text after the last '=' in a record."""
    _, sep, result = entry.rpartition("=")
    result = result.strip()
    if not sep or not result:
        raise HistoryEntryError(f"history entry has no result: {entry!r}")
    return result
