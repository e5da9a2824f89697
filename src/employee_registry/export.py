"""CSV export of employee records."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from .constants import CSV_HEADERS
from .logging_utils import get_logger
from .schemas import EmployeeRecord

logger = get_logger(__name__)


class ExportError(ValueError):
    """Raised when there is nothing to export."""


def records_to_frame(records: Sequence[EmployeeRecord]) -> pd.DataFrame:
    """Tabulate records as strings under the export headers, preserving order."""
    return pd.DataFrame([record.csv_fields() for record in records], columns=list(CSV_HEADERS), dtype=str)


def export_csv(records: Sequence[EmployeeRecord]) -> str:
    """Render records as CSV text.

    Fields are quoted only when they contain a comma, a quote or a line break,
    so ordinary data matches the legacy unquoted layout.
    """
    if not records:
        raise ExportError("No employees to export!")
    return records_to_frame(records).to_csv(index=False, lineterminator="\n")


def default_export_filename(today: Optional[date] = None) -> str:
    return f"employees_{(today or date.today()).isoformat()}.csv"


def write_csv(records: Sequence[EmployeeRecord], path: Path) -> Path:
    path = Path(path)
    content = export_csv(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Exported %d employees to %s", len(records), path)
    return path


__all__ = ["ExportError", "default_export_filename", "export_csv", "records_to_frame", "write_csv"]
