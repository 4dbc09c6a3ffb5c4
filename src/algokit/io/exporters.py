"""Result export helpers."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable


def export_csv(path: Path, rows: Iterable[dict]) -> None:
    """Write result rows to CSV, taking the header from the first row."""

    rows = list(rows)
    path = Path(path)
    if not rows:
        path.write_text("", encoding="utf-8")
        return
    header = list(rows[0].keys())
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=header)
        writer.writeheader()
        writer.writerows(rows)
