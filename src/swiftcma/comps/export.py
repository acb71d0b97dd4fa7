from __future__ import annotations

from typing import List, Dict, Any
import csv, os, datetime

import pandas as pd

from swiftcma.config.settings import get_settings
from swiftcma.logging_config import get_logger
from .config import CANONICAL_FIELDS

logger = get_logger(__name__)


def export_comps(
    comps: List[Dict[str, Any]],
    out_dir: str | None = None,
    fmt: str = "csv",
    label: str | None = None,
) -> str:
    """Export normalized comp records.

    Args:
        comps: Comp records as produced by ``normalize_rows``.
        out_dir: Output directory (created if missing); defaults to the
            ``SWIFTCMA_EXPORT_DIR`` setting.
        fmt: 'csv' (default) or 'xlsx'.
        label: Filename fragment, typically a report id.

    Returns:
        Path to generated export file.
    """
    if out_dir is None:
        out_dir = get_settings().EXPORT_DIR
    os.makedirs(out_dir, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    base = f"comps_{label or 'report'}_{timestamp}"

    # Canonical fields first in declaration order, then anything extra sorted.
    present = {k for c in comps for k in c.keys()}
    ordered = [f for f in CANONICAL_FIELDS if f in present]
    ordered += sorted(present.difference(ordered))

    fmt = fmt.lower()
    if fmt == "xlsx":
        df = pd.DataFrame(comps, columns=ordered)
        xlsx_path = os.path.join(out_dir, base + ".xlsx")
        try:
            df.to_excel(xlsx_path, index=False)
            logger.info("Exported %d comps to %s", len(comps), xlsx_path)
            return xlsx_path
        except (ImportError, OSError, ValueError) as e:  # pragma: no cover - fallback path
            logger.warning("XLSX export failed (%s); falling back to CSV", e)
        fmt = "csv"
    if fmt != "csv":
        raise ValueError(f"unsupported export format: {fmt!r}")

    csv_path = os.path.join(out_dir, base + ".csv")
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=ordered, extrasaction="ignore")
        writer.writeheader()
        for row in comps:
            writer.writerow(row)
    logger.info("Exported %d comps to %s", len(comps), csv_path)
    return csv_path
