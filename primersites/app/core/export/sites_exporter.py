# File: primersites/app/core/export/sites_exporter.py
# Version: v0.1.0
"""
JSON and CSV exporters for binding-site search results.

- JSON: {"template": {...}, "primer": ..., "sites": [camelCase records]}
- CSV: one row per site; Position is 1-based inclusive like the results table
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from primersites.app.core.binding.models import BindingSite

CSV_COLUMNS = [
    "id", "position", "strand", "mismatches", "overhang", "tm", "gc_percent",
    "stability_3prime", "binding_sequence", "matched_sequence",
]


def _fmt(v: Optional[float]) -> str:
    return "" if v is None else f"{v:.2f}"


def export_sites_to_json(
    sites: Sequence[BindingSite],
    json_path: Path,
    *,
    meta: Optional[Dict[str, Any]] = None,
) -> None:
    payload: Dict[str, Any] = dict(meta or {})
    payload["sites"] = [s.to_dict() for s in sites]
    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def export_sites_to_csv(sites: Sequence[BindingSite], csv_path: Path) -> None:
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for s in sites:
            w.writerow([
                s.id,
                f"{s.start + 1}-{s.end + 1}",
                s.strand,
                s.num_mismatches,
                s.overhang_length,
                _fmt(s.tm),
                _fmt(s.gc_percent),
                _fmt(s.stability_3prime),
                s.binding_sequence,
                s.matched_sequence,
            ])
