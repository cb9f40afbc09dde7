"""Append evaluation summaries to CSV or JSONL logs for trend tracking."""

from __future__ import annotations

import csv
from collections.abc import Mapping
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import orjson

from bcbp.eval.harness import EvalSummary


def summary_to_row(
    summary: EvalSummary | Mapping[str, Any], source: str, tag: str | None = None
) -> dict[str, Any]:
    """Flatten a summary into one log row; error counts are stored as a JSON string."""
    fields = summary if isinstance(summary, Mapping) else asdict(summary)
    return {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "source": source,
        "tag": tag or "",
        "records": int(fields.get("records") or 0),
        "decoded": int(fields.get("decoded") or 0),
        "success_ratio": float(fields.get("success_ratio") or 0.0),
        "error_counts": orjson.dumps(dict(fields.get("error_counts") or {})).decode(),
        "notes": str(fields.get("notes", "")),
    }


def append_csv(path: Path, row: dict[str, Any]) -> None:
    """Append a row, writing the header when the file is new."""
    path.parent.mkdir(parents=True, exist_ok=True)
    is_new = not path.exists()
    with path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(row))
        if is_new:
            writer.writeheader()
        writer.writerow(row)


def append_jsonl(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("ab") as f:
        f.write(orjson.dumps(payload) + b"\n")
