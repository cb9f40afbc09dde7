"""Aggregate eval logs written by ``bcbp eval corpus``."""

from __future__ import annotations

import csv
from collections import Counter
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import orjson


def iter_log_entries(path: Path) -> Iterator[dict[str, Any]]:
    """Yield flat summary rows from a CSV or JSONL log."""
    if path.suffix.lower() == ".csv":
        with path.open(newline="") as f:
            yield from csv.DictReader(f)
        return
    with path.open("rb") as f:
        for line in f:
            if not line.strip():
                continue
            entry = orjson.loads(line)
            # full eval payloads nest the summary under "evaluation"
            if isinstance(entry.get("evaluation"), dict):
                entry = {**entry["evaluation"], "tag": entry.get("tag") or ""}
            yield entry


def summarize_log(path: Path) -> dict[str, object]:
    ratios: list[float] = []
    records_total = 0
    decoded_total = 0
    error_counts: Counter[str] = Counter()
    tags: Counter[str] = Counter()

    for entry in iter_log_entries(path):
        ratios.append(float(entry.get("success_ratio") or 0.0))
        records_total += int(entry.get("records") or 0)
        decoded_total += int(entry.get("decoded") or 0)
        # CSV rows carry the counts as a JSON string
        counts = entry.get("error_counts") or {}
        if isinstance(counts, str):
            counts = orjson.loads(counts)
        error_counts.update({kind: int(n) for kind, n in counts.items()})
        if entry.get("tag"):
            tags[entry["tag"]] += 1

    return {
        "entries": len(ratios),
        "records_total": records_total,
        "decoded_total": decoded_total,
        "average_success_ratio": round(sum(ratios) / len(ratios), 4) if ratios else 0.0,
        "error_counts": dict(error_counts),
        "tags": dict(tags),
    }
