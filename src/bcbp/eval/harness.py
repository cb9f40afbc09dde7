"""Evaluation harness for decoding barcode corpora.

Purpose:
- Measure how much of a real-world corpus decodes cleanly.
- Break failures down by error kind so regressions are easy to spot.
- Compare strict and lenient validation on the same data.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from bcbp.batch import decode_many
from bcbp.data.loader import load_passes


@dataclass
class RecordEval:
    record_index: int
    error_kind: str
    error_field: str | None
    message: str


@dataclass
class EvalSummary:
    records: int
    decoded: int
    success_ratio: float
    error_counts: dict[str, int]
    samples: list[RecordEval]
    notes: str


def evaluate_lines(
    lines: Iterable[str | bytes], strict: bool = True, sample_limit: int = 3
) -> EvalSummary:
    """Decode every line and summarize outcomes."""
    counts: Counter[str] = Counter()
    samples: list[RecordEval] = []
    results = decode_many(lines, strict=strict)

    for result in results:
        if result.ok:
            continue
        kind = result.error_kind or "unknown"
        counts[kind] += 1
        if len(samples) < sample_limit:
            samples.append(
                RecordEval(
                    record_index=result.record_index,
                    error_kind=kind,
                    error_field=result.error_field,
                    message=result.message or "",
                )
            )

    decoded = sum(1 for r in results if r.ok)
    ratio = decoded / len(results) if results else 0.0
    return EvalSummary(
        records=len(results),
        decoded=decoded,
        success_ratio=round(ratio, 4),
        error_counts=dict(counts),
        samples=samples,
        notes="strict validation" if strict else "lenient validation",
    )


def evaluate_file(
    path: Path, strict: bool = True, max_records: int | None = None
) -> dict[str, object]:
    """Evaluate a corpus file and return the summary plus run parameters."""
    lines = load_passes(path, max_records=max_records)
    summary = evaluate_lines(lines, strict=strict)
    return {
        "source": str(path),
        "strict": strict,
        "evaluation": summary,
    }
