"""Decode many barcodes at once and export the results."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import orjson
import pyarrow as pa

from bcbp.decoder import decode
from bcbp.errors import DecodeError
from bcbp.model import BoardingPass

logger = logging.getLogger(__name__)


@dataclass
class DecodeResult:
    record_index: int
    raw: str
    boarding_pass: BoardingPass | None = None
    error_kind: str | None = None
    error_field: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.boarding_pass is not None


def _as_text(line: str | bytes) -> str:
    if isinstance(line, (bytes, bytearray)):
        return bytes(line).decode("ascii", errors="replace")
    return line


def decode_one(index: int, line: str | bytes, strict: bool = True) -> DecodeResult:
    """Decode a single line, capturing any failure in the result."""
    raw = _as_text(line)
    try:
        boarding_pass = decode(line, strict=strict)
    except DecodeError as exc:
        logger.debug("Record %d failed: %s", index, exc)
        return DecodeResult(
            record_index=index,
            raw=raw,
            error_kind=exc.kind,
            error_field=str(exc.field) if exc.field is not None else None,
            message=str(exc),
        )
    return DecodeResult(record_index=index, raw=raw, boarding_pass=boarding_pass)


def decode_many(
    lines: Iterable[str | bytes], strict: bool = True, max_records: int | None = None
) -> list[DecodeResult]:
    """Decode every line; failures are recorded per line rather than raised."""
    results: list[DecodeResult] = []
    for idx, line in enumerate(lines):
        if max_records is not None and idx >= max_records:
            break
        results.append(decode_one(idx, line, strict=strict))
    return results


def result_to_mapping(result: DecodeResult) -> dict[str, object]:
    return {
        "record_index": result.record_index,
        "raw": result.raw,
        "ok": result.ok,
        "boarding_pass": result.boarding_pass,
        "error_kind": result.error_kind,
        "error_field": result.error_field,
        "message": result.message,
    }


def results_to_jsonl(results: list[DecodeResult], path: Path, gzip_output: bool = False) -> None:
    """Write decode results as JSONL for downstream consumption."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if gzip_output:
        import gzip as gzip_lib

        handle = gzip_lib.open(path, "wb")
    else:
        handle = path.open("wb")

    with handle as f:
        for r in results:
            f.write(orjson.dumps(result_to_mapping(r)) + b"\n")


def results_to_arrow(results: list[DecodeResult], path: Path) -> None:
    """Write decode results to Arrow IPC for analytics-friendly consumption."""
    path.parent.mkdir(parents=True, exist_ok=True)
    passes = [r.boarding_pass for r in results]
    table = pa.table(
        {
            "record_index": [r.record_index for r in results],
            "raw": [r.raw for r in results],
            "ok": [r.ok for r in results],
            "error_kind": [r.error_kind for r in results],
            "error_field": [r.error_field for r in results],
            "passenger_name": [bp.passenger_name if bp else None for bp in passes],
            "electronic_ticket_indicator": [
                bp.electronic_ticket_indicator if bp else None for bp in passes
            ],
            "number_of_legs": [bp.number_of_legs if bp else 0 for bp in passes],
            "version_number": [bp.version_number if bp else None for bp in passes],
            # nested records stored as JSON to keep schema simple
            "legs": [orjson.dumps(bp.legs).decode() if bp else None for bp in passes],
            "metadata": [
                orjson.dumps(bp.metadata).decode() if bp and bp.metadata else None
                for bp in passes
            ],
            "security": [
                orjson.dumps(bp.security).decode() if bp and bp.security else None
                for bp in passes
            ],
        }
    )
    with pa.OSFile(str(path), "wb") as sink:
        with pa.ipc.new_file(sink, table.schema) as writer:
            writer.write_table(table)
