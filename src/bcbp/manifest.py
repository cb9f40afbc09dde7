from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from bcbp.data.loader import iter_pass_lines
from bcbp.eval.harness import evaluate_lines


@dataclass
class CorpusManifest:
    name: str
    path: Path
    strict: bool = True
    hash: str | None = None
    notes: str | None = None
    checks: dict[str, Any] | None = None

    @staticmethod
    def from_mapping(payload: dict[str, Any]) -> CorpusManifest:
        return CorpusManifest(
            name=str(payload["name"]),
            path=Path(payload["path"]),
            strict=bool(payload.get("strict", True)),
            hash=payload.get("hash"),
            notes=payload.get("notes"),
            checks=payload.get("checks"),
        )


def _hash_file(path: Path, algo: str = "sha256") -> str:
    h = hashlib.new(algo)
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return f"{algo}:{h.hexdigest()}"


def validate_manifest(manifest: CorpusManifest) -> dict[str, Any]:
    path = manifest.path
    result: dict[str, Any] = {
        "name": manifest.name,
        "path": str(path),
        "exists": path.exists(),
        "size_bytes": path.stat().st_size if path.exists() else 0,
        "strict": manifest.strict,
        "hash_expected": manifest.hash,
        "hash_actual": None,
        "hash_match": None,
        "records": 0,
        "decoded": 0,
        "failed": 0,
        "success_ratio": 0.0,
        "error_counts": {},
        "warnings": [],
    }
    if not path.exists():
        result["warnings"].append("file_missing")
        return result

    if manifest.hash:
        algo, _hex = (
            manifest.hash.split(":", 1) if ":" in manifest.hash else ("sha256", manifest.hash)
        )
        actual = _hash_file(path, algo=algo)
        result["hash_actual"] = actual
        result["hash_match"] = actual == manifest.hash
        if not result["hash_match"]:
            result["warnings"].append("hash_mismatch")

    lines = list(iter_pass_lines(path.read_bytes()))
    result["records"] = len(lines)
    if manifest.checks and manifest.checks.get("max_records"):
        max_rec = int(manifest.checks["max_records"])
        lines = lines[:max_rec]
        result["records_capped"] = max_rec

    summary = evaluate_lines(lines, strict=manifest.strict)
    result["decoded"] = summary.decoded
    result["failed"] = summary.records - summary.decoded
    result["success_ratio"] = summary.success_ratio
    result["error_counts"] = summary.error_counts
    if manifest.checks and manifest.checks.get("min_success_ratio") is not None:
        min_ratio = float(manifest.checks["min_success_ratio"])
        if summary.success_ratio < min_ratio:
            result["warnings"].append("low_success_ratio")
    return result


def load_manifest(path: Path) -> CorpusManifest:
    if path.suffix.lower() in {".yml", ".yaml"}:
        payload = yaml.safe_load(path.read_text())
    else:
        payload = json.loads(path.read_text())
    return CorpusManifest.from_mapping(payload)


def sample_manifest() -> dict[str, Any]:
    return {
        "name": "kiosk_passes",
        "path": "data/passes/kiosk.txt",
        "strict": True,
        "hash": "sha256:<hex>",
        "notes": "edit with real details",
        "checks": {"max_records": 20000, "min_success_ratio": 0.95},
    }
