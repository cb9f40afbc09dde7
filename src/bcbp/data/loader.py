"""Helpers for reading corpora of boarding pass barcode strings.

A corpus is a text file with one barcode per line. Lines are kept as
bytes so that non-ASCII content reaches the decoder and is reported
there instead of failing while reading the file. Only line terminators
are stripped: trailing spaces are significant in barcode data.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

COMMENT_PREFIX = b"#"


def iter_pass_lines(data: bytes) -> Iterator[bytes]:
    """Yield barcode lines, skipping blank lines and ``#`` comments."""
    for line in data.split(b"\n"):
        line = line.rstrip(b"\r")
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        yield line


def load_passes(path: Path, max_records: int | None = None) -> list[bytes]:
    """Load barcode lines from disk."""
    passes = list(iter_pass_lines(path.read_bytes()))
    if max_records is not None:
        passes = passes[:max_records]
    return passes
