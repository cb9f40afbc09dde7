"""Micro-benchmark for the decoder on the IATA Resolution 792 examples."""

from __future__ import annotations

import time

from bcbp.decoder import decode

SAMPLES = (
    "M1DESMARAIS/LUC       EABC123 YULFRAAC 0834 326J001A0025 100^164GIWVC5EH7JNT684FVNJ91W2QA4"
    "DVN5J8K4F0L0GEQ3DF5TGBN8709HKT5D3DW3GBHFCVHMY7J5T6HFR41W2QA4DVN5J8K4F0L0GE",
    "M2DESMARAIS/LUC       EABC123 YULFRAAC 0834 226F001A0025 14D>6181WW6225BAC 00141234560032A"
    "0141234567890 1AC AC 1234567890123    20KYLX58ZDEF456 FRAGVALH 3664 227C012C0002 12E2A014"
    "0987654321 1AC AC 1234567890123    2PCNWQ^100",
)


def benchmark_decode(records: int = 10_000, runs: int = 3, strict: bool = True) -> dict[str, float]:
    passes = [SAMPLES[i % len(SAMPLES)] for i in range(records)]
    total_bytes = sum(len(p) for p in passes)
    best = None
    for _ in range(runs):
        start = time.perf_counter()
        for text in passes:
            decode(text, strict=strict)
        elapsed = time.perf_counter() - start
        best = elapsed if best is None or elapsed < best else best
    per_second = records / best if best else 0.0
    return {
        "records": records,
        "bytes": total_bytes,
        "best_seconds": best or 0.0,
        "passes_per_second": per_second,
    }


if __name__ == "__main__":
    result = benchmark_decode()
    print(result)
