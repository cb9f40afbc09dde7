"""Render an eval log (CSV or JSONL) as Rich tables."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table

from bcbp.eval.summarize import summarize_log


def _counts_table(title: str, label: str, counts: dict[str, int]) -> Table:
    table = Table(title=title)
    table.add_column(label)
    table.add_column("Count", justify="right")
    for key, count in sorted(counts.items(), key=lambda kv: kv[1], reverse=True):
        table.add_row(key, str(count))
    return table


def main() -> None:
    parser = argparse.ArgumentParser(description="View eval logs.")
    parser.add_argument("log", type=Path, help="CSV or JSONL log file.")
    args = parser.parse_args()

    console = Console()
    summary = summarize_log(args.log)
    console.print(
        f"[bold]{summary['entries']}[/] run(s), {summary['decoded_total']}/"
        f"{summary['records_total']} decoded, "
        f"avg success ratio {summary['average_success_ratio']}"
    )
    console.print(_counts_table("Error Kinds", "Kind", summary["error_counts"]))
    if summary["tags"]:
        console.print(_counts_table("Tags", "Tag", summary["tags"]))


if __name__ == "__main__":
    main()
