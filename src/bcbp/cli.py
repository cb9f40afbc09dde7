import logging
from pathlib import Path

import orjson
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bcbp.batch import (
    DecodeResult,
    decode_many,
    result_to_mapping,
    results_to_arrow,
    results_to_jsonl,
)
from bcbp.data.loader import load_passes
from bcbp.decoder import decode as decode_pass
from bcbp.errors import DecodeError
from bcbp.eval.harness import evaluate_file
from bcbp.eval.report import append_csv, append_jsonl, summary_to_row
from bcbp.eval.summarize import summarize_log
from bcbp.manifest import load_manifest, sample_manifest, validate_manifest

app = typer.Typer(help="Decode IATA bar coded boarding pass (Type 'M') data.")
dataset_app = typer.Typer(help="Corpus helpers (manifests, validation).")
eval_app = typer.Typer(help="Evaluation harness over barcode corpora.")
console = Console()
SUPPORTED_FORMATS = {"json", "jsonl", "arrow"}

app.add_typer(dataset_app, name="dataset")
app.add_typer(eval_app, name="eval")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _emit_json(payload: bytes) -> None:
    console.print(payload.decode(), markup=False, highlight=False, emoji=False, soft_wrap=True)


def _require_file(path: Path) -> Path:
    if not path.is_file():
        raise typer.BadParameter(f"Input file not found: {path}")
    return path


@app.command()
def decode(
    text: str | None = typer.Argument(None, help="Barcode text to decode."),
    input: Path | None = typer.Option(
        None, "--input", "-i", help="File with one barcode per line."
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Optional path to write structured output."
    ),
    format: str = typer.Option(
        "json", "--format", "-f", help="Output format: json | jsonl | arrow."
    ),
    lenient: bool = typer.Option(
        False, "--lenient", help="Skip character-class validation of field contents."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Decode a single barcode string or a file of barcodes."""
    _configure_logging(verbose)
    fmt = format.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise typer.BadParameter(f"Unsupported format '{format}'. Choose from {SUPPORTED_FORMATS}.")
    if (text is None) == (input is None):
        raise typer.BadParameter("Provide either barcode TEXT or --input, not both.")

    if text is not None:
        try:
            boarding_pass = decode_pass(text, strict=not lenient)
        except DecodeError as exc:
            console.print(f"[bold red]{exc.kind}[/]: {escape(str(exc))}")
            raise typer.Exit(code=1) from exc
        if fmt == "json":
            payload = orjson.dumps(boarding_pass, option=orjson.OPT_INDENT_2)
            if output:
                output.write_bytes(payload)
                console.print(f"[bold green]Wrote boarding pass[/] to {output}")
            else:
                _emit_json(payload)
            return
        results = [DecodeResult(record_index=0, raw=text, boarding_pass=boarding_pass)]
    else:
        lines = load_passes(_require_file(input))
        console.print(f"[bold green]Read[/] {len(lines)} barcode(s) from {input}")
        results = decode_many(lines, strict=not lenient)
        failed = sum(1 for r in results if not r.ok)
        if failed:
            console.print(f"[yellow]{failed} barcode(s) failed to decode[/]")

    if fmt == "arrow":
        if not output:
            raise typer.BadParameter("Arrow output requires --output.")
        results_to_arrow(results, output)
        console.print(f"[bold green]Wrote Arrow table[/] to {output}")
    elif fmt == "jsonl":
        if output:
            results_to_jsonl(results, output)
            console.print(f"[bold green]Wrote JSONL[/] to {output}")
        else:
            for r in results:
                _emit_json(orjson.dumps(result_to_mapping(r)))
    else:
        payload = orjson.dumps(
            [result_to_mapping(r) for r in results], option=orjson.OPT_INDENT_2
        )
        if output:
            output.write_bytes(payload)
            console.print(f"[bold green]Wrote results[/] to {output}")
        else:
            _emit_json(payload)



@dataset_app.command("validate")
def dataset_validate(
    manifest: Path = typer.Argument(..., help="Corpus manifest (yaml/json)."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Optional path to write the validation JSON."
    ),
) -> None:
    """Validate a corpus described by a manifest."""
    result = validate_manifest(load_manifest(_require_file(manifest)))
    payload = orjson.dumps(result, option=orjson.OPT_INDENT_2)
    if output:
        output.write_bytes(payload)
        console.print(f"[bold green]Wrote validation report[/] to {output}")
    else:
        _emit_json(payload)
    if result["warnings"]:
        console.print(f"[yellow]Warnings:[/] {', '.join(result['warnings'])}")


@dataset_app.command("sample-manifest")
def dataset_sample_manifest() -> None:
    """Print a manifest template."""
    _emit_json(orjson.dumps(sample_manifest(), option=orjson.OPT_INDENT_2))


@eval_app.command("corpus")
def eval_corpus(
    input: Path = typer.Argument(..., help="File with one barcode per line."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Optional path to write evaluation JSON."
    ),
    log_csv: Path | None = typer.Option(
        None, "--log-csv", help="Append summary as a CSV row for trend tracking."
    ),
    log_jsonl: Path | None = typer.Option(
        None, "--log-jsonl", help="Append full payload as JSONL for trend tracking."
    ),
    tag: str | None = typer.Option(None, "--tag", help="Optional tag to mark this run."),
    lenient: bool = typer.Option(
        False, "--lenient", help="Skip character-class validation of field contents."
    ),
    max_records: int | None = typer.Option(
        None, "--max-records", help="Limit number of barcodes evaluated."
    ),
) -> None:
    """Decode a corpus and summarize outcomes by error kind."""
    payload = evaluate_file(_require_file(input), strict=not lenient, max_records=max_records)
    payload["tag"] = tag

    if log_csv:
        row = summary_to_row(payload["evaluation"], source=str(input), tag=tag)
        append_csv(log_csv, row)
        console.print(f"[bold green]Appended CSV log[/] to {log_csv}")

    if log_jsonl:
        append_jsonl(log_jsonl, payload)
        console.print(f"[bold green]Appended JSONL log[/] to {log_jsonl}")

    if output:
        output.write_bytes(orjson.dumps(payload))
        console.print(f"[bold green]Wrote evaluation report[/] to {output}")
    else:
        _emit_json(orjson.dumps(payload, option=orjson.OPT_INDENT_2))


@eval_app.command("summarize")
def eval_summarize(
    log: Path = typer.Argument(..., help="CSV or JSONL log file produced by eval."),
) -> None:
    """Summarize log(s) produced by eval logging."""
    summary = summarize_log(_require_file(log))
    _emit_json(orjson.dumps(summary, option=orjson.OPT_INDENT_2))


if __name__ == "__main__":
    app()
