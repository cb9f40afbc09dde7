from pathlib import Path

from bcbp.eval.harness import evaluate_file, evaluate_lines

GOOD = "M1DESMARAIS/LUC       EABC123 YULFRAAC 0834 326J001A0025 100"


def test_evaluate_lines_counts_errors_by_kind():
    summary = evaluate_lines([GOOD, "S1", "M2DESMARAIS", "X1", GOOD], sample_limit=2)
    assert summary.records == 5
    assert summary.decoded == 2
    assert summary.success_ratio == 0.4
    assert summary.error_counts == {"UnsupportedFormat": 2, "UnexpectedEndOfInput": 1}
    assert [s.record_index for s in summary.samples] == [1, 2]
    assert summary.samples[1].error_field == "(011) Passenger Name"
    assert summary.notes == "strict validation"


def test_evaluate_lines_empty():
    summary = evaluate_lines([])
    assert summary.records == 0
    assert summary.success_ratio == 0.0


def test_evaluate_file_produces_summary(tmp_path: Path):
    path = tmp_path / "passes.txt"
    path.write_text("# sample\n" + GOOD.replace("001A", "INF ") + "\n" + GOOD + "\n")
    payload = evaluate_file(path, strict=False, max_records=1)
    summary = payload["evaluation"]
    assert summary.records == 1
    assert summary.decoded == 1
    assert summary.notes == "lenient validation"
    assert payload["strict"] is False
    assert payload["source"] == str(path)
