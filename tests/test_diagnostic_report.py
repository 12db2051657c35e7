"""Tests for the DiagnosticReport logic."""

import json
import logging
from pathlib import Path

import pytest

from typedoc2docfx.diagnostic import Diagnostic, DiagnosticKind
from typedoc2docfx.diagnostic_report import DiagnosticReport


def test_diagnostic_report_generation(tmp_path: Path) -> None:
    """Verify that the diagnostic report is generated correctly."""
    report = DiagnosticReport("hash123")

    report.extend(
        [
            Diagnostic(DiagnosticKind.UNRESOLVED_REFERENCE, "A.m", "Unresolved 'X'"),
            Diagnostic(DiagnosticKind.UNRESOLVED_REFERENCE, "A.n", "Unresolved 'Y'"),
            Diagnostic(DiagnosticKind.DUPLICATE_UID, "B", "Duplicate uid 'B'"),
        ],
    )

    output_file = tmp_path / "report.json"
    report.generate_report(str(output_file))

    assert output_file.exists()
    content = json.loads(output_file.read_text(encoding="utf-8"))

    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["total_diagnostics"] == 3
    assert content["diagnostics"][0] == {
        "kind": "unresolved_reference",
        "subject": "A.m",
        "message": "Unresolved 'X'",
    }
    assert content["stats"]["kind_counts"] == {
        "unresolved_reference": 2,
        "duplicate_uid": 1,
        "malformed_node": 0,
    }


def test_diagnostic_report_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that non-empty kinds are logged as warnings."""
    report = DiagnosticReport("h")
    report.extend([Diagnostic(DiagnosticKind.MALFORMED_NODE, "x", "bad")])
    with caplog.at_level(logging.INFO):
        report.log_summary()
    assert "1 malformed_node diagnostic(s)" in caplog.text
    assert "unresolved_reference" not in caplog.text


def test_diagnostic_report_empty() -> None:
    """Verify the counts of a run without problems."""
    report = DiagnosticReport("h")
    assert set(report.counts().values()) == {0}
    assert report.to_dict()["diagnostics"] == []
