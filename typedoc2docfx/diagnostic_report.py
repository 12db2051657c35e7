"""Logic for collecting and reporting diagnostics after a run."""

import json
import logging
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from typedoc2docfx.diagnostic import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)


class DiagnosticReport:
    """Collects the diagnostics of a conversion run and summarizes them."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.diagnostics: list[Diagnostic] = []
        self.start_time = time.time()

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Add several diagnostics to the report."""
        self.diagnostics.extend(diagnostics)

    def counts(self) -> dict[str, int]:
        """Return the number of diagnostics per kind, including empty kinds."""
        counts = {k.value: 0 for k in DiagnosticKind}
        for d in self.diagnostics:
            counts[d.kind.value] += 1
        return counts

    def log_summary(self) -> None:
        """Log one line per non-empty diagnostic kind."""
        if not self.diagnostics:
            logger.info("Conversion finished without diagnostics")
            return
        for kind, count in self.counts().items():
            if count:
                logger.warning("%d %s diagnostic(s)", count, kind)

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON-ready report."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_diagnostics": len(self.diagnostics),
            },
            "diagnostics": [
                {"kind": d.kind.value, "subject": d.subject, "message": d.message}
                for d in self.diagnostics
            ],
            "stats": {"kind_counts": self.counts()},
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
