"""Data models for non-fatal problems found during a conversion run."""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Category of a diagnostic."""

    UNRESOLVED_REFERENCE = "unresolved_reference"
    DUPLICATE_UID = "duplicate_uid"
    MALFORMED_NODE = "malformed_node"


@dataclass(frozen=True)
class Diagnostic:
    """One problem, reported after the run completes."""

    kind: DiagnosticKind
    subject: str  # uid or node name the problem is attached to
    message: str
