"""Logic for loading a TypeDoc JSON reflection file."""

import json
from pathlib import Path
from typing import Any


def load_reflection(path: Path) -> dict[str, Any]:
    """Load and decode a TypeDoc ``--json`` output file."""
    if not path.exists():
        msg = f"Api doc file {path} doesn't exist."
        raise SystemExit(msg)
    doc = json.loads(path.read_text(encoding="utf-8"))
    return doc or {}
