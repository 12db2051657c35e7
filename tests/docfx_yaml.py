"""Helpers for reading written DocFX YAML back in tests."""

from pathlib import Path
from typing import Any

import yaml


def strip_yaml_mime_header(text: str) -> str:
    """Remove the DocFX YAML MIME header from the content."""
    lines = text.splitlines()
    if lines and lines[0].startswith("### YamlMime:"):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def load_docfx_yaml(path: Path) -> Any:
    """Load a written DocFX YAML file, header or not."""
    return yaml.safe_load(strip_yaml_mime_header(path.read_text(encoding="utf-8")))
