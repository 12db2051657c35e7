"""Logic for dumping rendered structures as DocFX YAML files."""

from pathlib import Path
from typing import Any

import yaml

YAML_HEADER = "### YamlMime:UniversalReference"


def write_yaml(path: Path, data: Any, *, header: bool = True) -> None:
    """Write ``data`` as YAML, prefixed with the DocFX MIME header."""
    text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    if header:
        text = f"{YAML_HEADER}\n{text}"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")

