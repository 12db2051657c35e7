"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest
import yaml

from tests.docfx_yaml import load_docfx_yaml
from tests.reflection_builders import cls, function, method, project
from typedoc2docfx.cli import main
from typedoc2docfx.write_yaml import YAML_HEADER


@pytest.fixture
def api_json(tmp_path: Path) -> Path:
    """A TypeDoc JSON file for a package with one class and two functions."""
    path = tmp_path / "api.json"
    raw = project("P", cls("A", method("m2"), method("m1")), function("f2"), function("f1"))
    path.write_text(json.dumps(raw), encoding="utf-8")
    return path


def test_cli_writes_docfx_yaml(api_json: Path, tmp_path: Path) -> None:
    """Verify the files written for a simple package."""
    out = tmp_path / "out"
    report = tmp_path / "diagnostics.json"
    assert main([str(api_json), str(out), "--report", str(report)]) == 0

    assert sorted(p.name for p in out.iterdir()) == ["A.yml", "P.yml", "toc.yml"]
    assert (out / "A.yml").read_text(encoding="utf-8").startswith(YAML_HEADER)

    page = load_docfx_yaml(out / "A.yml")
    assert [i["uid"] for i in page["items"]] == ["A", "A.m1", "A.m2"]

    package = load_docfx_yaml(out / "P.yml")
    assert [i["uid"] for i in package["items"]] == ["P", "f1", "f2"]
    assert package["items"][0]["children"] == ["A", "f1", "f2"]

    toc_text = (out / "toc.yml").read_text(encoding="utf-8")
    assert not toc_text.startswith("###")
    assert yaml.safe_load(toc_text) == [
        {"name": "A", "uid": "A"},
        {"name": "P", "uid": "P"},
    ]

    content = json.loads(report.read_text(encoding="utf-8"))
    assert content["meta"]["total_diagnostics"] == 0


def test_cli_source_order_and_links(api_json: Path, tmp_path: Path) -> None:
    """Verify the ordering flag and repository options."""
    out = tmp_path / "out"
    argv = [
        str(api_json),
        str(out),
        "--disableAlphabetOrder",
        "--sourceUrl",
        "https://github.com/o/r",
        "--sourceBranch",
        "main",
        "--basePath",
        "lib",
    ]
    assert main(argv) == 0
    page = load_docfx_yaml(out / "A.yml")
    assert [i["uid"] for i in page["items"]] == ["A", "A.m2", "A.m1"]


def test_cli_repository_config_file(api_json: Path, tmp_path: Path) -> None:
    """Verify that a missing repository config file aborts the run."""
    out = tmp_path / "out"
    with pytest.raises(SystemExit, match="doesn't exist"):
        main([str(api_json), str(out), str(tmp_path / "repo.json"), "--basePath", "lib"])


def test_cli_missing_input(tmp_path: Path) -> None:
    """Verify that a missing input file aborts the run."""
    with pytest.raises(SystemExit, match="doesn't exist"):
        main([str(tmp_path / "absent.json"), str(tmp_path / "out")])
