"""Convert TypeDoc JSON output to DocFX UniversalReference YAML.

Reads the file produced by ``typedoc --json``, runs the transformation
pipeline and writes one YAML file per page, a package index and a
``toc.yml`` suitable for DocFX.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from typedoc2docfx.compute_config_hash import compute_config_hash
from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.deep_merge import deep_merge
from typedoc2docfx.diagnostic_report import DiagnosticReport
from typedoc2docfx.load_config import load_config
from typedoc2docfx.load_reflection import load_reflection
from typedoc2docfx.page_href import page_href
from typedoc2docfx.render_package_index import render_package_index
from typedoc2docfx.render_page import render_page
from typedoc2docfx.render_toc import render_toc
from typedoc2docfx.run_conversion import ConversionResult, convert_reflection
from typedoc2docfx.write_yaml import write_yaml

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Merge defaults, the optional config file and command-line flags."""
    config = load_config(args.config)
    overrides: dict[str, Any] = {}
    if args.module_grouping:
        overrides["module_grouping"] = True
    if args.disable_alphabet_order:
        overrides["alphabetical_order"] = False

    repository = _repository_from_args(args)
    if repository:
        overrides["repository"] = repository
    return deep_merge(config, overrides)


def _repository_from_args(args: argparse.Namespace) -> dict[str, str] | None:
    if args.repo_config and args.base_path:
        path = Path(args.repo_config)
        if not path.exists():
            msg = f"Error: repository config file path {{{path}}} doesn't exist!"
            raise SystemExit(msg)
        temp = json.loads(path.read_text(encoding="utf-8"))
        return {
            "repo_url": temp.get("repo"),
            "branch": temp.get("branch"),
            "base_path": args.base_path,
        }
    if args.source_url and args.source_branch and args.base_path:
        return {
            "repo_url": args.source_url,
            "branch": args.source_branch,
            "base_path": args.base_path,
        }
    return None


def write_output(result: ConversionResult, out_dir: Path) -> int:
    """Write pages, package indexes and the TOC. Returns the number of files."""
    written = 0
    packages = {ix.package for ix in result.package_indexes}
    total = len(result.pages)
    print(f"Writing {total} pages...")
    for page in result.pages:
        if page.uid in packages:
            continue  # written together with its package index
        write_yaml(out_dir / page.href, render_page(page))
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} pages")

    pages_by_uid = {p.uid: p for p in result.pages}
    for index in result.package_indexes:
        doc = render_package_index(index, pages_by_uid.get(index.package))
        write_yaml(out_dir / page_href(index.package), doc)
        written += 1
    print("Package index generated.")

    write_yaml(out_dir / "toc.yml", render_toc(result.tocs), header=False)
    written += 1
    print("Toc generated.")
    return written


def run(args: argparse.Namespace) -> int:
    """Execute the conversion for parsed arguments."""
    config_dict = build_config(args)
    config = ConversionConfig.from_dict(config_dict)
    raw = load_reflection(args.input)

    result = convert_reflection(raw, config)

    report = DiagnosticReport(compute_config_hash(config_dict))
    report.extend(result.diagnostics)

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    written = write_output(result, out_root)

    report.log_summary()
    if args.report:
        report.generate_report(args.report)
        print(f"Diagnostic report written to {args.report}")
    print(f"Generated {written} YAML files into: {out_root}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description=(
            "Convert the JSON api file generated by TypeDoc to YAML output "
            "files for DocFX."
        ),
    )
    ap.add_argument("input", type=Path, help="TypeDoc --json output file")
    ap.add_argument("out_dir", type=Path, help="Output folder for the YAML files")
    ap.add_argument(
        "repo_config",
        nargs="?",
        help="JSON file with 'repo' and 'branch' of the source repository",
    )
    ap.add_argument(
        "--module-grouping",
        "--hasModule",
        action="store_true",
        help="Keep modules as a nesting level (the source repository contains modules)",
    )
    ap.add_argument(
        "--disable-alphabet-order",
        "--disableAlphabetOrder",
        action="store_true",
        help="Keep source declaration order instead of alphabetical order",
    )
    ap.add_argument("--base-path", "--basePath", help="Current base path to the repository")
    ap.add_argument("--source-url", "--sourceUrl", help="Source repository address")
    ap.add_argument("--source-branch", "--sourceBranch", help="Branch of the source repository")
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument("--report", help="Write a JSON diagnostic report to this path")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
