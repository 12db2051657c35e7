"""Main orchestration script for generating TypeDoc JSON and DocFX YAML."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate TypeDoc JSON metadata and DocFX YAML documentation."
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="src",
        help="TypeScript sources to document (default: src)",
    )
    parser.add_argument(
        "--skip-typedoc",
        action="store_true",
        help="Reuse an existing api.json instead of running TypeDoc",
    )
    parser.add_argument(
        "--has-module",
        action="store_true",
        help="Keep modules as a nesting level in the output",
    )
    parser.add_argument(
        "--disable-alphabet-order",
        action="store_true",
        help="Keep source declaration order",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    json_file = root_dir / "api.json"
    out_dir = root_dir / "docfx_out"

    # 1. Generate the reflection JSON using TypeDoc
    if not args.skip_typedoc:
        print("--- Step 1: Generating TypeDoc JSON ---")
        run_command(["npx", "typedoc", "--json", str(json_file), args.source])

    # 2. Convert JSON to DocFX YAML
    print("\n--- Step 2: Converting JSON to DocFX YAML ---")
    cmd = [
        sys.executable,
        "-m",
        "typedoc2docfx.cli",
        str(json_file),
        str(out_dir),
        "--report",
        str(root_dir / "diagnostics.json"),
    ]

    if args.has_module:
        cmd.append("--module-grouping")
    if args.disable_alphabet_order:
        cmd.append("--disable-alphabet-order")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Documentation generated in {out_dir}")


if __name__ == "__main__":
    main()
