"""Convert rustdoc JSON item graphs to cross-linked Markdown pages.

Each selected function or struct is written to
``<output>/<module path>/<name>.md``; inherent methods of a struct go one
directory deeper, under ``<struct name>/``.
"""

import argparse
import logging
import subprocess
import sys

from rustdoc_md.errors import RustdocMdError
from rustdoc_md.load_config import load_config
from rustdoc_md.run_extraction import run_extraction


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description="Convert rustdoc JSON output to Markdown pages.",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument("--manifest-path", help="Path to Cargo.toml")
    ap.add_argument(
        "--package",
        help="Package to extract (replaces the configured package list)",
    )
    ap.add_argument("--module-path", help="Filter by module path, e.g. my_crate::io")
    ap.add_argument(
        "--kind",
        default="function",
        help="Filter by item kind (default: function)",
    )
    ap.add_argument(
        "--rustdoc-json",
        help="Use an existing rustdoc JSON file for --package instead of cargo",
    )
    ap.add_argument("--output", help="Output directory for Markdown pages")
    ap.add_argument("--toolchain", help="Toolchain used to run rustdoc")
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="List the pages that would be written without writing them",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.manifest_path:
            config["manifest_path"] = args.manifest_path
        if args.output:
            config["output_path"] = args.output
        if args.toolchain:
            config["toolchain"] = args.toolchain
        if args.package:
            config["packages"] = [
                {
                    "name": args.package,
                    "module_path": args.module_path,
                    "kind": args.kind,
                    "rustdoc_json": args.rustdoc_json,
                }
            ]
        run_extraction(config, dry_run=args.dry_run)
    except subprocess.CalledProcessError as e:
        cmd = e.cmd if isinstance(e.cmd, str) else " ".join(map(str, e.cmd))
        print(f"Error executing command: {cmd}", file=sys.stderr)
        return e.returncode
    except RustdocMdError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
