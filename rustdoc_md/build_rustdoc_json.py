"""Logic for producing a package's rustdoc JSON with cargo."""

import json
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any


def run_command(cmd_list: Sequence[str | Path], *, capture: bool = False) -> str:
    """Run a command, raising CalledProcessError if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    result = subprocess.run(
        [str(x) for x in cmd_list],
        check=True,
        capture_output=capture,
        text=True,
    )
    return result.stdout or ""


def cargo_metadata(manifest_path: Path) -> dict[str, Any]:
    """Return ``cargo metadata`` for the workspace of ``manifest_path``."""
    out = run_command(
        [
            "cargo",
            "metadata",
            "--format-version",
            "1",
            "--no-deps",
            "--manifest-path",
            manifest_path,
        ],
        capture=True,
    )
    return json.loads(out)


def lib_target_name(metadata: dict[str, Any], package: str) -> str:
    """Name of a package's library target, as used for the JSON file name."""
    for pkg in metadata.get("packages") or []:
        if pkg.get("name") != package:
            continue
        for target in pkg.get("targets") or []:
            if {"lib", "rlib", "proc-macro"} & set(target.get("kind") or []):
                return str(target["name"]).replace("-", "_")
    return package.replace("-", "_")


def build_rustdoc_json(manifest_path: Path, package: str, toolchain: str) -> Path:
    """Document ``package`` with rustdoc's JSON backend and return the JSON path."""
    run_command(
        [
            "cargo",
            f"+{toolchain}",
            "rustdoc",
            "--manifest-path",
            manifest_path,
            "--package",
            package,
            "--lib",
            "--all-features",
            "--",
            "-Z",
            "unstable-options",
            "--output-format",
            "json",
        ]
    )
    metadata = cargo_metadata(manifest_path)
    target_dir = Path(metadata["target_directory"])
    return target_dir / "doc" / f"{lib_target_name(metadata, package)}.json"
