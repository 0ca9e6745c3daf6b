"""Orchestration logic for converting rustdoc JSON to Markdown pages."""

import logging
from pathlib import Path
from typing import Any

from rustdoc_md.build_rustdoc_json import build_rustdoc_json
from rustdoc_md.collect_items import collect_items
from rustdoc_md.crate_graph import CrateGraph
from rustdoc_md.export_option import ExportOption, export_options_from_config
from rustdoc_md.item_pool import ItemPool
from rustdoc_md.load_crate import load_crate
from rustdoc_md.write_item_pages import write_item_pages

logger = logging.getLogger(__name__)


def run_extraction(config: dict[str, Any], *, dry_run: bool = False) -> int:
    """Execute the full extraction pipeline and return the number of pages."""
    options = export_options_from_config(config)
    pool = ItemPool(_load_graphs(options, config))
    items = collect_items(pool, options)
    out_root = Path(config["output_path"]).resolve()

    if dry_run:
        for item in items:
            rel = Path(*item.directory, f"{item.name}.md")
            print(f"{item.kind:10} {out_root / rel}")
        print(f"Dry run complete: {len(items)} pages would be written.")
        return len(items)

    out_root.mkdir(parents=True, exist_ok=True)
    written = write_item_pages(items, out_root)
    logger.info("Resolved %d items while rendering", len(pool))
    print(f"Generated {written} Markdown pages into: {out_root}")
    return written


def _load_graphs(
    options: list[ExportOption], config: dict[str, Any]
) -> dict[str, CrateGraph]:
    """Load each selected package's graph once."""
    graphs: dict[str, CrateGraph] = {}
    manifest_path = Path(config["manifest_path"])
    for option in options:
        if option.package in graphs:
            continue
        if option.rustdoc_json:
            json_path = Path(option.rustdoc_json)
        else:
            json_path = build_rustdoc_json(
                manifest_path, option.package, config["toolchain"]
            )
        graphs[option.package] = load_crate(json_path, option.package)
    return graphs
