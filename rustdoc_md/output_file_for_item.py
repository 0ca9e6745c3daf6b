"""Utility for determining the output file of an item's page."""

from pathlib import Path

from rustdoc_md.cached_item import CachedItem


def output_file_for_item(out_root: Path, item: CachedItem) -> Path:
    """Determine the output file for an item, creating its directory."""
    # demo::net::Client -> out_root/demo/net/Client.md
    p = out_root.joinpath(*item.directory, f"{item.name}.md")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
