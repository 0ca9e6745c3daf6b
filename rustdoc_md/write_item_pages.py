"""Logic for writing item pages to disk."""

import logging
from pathlib import Path

from rustdoc_md.cached_item import CachedItem
from rustdoc_md.output_file_for_item import output_file_for_item
from rustdoc_md.render_item_page import render_item_page

logger = logging.getLogger(__name__)


def write_item_pages(items: list[CachedItem], out_root: Path) -> int:
    """Render and write every item page, overwriting existing files."""
    written = 0
    total = len(items)
    print(f"Writing {total} item pages...")
    for item in items:
        md = render_item_page(item)
        out_file = output_file_for_item(out_root, item)
        out_file.write_text(md, encoding="utf-8")
        logger.debug("Wrote %s", out_file)
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} pages")
    return written
