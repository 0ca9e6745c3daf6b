"""Logic for building relative links between rendered item pages."""

from typing import TYPE_CHECKING

from rustdoc_md.relative_path import relative_path

if TYPE_CHECKING:
    from rustdoc_md.cached_item import CachedItem


def cross_ref(from_item: "CachedItem", to_item: "CachedItem") -> str:
    """Return the path of ``to_item``'s page relative to ``from_item``'s page."""
    parts = relative_path(from_item.directory, to_item.directory)
    parts.append(f"{to_item.name}.md")
    return "/".join(parts)


def cross_ref_md(from_item: "CachedItem", to_item: "CachedItem") -> str:
    """Return a Markdown link from ``from_item``'s page to ``to_item``'s page."""
    return f"[{to_item.name}]({cross_ref(from_item, to_item)})"
