"""Logic for enumerating the items selected for extraction."""

from rustdoc_md.cached_item import CachedItem
from rustdoc_md.export_option import ExportOption
from rustdoc_md.item_id import ItemId
from rustdoc_md.item_pool import ItemPool


def collect_items(pool: ItemPool, options: list[ExportOption]) -> list[CachedItem]:
    """Resolve every selected item, each preceded by its associated methods."""
    items: list[CachedItem] = []
    seen: set[ItemId] = set()
    for option in options:
        graph = pool.graph(option.package)
        for raw_id, it in graph.index.items():
            summary = graph.summary(raw_id)
            if summary is None or not option.matches(summary):
                continue
            if it.get("visibility") != "public":
                continue
            item = pool.get(ItemId(option.package, raw_id))
            for selected in [*item.associated_methods(), item]:
                if selected.id not in seen:
                    seen.add(selected.id)
                    items.append(selected)
    return items
