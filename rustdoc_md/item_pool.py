"""Memoizing cache of items over all loaded package graphs."""

import logging
from typing import TYPE_CHECKING

from rustdoc_md.cached_item import CachedItem
from rustdoc_md.errors import MissingItemError
from rustdoc_md.item_id import ItemId

if TYPE_CHECKING:
    from rustdoc_md.crate_graph import CrateGraph

logger = logging.getLogger(__name__)


class ItemPool:
    """Owns the package graphs and hands out one CachedItem per ItemId.

    Not thread-safe: the memoization table is filled lazily during lookups.
    """

    def __init__(self, graphs: dict[str, "CrateGraph"]) -> None:
        """Initialize the pool with graphs keyed by package name."""
        self.graphs = graphs
        self.cached_items: dict[ItemId, CachedItem] = {}
        self._by_crate_name = {g.crate_name: g for g in graphs.values()}

    def __len__(self) -> int:
        return len(self.cached_items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.cached_items

    def graph(self, package: str) -> "CrateGraph":
        """Return the graph of a loaded package."""
        try:
            return self.graphs[package]
        except KeyError:
            msg = f"Package not loaded: {package}"
            raise MissingItemError(msg) from None

    def graph_for_crate(self, crate_name: str | None) -> "CrateGraph | None":
        """Return the loaded graph whose root crate is ``crate_name``."""
        if not crate_name:
            return None
        return self._by_crate_name.get(crate_name)

    def get(self, item_id: ItemId) -> CachedItem:
        """Return the cached item for ``item_id``, resolving it on first access."""
        return self.insert_with_path(item_id, None)

    def insert_with_path(
        self, item_id: ItemId, path: list[str] | None
    ) -> CachedItem:
        """Like :meth:`get`, constructing with a synthesized path if not cached."""
        cached = self.cached_items.get(item_id)
        if cached is not None:
            return cached
        logger.debug("Resolving %s:%s", item_id.package, item_id.id)
        cached = CachedItem(self, item_id, path)
        self.cached_items[item_id] = cached
        return cached

    def resolve_associated_methods(self, item: CachedItem) -> list[CachedItem]:
        """Return the items of every inherent impl block attached to a struct.

        Methods have no entry in the package's ``paths`` table, so each gets
        the struct's path followed by its own name.
        """
        struct = item.inner.get("struct")
        if item.item is None or not isinstance(struct, dict):
            return []

        graph = item.graph
        methods = []
        for impl_id in struct.get("impls") or []:
            impl_item = graph.item(str(impl_id))
            if impl_item is None:
                msg = f"Impl {impl_id} of {item.name} not found in {graph.package}"
                raise MissingItemError(msg)
            impl_ = (impl_item.get("inner") or {}).get("impl")
            if not isinstance(impl_, dict) or impl_.get("trait") is not None:
                continue
            for member_id in impl_.get("items") or []:
                method_id = ItemId.of(item.id.package, member_id)
                member = graph.item(method_id.id)
                if member is None or not member.get("name"):
                    msg = f"Associated item {member_id} of {item.name} not found"
                    raise MissingItemError(msg)
                methods.append(
                    self.insert_with_path(method_id, [*item.path, member["name"]])
                )
        return methods
