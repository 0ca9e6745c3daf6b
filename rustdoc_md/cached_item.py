"""Path-resolved, memoized handle on a documented item."""

from typing import TYPE_CHECKING, Any

from rustdoc_md.caption import caption
from rustdoc_md.errors import MissingItemError
from rustdoc_md.hide_code_block_lines import hide_code_block_lines
from rustdoc_md.item_id import ItemId
from rustdoc_md.item_kind import url_kind_tag

if TYPE_CHECKING:
    from rustdoc_md.crate_graph import CrateGraph
    from rustdoc_md.item_pool import ItemPool

DOCS_RS_ROOT = "https://docs.rs/{package}/{version}/"


class CachedItem:
    """An item of a loaded package together with its location in the output tree.

    Instances are created by :class:`ItemPool` only, one per :class:`ItemId`.
    The location comes from the package's ``paths`` table when the item has a
    public path entry, otherwise from ``synthesized_path`` (inherent methods).
    """

    def __init__(
        self,
        pool: "ItemPool",
        item_id: ItemId,
        synthesized_path: list[str] | None = None,
    ) -> None:
        """Resolve ``item_id`` against the pool's graphs."""
        self.pool = pool
        self.id = item_id
        self.graph: "CrateGraph" = pool.graph(item_id.package)
        self.item: dict[str, Any] | None = self.graph.item(item_id.id)
        self.summary: dict[str, Any] | None = self.graph.summary(item_id.id)
        self.synthesized_path = synthesized_path

        if self.item is None and self.summary is None:
            msg = f"Item {item_id.id} not found in package {item_id.package}"
            raise MissingItemError(msg)

        name = (self.item or {}).get("name")
        if not name and self.summary and self.summary.get("path"):
            name = self.summary["path"][-1]
        if not name:
            msg = f"Item {item_id.id} in {item_id.package} has no name"
            raise MissingItemError(msg)
        self.name: str = str(name)

        if self.summary and self.summary.get("path"):
            self.path: list[str] = [str(p) for p in self.summary["path"]]
        elif synthesized_path:
            self.path = list(synthesized_path)
        else:
            msg = f"Item {item_id.id} in {item_id.package} has no module path"
            raise MissingItemError(msg)

    def __repr__(self) -> str:
        return f"CachedItem({self.id.package}:{self.id.id} {'::'.join(self.path)})"

    @property
    def directory(self) -> list[str]:
        """Module path without the item's own name."""
        return self.path[:-1]

    @property
    def kind(self) -> str:
        """Rustdoc kind name: from the path summary, else the payload variant."""
        if self.summary and self.summary.get("kind"):
            return str(self.summary["kind"])
        inner = (self.item or {}).get("inner")
        if isinstance(inner, dict) and len(inner) == 1:
            return next(iter(inner))
        return "function"

    @property
    def inner(self) -> dict[str, Any]:
        """Kind-specific payload of the item definition."""
        return (self.item or {}).get("inner") or {}

    @property
    def crate_id(self) -> int:
        """Crate the item belongs to, relative to its package's graph."""
        source = self.item if self.item is not None else self.summary
        return int((source or {}).get("crate_id", self.graph.local_crate_id))

    @property
    def raw_docs(self) -> str:
        """Doc comment as written."""
        return (self.item or {}).get("docs") or ""

    @property
    def docs(self) -> str:
        """Doc comment with hidden code-block lines removed."""
        return hide_code_block_lines(self.raw_docs)

    @property
    def caption(self) -> str:
        """First non-blank line of the doc comment."""
        return caption(self.raw_docs)

    def associated_methods(self) -> list["CachedItem"]:
        """Items of the inherent impl blocks of this struct."""
        return self.pool.resolve_associated_methods(self)

    def html_root_url(self) -> str | None:
        """Documentation root of the crate this item belongs to, if known."""
        if self.crate_id == self.graph.local_crate_id:
            return DOCS_RS_ROOT.format(
                package=self.graph.package, version=self.graph.version or "latest"
            )

        external = self.graph.external_crate(self.crate_id)
        root_url = external.get("html_root_url")
        if root_url:
            return root_url if root_url.endswith("/") else root_url + "/"

        sibling = self.pool.graph_for_crate(external.get("name"))
        if sibling is not None:
            return DOCS_RS_ROOT.format(
                package=sibling.package, version=sibling.version or "latest"
            )
        return None

    def external_link(self) -> str:
        """URL of the item's page on its documentation host, or ``""``."""
        root = self.html_root_url()
        if root is None:
            return ""
        page = f"{url_kind_tag(self.kind)}.{self.name}.html"
        return root + "/".join([*self.directory, page])
