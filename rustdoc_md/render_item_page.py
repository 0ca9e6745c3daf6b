"""Logic for rendering an item's Markdown page."""

from rustdoc_md.cached_item import CachedItem
from rustdoc_md.cross_ref import cross_ref_md
from rustdoc_md.errors import UnsupportedInputError
from rustdoc_md.md_table import md_cell, md_table
from rustdoc_md.type_renderer import TypeRenderer

FUNCTION_PAGE = """# {name}

<dl>
    <dt class="sig">
    <span class="sig-name">
        <span class="pre">{name}</span>
    </span>
    {signature}
    </dt>
</dl>

{docs}
"""


def render_item_page(item: CachedItem) -> str:
    """Render a function or struct page in Markdown."""
    kind = item.kind
    if kind == "function":
        return render_function_page(item)
    if kind == "struct":
        return render_struct_page(item)
    msg = f"Unimplemented ItemKind: {kind} ({item!r})"
    raise UnsupportedInputError(msg)


def render_function_page(item: CachedItem) -> str:
    """Render a function page: heading, signature block and docs."""
    func = item.inner.get("function")
    if not isinstance(func, dict):
        msg = f"Unimplemented ItemEnum for function page: {item!r}"
        raise UnsupportedInputError(msg)
    return FUNCTION_PAGE.format(
        name=item.name,
        signature=TypeRenderer(item).render_function(func),
        docs=item.docs,
    )


def render_struct_page(item: CachedItem) -> str:
    """Render a struct page: heading, docs and, if any, its methods table."""
    page = f"# {item.name}\n\n{item.docs}"
    rows = [
        [cross_ref_md(item, method), md_cell(method.caption)]
        for method in item.associated_methods()
    ]
    if rows:
        page += "\n\n# Methods\n" + md_table(["Method", "Description"], rows)
    return page
