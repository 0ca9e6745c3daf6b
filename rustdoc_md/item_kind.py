"""Predicates and parsing for rustdoc item kinds."""

from rustdoc_md.errors import ConfigError

# rustdoc ItemKind names; older format spellings kept alongside newer ones
ITEM_KINDS = frozenset(
    {
        "module",
        "extern_crate",
        "use",
        "import",
        "struct",
        "struct_field",
        "union",
        "enum",
        "variant",
        "function",
        "type_alias",
        "typedef",
        "opaque_ty",
        "constant",
        "trait",
        "trait_alias",
        "impl",
        "static",
        "foreign_type",
        "macro",
        "proc_attribute",
        "proc_derive",
        "assoc_const",
        "assoc_type",
        "primitive",
        "keyword",
    }
)

# rustdoc page prefixes that differ from the kind name
URL_KIND_TAGS = {
    "function": "fn",
    "type_alias": "type",
    "typedef": "type",
    "proc_attribute": "attr",
    "proc_derive": "derive",
}


def parse_item_kind(kind: str) -> str:
    """Validate an item kind from configuration."""
    k = str(kind).strip().lower()
    if k not in ITEM_KINDS:
        msg = f"Unrecognized item kind: {kind!r}"
        raise ConfigError(msg)
    return k


def url_kind_tag(kind: str) -> str:
    """Return the rustdoc file-name prefix for a kind (fn, struct, ...)."""
    return URL_KIND_TAGS.get(kind, kind)
