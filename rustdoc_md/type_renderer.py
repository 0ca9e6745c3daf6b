"""Logic for rendering rustdoc type expressions and signatures as inline HTML.

Every rustdoc enum is dispatched on its variant name through a closed table;
a variant without an entry raises :class:`UnsupportedInputError` rather than
being dropped from the page.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rustdoc_md.errors import MissingItemError, UnsupportedInputError
from rustdoc_md.item_id import ItemId
from rustdoc_md.variant_of import variant_of

if TYPE_CHECKING:
    from rustdoc_md.cached_item import CachedItem

logger = logging.getLogger(__name__)

PRIMITIVE_URL = "https://doc.rust-lang.org/std/primitive.{name}.html"

FUNCTION_SIG = """<span class="sig-paren">(</span>
{params}
<span class="sig-paren">)</span>
{output}"""

FUNCTION_PARAM = """<em class="sig-param n">
    <span class="pre">{name}</span>: <span class="pre">{type_}</span>
</em>"""


def _unsupported(what: str, value: Any) -> UnsupportedInputError:
    return UnsupportedInputError(f"Unimplemented {what}: {value!r}")


class TypeRenderer:
    """Renders type expressions found on ``root``'s page.

    Referenced items are looked up in ``root``'s package through its pool.
    """

    def __init__(self, root: "CachedItem") -> None:
        """Bind the renderer to the item whose page is being rendered."""
        self.root = root
        self._types: dict[str, Callable[[Any], str]] = {
            "primitive": self._primitive,
            "resolved_path": self.render_path,
            "dyn_trait": self._dyn_trait,
            "generic": self._generic,
            "borrowed_ref": self._borrowed_ref,
            "tuple": self._tuple,
            "slice": self._slice,
            "array": self._array,
            "impl_trait": self._impl_trait,
        }

    # -----------------------------
    # Items
    # -----------------------------

    def render_function(self, func: dict[str, Any]) -> str:
        """Render a function's parameter list and return type."""
        decl = func.get("sig") or func.get("decl") or {}
        params = ", ".join(
            FUNCTION_PARAM.format(name=name, type_=self.render_type(type_))
            for name, type_ in decl.get("inputs") or []
        )
        output = decl.get("output")
        ret = "" if _is_unit(output) else f" → {self.render_type(output)}"
        return FUNCTION_SIG.format(params=params, output=ret)

    # -----------------------------
    # Types
    # -----------------------------

    def render_type(self, type_: Any) -> str:
        """Render a ``Type`` expression."""
        variant, payload = variant_of(type_, "Type")
        render = self._types.get(variant)
        if render is None:
            raise _unsupported("Type", type_)
        return render(payload)

    def _primitive(self, name: str) -> str:
        return f'<a href="{PRIMITIVE_URL.format(name=name)}">{name}</a>'

    def _generic(self, name: str) -> str:
        return name

    def _dyn_trait(self, dyn_trait: dict[str, Any]) -> str:
        parts = [self.render_poly_trait(t) for t in dyn_trait.get("traits") or []]
        if dyn_trait.get("lifetime"):
            parts.append(dyn_trait["lifetime"])
        return "dyn " + " + ".join(parts)

    def _borrowed_ref(self, ref: dict[str, Any]) -> str:
        lifetime = f"{ref['lifetime']} " if ref.get("lifetime") else ""
        # "mutable" in older formats, "is_mutable" in newer ones
        mutable = "mut " if ref.get("is_mutable", ref.get("mutable")) else ""
        return f"&{lifetime}{mutable}{self.render_type(ref['type'])}"

    def _tuple(self, types: list[Any]) -> str:
        return "(" + ", ".join(self.render_type(t) for t in types) + ")"

    def _slice(self, type_: Any) -> str:
        return f"[{self.render_type(type_)}]"

    def _array(self, array: dict[str, Any]) -> str:
        return f"[{self.render_type(array['type'])}; {array['len']}]"

    def _impl_trait(self, bounds: list[Any]) -> str:
        return "impl " + " + ".join(self.render_bound(b) for b in bounds)

    # -----------------------------
    # Paths and generics
    # -----------------------------

    def render_path(self, path: dict[str, Any]) -> str:
        """Render a resolved path as a link followed by its generic arguments."""
        item_id = ItemId.of(self.root.id.package, path.get("id"))
        try:
            item = self.root.pool.get(item_id)
        except MissingItemError:
            logger.debug("No item for %s, rendering without link", item_id)
            href, name = "", _path_name(path)
        else:
            href, name = item.external_link(), item.name
        args = self.render_generic_args(path.get("args"))
        return f'<a href="{href}">{name}</a>{args}'

    def render_generic_args(self, args: Any) -> str:
        """Render ``GenericArgs``; empty argument lists render as ``""``."""
        if args is None:
            return ""
        variant, payload = variant_of(args, "GenericArgs")
        if variant != "angle_bracketed":
            raise _unsupported("GenericArgs", args)

        generic_args = payload.get("args") or []
        bindings = payload.get("bindings", payload.get("constraints")) or []
        if not generic_args and not bindings:
            return ""

        parts = [self.render_generic_arg(a) for a in generic_args]
        parts.extend(self.render_binding(b) for b in bindings)
        return "&lt;" + ", ".join(parts) + "&gt;"

    def render_generic_arg(self, arg: Any) -> str:
        """Render a single ``GenericArg`` (lifetime or type)."""
        variant, payload = variant_of(arg, "GenericArg")
        if variant == "lifetime":
            return payload
        if variant == "type":
            return self.render_type(payload)
        raise _unsupported("GenericArg", arg)

    def render_binding(self, binding: dict[str, Any]) -> str:
        """Render an associated type equality binding, ``Item=T``."""
        variant, term = variant_of(binding.get("binding"), "TypeBindingKind")
        if variant != "equality":
            raise _unsupported("TypeBindingKind", binding)
        term_variant, type_ = variant_of(term, "Term")
        if term_variant != "type":
            raise _unsupported("Term", term)
        args = self.render_generic_args(binding.get("args"))
        return f"{binding['name']}{args}={self.render_type(type_)}"

    # -----------------------------
    # Bounds
    # -----------------------------

    def render_bound(self, bound: Any) -> str:
        """Render a ``GenericBound``: a trait bound or an outlived lifetime."""
        variant, payload = variant_of(bound, "GenericBound")
        if variant == "outlives":
            return payload
        if variant != "trait_bound":
            raise _unsupported("GenericBound", bound)

        if payload.get("generic_params"):
            msg = "Unimplemented: Higher-Rank Trait Bounds"
            raise UnsupportedInputError(msg)
        modifier = payload.get("modifier") or "none"
        if modifier == "none":
            prefix = ""
        elif modifier == "maybe":
            prefix = "?"
        else:
            raise _unsupported("TraitBoundModifier", modifier)
        return prefix + self.render_path(payload["trait"])

    def render_poly_trait(self, poly_trait: dict[str, Any]) -> str:
        """Render one trait of a ``dyn`` type."""
        if poly_trait.get("generic_params"):
            msg = "Unimplemented: Higher-Rank Trait Bounds"
            raise UnsupportedInputError(msg)
        return self.render_path(poly_trait["trait"])


def _is_unit(type_: Any) -> bool:
    return type_ is None or type_ == {"tuple": []}


def _path_name(path: dict[str, Any]) -> str:
    # "name" in older formats, "path" (possibly qualified) in newer ones
    name = path.get("name") or path.get("path") or ""
    return str(name).rsplit("::", 1)[-1]
