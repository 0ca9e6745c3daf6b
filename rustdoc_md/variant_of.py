"""Utility for unpacking externally tagged rustdoc enum values."""

from typing import Any

from rustdoc_md.errors import UnsupportedInputError


def variant_of(value: Any, what: str) -> tuple[str, Any]:
    """Split a serialized enum value into its variant name and payload.

    Unit variants are serialized as bare strings (``"infer"``), data-carrying
    variants as a single-key mapping (``{"generic": "T"}``).
    """
    if isinstance(value, str):
        return value, None
    if isinstance(value, dict) and len(value) == 1:
        ((name, payload),) = value.items()
        return name, payload
    msg = f"Unimplemented {what}: {value!r}"
    raise UnsupportedInputError(msg)
