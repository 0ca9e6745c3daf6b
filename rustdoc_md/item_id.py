"""Data model for identifying an item across loaded packages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemId:
    """Composite key naming an item within the union of loaded packages."""

    package: str
    id: str  # rustdoc id, normalized to str

    @classmethod
    def of(cls, package: str, raw_id: object) -> "ItemId":
        """Build an ItemId from a raw JSON id (str or int)."""
        return cls(package, str(raw_id))
