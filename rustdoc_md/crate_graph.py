"""Data model for one package's parsed rustdoc JSON document."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class CrateGraph:
    """Immutable item graph of a single package."""

    package: str  # Cargo package name, e.g. my-crate
    crate_name: str  # Name of the root module, e.g. my_crate
    version: str | None
    local_crate_id: int
    index: dict[str, dict[str, Any]]  # id -> item
    paths: dict[str, dict[str, Any]]  # id -> {crate_id, path, kind}
    external_crates: dict[str, dict[str, Any]]  # crate id -> {name, html_root_url}
    format_version: int | None = None
    file: Path | None = field(default=None, compare=False)

    def item(self, item_id: str) -> dict[str, Any] | None:
        """Return the full item definition, if locally indexed."""
        return self.index.get(item_id)

    def summary(self, item_id: str) -> dict[str, Any] | None:
        """Return the public path summary of an item, if recorded."""
        return self.paths.get(item_id)

    def external_crate(self, crate_id: int) -> dict[str, Any]:
        """Return metadata of a foreign crate, or an empty mapping."""
        return self.external_crates.get(str(crate_id)) or {}
