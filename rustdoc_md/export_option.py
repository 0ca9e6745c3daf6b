"""Data model for one unit of extraction work."""

from dataclasses import dataclass
from typing import Any

from rustdoc_md.errors import ConfigError
from rustdoc_md.item_kind import parse_item_kind


@dataclass(frozen=True)
class ExportOption:
    """Selects items of one kind, optionally under a module path, from a package."""

    package: str
    module_path: tuple[str, ...] | None
    kind: str
    rustdoc_json: str | None = None  # pre-built document, skips cargo

    def matches(self, summary: dict[str, Any]) -> bool:
        """Check if a path summary falls under this selection."""
        if summary.get("kind") != self.kind:
            return False
        if self.module_path is None:
            return True
        path = tuple(summary.get("path") or ())
        return path[: len(self.module_path)] == self.module_path


def export_options_from_config(config: dict[str, Any]) -> list[ExportOption]:
    """Build the export selections listed under ``packages``."""
    packages = config.get("packages")
    if not packages or not isinstance(packages, list):
        msg = "Configuration must list at least one entry under 'packages'"
        raise ConfigError(msg)

    options = []
    for entry in packages:
        if not isinstance(entry, dict) or not entry.get("name"):
            msg = f"Package entry without a name: {entry!r}"
            raise ConfigError(msg)
        module_path = entry.get("module_path")
        options.append(
            ExportOption(
                package=str(entry["name"]),
                module_path=(
                    tuple(s for s in str(module_path).split("::") if s)
                    if module_path
                    else None
                ),
                kind=parse_item_kind(entry.get("kind", "function")),
                rustdoc_json=entry.get("rustdoc_json"),
            )
        )
    return options
