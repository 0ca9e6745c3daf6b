"""Logic for loading rustdoc JSON documents into crate graphs."""

import json
import logging
from pathlib import Path
from typing import Any

from rustdoc_md.crate_graph import CrateGraph
from rustdoc_md.errors import ConfigError

logger = logging.getLogger(__name__)


def load_crate(path: Path, package: str) -> CrateGraph:
    """Load and index a rustdoc JSON file produced for ``package``."""
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"Invalid rustdoc JSON in {path}: {e}"
        raise ConfigError(msg) from e
    return crate_from_doc(doc, package, file=path)


def crate_from_doc(
    doc: dict[str, Any], package: str, *, file: Path | None = None
) -> CrateGraph:
    """Build a CrateGraph from an already parsed rustdoc JSON document."""
    if not isinstance(doc, dict) or "index" not in doc or "paths" not in doc:
        msg = f"Not a rustdoc JSON document: {file or package}"
        raise ConfigError(msg)

    # Ids are strings in older formats and integers in newer ones
    index = {str(k): v for k, v in doc["index"].items()}
    paths = {str(k): v for k, v in doc["paths"].items()}
    external = {str(k): v for k, v in (doc.get("external_crates") or {}).items()}

    root = index.get(str(doc.get("root")))
    if root is None:
        msg = f"Root item {doc.get('root')!r} missing from index of {package}"
        raise ConfigError(msg)

    graph = CrateGraph(
        package=package,
        crate_name=str(root.get("name") or package.replace("-", "_")),
        version=doc.get("crate_version"),
        local_crate_id=int(root.get("crate_id", 0)),
        index=index,
        paths=paths,
        external_crates=external,
        format_version=doc.get("format_version"),
        file=file,
    )
    logger.info(
        "Loaded %s %s: %d items, %d paths (format %s)",
        graph.package,
        graph.version or "(unversioned)",
        len(index),
        len(paths),
        graph.format_version,
    )
    return graph
