"""Shared rustdoc JSON fixtures."""

import copy
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from rustdoc_md.cached_item import CachedItem
from rustdoc_md.crate_graph import CrateGraph
from rustdoc_md.item_id import ItemId
from rustdoc_md.item_pool import ItemPool
from rustdoc_md.load_crate import crate_from_doc


def _fn(
    item_id: str,
    name: str,
    docs: str,
    inputs: list[Any],
    output: Any = None,
    visibility: str = "public",
) -> dict[str, Any]:
    return {
        "id": item_id,
        "crate_id": 0,
        "name": name,
        "docs": docs,
        "visibility": visibility,
        "inner": {
            "function": {
                "decl": {"inputs": inputs, "output": output, "c_variadic": False},
                "generics": {"params": [], "where_predicates": []},
                "has_body": True,
            }
        },
    }


def _struct(item_id: str, name: str, docs: str, impls: list[str]) -> dict[str, Any]:
    return {
        "id": item_id,
        "crate_id": 0,
        "name": name,
        "docs": docs,
        "visibility": "public",
        "inner": {
            "struct": {
                "kind": {"plain": {"fields": [], "fields_stripped": True}},
                "generics": {"params": [], "where_predicates": []},
                "impls": impls,
            }
        },
    }


def _impl(item_id: str, trait: Any, items: list[str]) -> dict[str, Any]:
    return {
        "id": item_id,
        "crate_id": 0,
        "name": None,
        "docs": None,
        "visibility": "default",
        "inner": {
            "impl": {
                "trait": trait,
                "for": {"resolved_path": {"name": "Client", "id": "0:2", "args": None}},
                "items": items,
                "synthetic": False,
                "blanket_impl": None,
            }
        },
    }


def _path(name: str, item_id: str, args: Any = None) -> dict[str, Any]:
    return {"resolved_path": {"name": name, "id": item_id, "args": args}}


def _angle(args: list[Any], bindings: list[Any] | None = None) -> dict[str, Any]:
    return {"angle_bracketed": {"args": args, "bindings": bindings or []}}


DEMO_DOC: dict[str, Any] = {
    "root": "0:0",
    "crate_version": "0.3.1",
    "format_version": 24,
    "includes_private": False,
    "index": {
        "0:0": {
            "id": "0:0",
            "crate_id": 0,
            "name": "demo",
            "docs": "Demo crate.",
            "visibility": "public",
            "inner": {"module": {"is_crate": True, "items": ["0:1", "0:2", "0:9"]}},
        },
        "0:1": _fn(
            "0:1",
            "connect",
            "Connect to a server.\n\n```\n# let server = setup();\n"
            'let client = connect("localhost", 3);\n```',
            [
                [
                    "addr",
                    {
                        "borrowed_ref": {
                            "lifetime": None,
                            "mutable": False,
                            "type": {"primitive": "str"},
                        }
                    },
                ],
                ["retries", {"primitive": "u32"}],
            ],
            _path("Client", "0:2", _angle([])),
        ),
        "0:2": _struct(
            "0:2", "Client", "A client handle.\n\nHolds one connection.", ["0:3", "0:6"]
        ),
        "0:3": _impl("0:3", None, ["0:4", "0:5"]),
        "0:4": _fn(
            "0:4",
            "send",
            "\n\nSend bytes | framed.\nMore text.",
            [
                [
                    "self",
                    {
                        "borrowed_ref": {
                            "lifetime": None,
                            "mutable": True,
                            "type": {"generic": "Self"},
                        }
                    },
                ],
                [
                    "data",
                    {
                        "borrowed_ref": {
                            "lifetime": None,
                            "mutable": False,
                            "type": {"slice": {"primitive": "u8"}},
                        }
                    },
                ],
            ],
        ),
        "0:5": _fn(
            "0:5",
            "close",
            "Close the connection.",
            [["self", {"generic": "Self"}]],
            _path(
                "Result",
                "1:10",
                _angle([{"type": {"tuple": []}}, {"type": _path("Error", "0:7")}]),
            ),
        ),
        "0:6": _impl("0:6", {"name": "Clone", "id": "1:20", "args": None}, ["0:8"]),
        "0:8": _fn(
            "0:8",
            "clone",
            "",
            [["self", {"generic": "Self"}]],
            {"generic": "Self"},
            visibility="default",
        ),
        "0:7": _struct("0:7", "Error", "An error.", []),
        "0:9": {
            "id": "0:9",
            "crate_id": 0,
            "name": "net",
            "docs": None,
            "visibility": "public",
            "inner": {"module": {"is_crate": False, "items": ["0:10"]}},
        },
        "0:10": _fn("0:10", "ping", "Ping.", [], _path("Bytes", "5:1")),
        "0:11": _fn("0:11", "internal", "Not exported.", [], visibility="crate"),
    },
    "paths": {
        "0:0": {"crate_id": 0, "path": ["demo"], "kind": "module"},
        "0:1": {"crate_id": 0, "path": ["demo", "connect"], "kind": "function"},
        "0:2": {"crate_id": 0, "path": ["demo", "Client"], "kind": "struct"},
        "0:7": {"crate_id": 0, "path": ["demo", "Error"], "kind": "struct"},
        "0:9": {"crate_id": 0, "path": ["demo", "net"], "kind": "module"},
        "0:10": {"crate_id": 0, "path": ["demo", "net", "ping"], "kind": "function"},
        "0:11": {"crate_id": 0, "path": ["demo", "internal"], "kind": "function"},
        "1:10": {"crate_id": 1, "path": ["core", "result", "Result"], "kind": "enum"},
        "1:20": {"crate_id": 1, "path": ["core", "clone", "Clone"], "kind": "trait"},
        "5:1": {"crate_id": 5, "path": ["bytes", "Bytes"], "kind": "struct"},
    },
    "external_crates": {
        "1": {"name": "core", "html_root_url": "https://doc.rust-lang.org/nightly/"},
        "5": {"name": "bytes", "html_root_url": None},
    },
}


# Depends on demo: its Client is reachable only as an external crate item
OTHER_DOC: dict[str, Any] = {
    "root": "0:0",
    "crate_version": "1.0.0",
    "format_version": 24,
    "index": {
        "0:0": {
            "id": "0:0",
            "crate_id": 0,
            "name": "other",
            "docs": None,
            "visibility": "public",
            "inner": {"module": {"is_crate": True, "items": ["0:1"]}},
        },
        "0:1": _fn(
            "0:1", "wrap", "Wrap a client.", [["c", _path("Client", "20:5")]]
        ),
    },
    "paths": {
        "0:0": {"crate_id": 0, "path": ["other"], "kind": "module"},
        "0:1": {"crate_id": 0, "path": ["other", "wrap"], "kind": "function"},
        "20:5": {"crate_id": 20, "path": ["demo", "Client"], "kind": "struct"},
    },
    "external_crates": {"20": {"name": "demo", "html_root_url": None}},
}


@pytest.fixture
def crate_doc() -> dict[str, Any]:
    """A fresh copy of the demo crate's rustdoc JSON."""
    return copy.deepcopy(DEMO_DOC)


@pytest.fixture
def other_doc() -> dict[str, Any]:
    """A fresh copy of a crate that depends on demo."""
    return copy.deepcopy(OTHER_DOC)


@pytest.fixture
def graph(crate_doc: dict[str, Any]) -> CrateGraph:
    """The demo crate's graph."""
    return crate_from_doc(crate_doc, "demo")


@pytest.fixture
def pool(graph: CrateGraph) -> ItemPool:
    """A pool over the demo crate only."""
    return ItemPool({"demo": graph})


@pytest.fixture
def get(pool: ItemPool) -> Callable[[str], CachedItem]:
    """Look up a demo item by raw id."""
    return lambda raw_id: pool.get(ItemId("demo", raw_id))


@pytest.fixture
def rustdoc_json_file(tmp_path: Path, crate_doc: dict[str, Any]) -> Path:
    """The demo crate's rustdoc JSON written to disk."""
    p = tmp_path / "demo.json"
    p.write_text(json.dumps(crate_doc), encoding="utf-8")
    return p
