"""Import graph construction from per-module import lists."""

from typing import Any, Dict, List, Mapping, Optional

from ..models import ImportGraph


def _import_path(entry: Any) -> Optional[str]:
    if isinstance(entry, str):
        return entry or None
    if isinstance(entry, Mapping):
        path = entry.get("path")
        return path if isinstance(path, str) and path else None
    return None


def build_import_graph(inputs: Mapping[str, Any]) -> ImportGraph:
    """Invert ``file -> imports`` into ``imported -> importers``.

    *inputs* maps each module to either a list of imports or a mapping with
    an ``imports`` list, as bundler metafiles do. Imports may be bare path
    strings or ``{"path": ...}`` objects; anything else is skipped.

    Chain queries start at a deep module and walk towards the entry point,
    so the graph is stored reversed.
    """
    edges: Dict[str, List[str]] = {}

    for file, info in inputs.items():
        imports = info.get("imports") if isinstance(info, Mapping) else info
        if not isinstance(imports, (list, tuple)):
            continue
        for imp in imports:
            imported = _import_path(imp)
            if imported is None:
                continue
            edges.setdefault(imported, []).append(file)

    return ImportGraph(edges={k: tuple(v) for k, v in edges.items()})
