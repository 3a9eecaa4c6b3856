"""Load analysis documents written by bundler adapters.

Adapters emit one JSON document per target in a common shape::

    {
        "target": "web",
        "bundler": "esbuild",
        "entry": "src/index.ts",
        "output_bytes": 48211,
        "modules": [
            {"path": "src/index.ts", "bytes": 812, "is_external_dependency": false}
        ],
        "imports": {"src/index.ts": [{"path": "src/app.ts"}]}
    }

Everything except ``modules`` is optional.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .exceptions import BundleInputError
from .logging_config import get_logger
from .models import ModuleRecord

logger = get_logger(__name__)

_EXTERNAL_KEYS = ("is_external_dependency", "isExternalDependency", "isNodeModule")


@dataclass(frozen=True)
class BundleInput:
    """Raw adapter output for one target, before aggregation."""

    modules: List[ModuleRecord]
    imports: Dict[str, Any] = field(default_factory=dict)
    target: str = "bundle"
    bundler: str = "unknown"
    entry: Optional[str] = None
    output_bytes: int = 0


def _record(raw: Mapping[str, Any]) -> Optional[ModuleRecord]:
    path = raw.get("path")
    if not isinstance(path, str) or not path:
        return None
    external = None
    for key in _EXTERNAL_KEYS:
        if key in raw:
            external = bool(raw[key])
            break
    return ModuleRecord.create(path, raw.get("bytes"), external)


def parse_analysis(data: Any, source: Union[str, Path] = "<memory>") -> BundleInput:
    """Validate a decoded analysis document and build records from it."""
    source = Path(source)
    if not isinstance(data, Mapping):
        raise BundleInputError(source, "top level must be an object")

    raw_modules = data.get("modules", [])
    if not isinstance(raw_modules, list):
        raise BundleInputError(source, "'modules' must be a list")

    modules: List[ModuleRecord] = []
    skipped = 0
    for raw in raw_modules:
        record = _record(raw) if isinstance(raw, Mapping) else None
        if record is None:
            skipped += 1
            continue
        modules.append(record)
    if skipped:
        logger.warning(f"Skipped {skipped} module entries without a path in {source}")

    imports = data.get("imports") or {}
    if not isinstance(imports, Mapping):
        raise BundleInputError(source, "'imports' must be an object")
    for file, info in imports.items():
        listed = info.get("imports") if isinstance(info, Mapping) else info
        if listed is not None and not isinstance(listed, (list, tuple)):
            raise BundleInputError(source, f"imports of '{file}' must be a list")

    entry = data.get("entry")
    try:
        output_bytes = max(0, int(data.get("output_bytes") or 0))
    except (TypeError, ValueError):
        output_bytes = 0

    return BundleInput(
        modules=modules,
        imports=dict(imports),
        target=str(data.get("target") or "bundle"),
        bundler=str(data.get("bundler") or "unknown"),
        entry=entry if isinstance(entry, str) and entry else None,
        output_bytes=output_bytes,
    )


def load_analysis(path: Union[str, Path]) -> BundleInput:
    """Read and parse an analysis document from *path*.

    Raises:
        BundleInputError: If the file is unreadable, not JSON, or misshapen
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BundleInputError(path, str(e))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BundleInputError(path, f"invalid JSON: {e}")

    bundle = parse_analysis(data, path)
    logger.debug(f"Loaded {len(bundle.modules)} modules from {path}")
    return bundle
