"""Value records shared by the grouping, graph and layout layers.

Everything here is computed fresh per analysis and never mutated afterwards:

  ModuleRecord  one physical input file and its byte contribution
  PackageGroup  records that classify to the same group name
  ImportGraph   reverse adjacency, imported module -> importers
  Tile          one rectangle of a treemap layout
  BundleResult  everything above for one analysed target
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

Category = Literal["npm", "workspace", "local"]

DEPENDENCY_SEGMENT = "node_modules/"


@dataclass(frozen=True)
class ModuleRecord:
    """One module as seen by the bundler."""

    path: str
    bytes: int
    is_external_dependency: bool = False

    @classmethod
    def create(
        cls, path: str, bytes: Any = 0, is_external_dependency: Optional[bool] = None
    ) -> "ModuleRecord":
        """Build a record, normalizing missing or negative sizes to zero.

        When *is_external_dependency* is not given it is inferred from the
        presence of a ``node_modules/`` segment in *path*.
        """
        try:
            size = int(bytes or 0)
        except (TypeError, ValueError):
            size = 0
        if is_external_dependency is None:
            is_external_dependency = DEPENDENCY_SEGMENT in path
        return cls(path=path, bytes=max(0, size), is_external_dependency=is_external_dependency)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "bytes": self.bytes,
            "is_external_dependency": self.is_external_dependency,
        }


@dataclass(frozen=True)
class PackageGroup:
    """Records sharing a group name, largest file first."""

    name: str
    bytes: int
    files: Tuple[ModuleRecord, ...] = ()

    @property
    def category(self) -> Category:
        from .grouping.classifier import category_of

        return category_of(self.name)

    @property
    def largest(self) -> Optional[ModuleRecord]:
        return self.files[0] if self.files else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "bytes": self.bytes,
            "category": self.category,
            "files": [f.to_dict() for f in self.files],
        }


@dataclass(frozen=True)
class ImportGraph:
    """Reverse import adjacency.

    ``edges[B]`` lists every module that imports ``B``, in insertion order.
    Duplicates are kept; chain resolution only needs reachability.
    """

    edges: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def importers(self, path: str) -> Tuple[str, ...]:
        return tuple(self.edges.get(path, ()))

    def __contains__(self, path: object) -> bool:
        return path in self.edges

    def __len__(self) -> int:
        return len(self.edges)

    def to_dict(self) -> Dict[str, list]:
        return {k: list(v) for k, v in self.edges.items()}


@dataclass(frozen=True)
class Tile:
    """Geometry for one laid-out item, in the canvas's own unit."""

    name: str
    bytes: int
    pct: float
    x: int
    y: int
    w: int
    h: int
    category: Category = "npm"
    path: Optional[str] = None

    @property
    def area(self) -> int:
        return self.w * self.h

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "bytes": self.bytes,
            "pct": round(self.pct, 6),
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "category": self.category,
        }
        if self.path is not None:
            data["path"] = self.path
        return data


@dataclass(frozen=True)
class BundleResult:
    """Aggregated view of one bundler target."""

    target: str
    bundler: str
    modules: Tuple[ModuleRecord, ...]
    packages: Tuple[PackageGroup, ...]
    import_graph: ImportGraph
    input_bytes: int
    output_bytes: int = 0
    entry: Optional[str] = None

    def find_package(self, name: str) -> Optional[PackageGroup]:
        for group in self.packages:
            if group.name == name:
                return group
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "bundler": self.bundler,
            "entry": self.entry,
            "input_bytes": self.input_bytes,
            "output_bytes": self.output_bytes,
            "packages": [
                {
                    "name": g.name,
                    "bytes": g.bytes,
                    "category": g.category,
                    "files": len(g.files),
                }
                for g in self.packages
            ],
        }
