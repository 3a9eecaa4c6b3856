"""
bundlescope - bundle size attribution

Groups bundler module records into packages, explains why a module is in
the bundle by its shortest import chain, and lays sizes out as a treemap.
"""

__version__ = "0.1.0"

from .api import analyze
from .graph import build_import_graph, find_import_chain
from .grouping import aggregate, classify, dedupe_records
from .ingest import BundleInput, load_analysis
from .models import BundleResult, ImportGraph, ModuleRecord, PackageGroup, Tile
from .visualization import squarify

__all__ = [
    "analyze",
    "load_analysis",
    "BundleInput",
    "classify",
    "aggregate",
    "dedupe_records",
    "build_import_graph",
    "find_import_chain",
    "squarify",
    "ModuleRecord",
    "PackageGroup",
    "ImportGraph",
    "Tile",
    "BundleResult",
]
