"""Import graph construction and chain resolution."""

from .builder import build_import_graph
from .chain import PackageChain, explain_packages, find_import_chain

__all__ = [
    "build_import_graph",
    "find_import_chain",
    "explain_packages",
    "PackageChain",
]
