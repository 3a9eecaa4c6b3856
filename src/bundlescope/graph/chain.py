"""Import chain resolution: why is this module in the bundle?"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from ..models import ImportGraph, ModuleRecord, PackageGroup

GraphLike = Union[ImportGraph, Mapping[str, Sequence[str]]]


def find_import_chain(graph: GraphLike, target: str, entry: str) -> Optional[List[str]]:
    """Shortest importer chain from *entry* down to *target*.

    BFS over the reverse graph starting at *target*. The first path that
    reaches *entry* has the fewest hops; it is returned entry-first. Each
    node is expanded at most once, so cyclic imports terminate.

    Returns None when *entry* cannot be reached.
    """
    edges = graph.edges if isinstance(graph, ImportGraph) else graph

    visited: set[str] = set()
    queue: deque[List[str]] = deque([[target]])

    while queue:
        chain = queue.popleft()
        current = chain[-1]

        if current == entry:
            return chain[::-1]
        if current in visited:
            continue
        visited.add(current)

        for importer in edges.get(current, ()):
            if importer not in visited:
                queue.append(chain + [importer])

    return None


@dataclass(frozen=True)
class PackageChain:
    """A package, its largest file, and how the entry reaches that file."""

    package: PackageGroup
    largest: ModuleRecord
    chain: Optional[List[str]]


def explain_packages(
    packages: Iterable[PackageGroup],
    graph: GraphLike,
    entry: Optional[str],
    limit: int = 30,
) -> List[PackageChain]:
    """Resolve the chain to the largest file of each of the top *limit* packages."""
    explained: List[PackageChain] = []
    for group in packages:
        if len(explained) >= limit:
            break
        largest = group.largest
        if largest is None:
            continue
        chain = find_import_chain(graph, largest.path, entry) if entry else None
        explained.append(PackageChain(package=group, largest=largest, chain=chain))
    return explained
