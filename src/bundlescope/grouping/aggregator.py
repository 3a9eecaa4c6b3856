"""Package aggregation: bucket module records by classified group name."""

from collections import defaultdict
from typing import AbstractSet, Dict, Iterable, List

from ..models import ModuleRecord, PackageGroup
from .classifier import DEFAULT_MONOREPO_DIRS, classify


def dedupe_records(records: Iterable[ModuleRecord]) -> List[ModuleRecord]:
    """Collapse records sharing a path, keeping the largest.

    The same module can be rendered into several output chunks; only the
    maximum observed size is kept. Output is ordered by size, descending.
    """
    best: Dict[str, ModuleRecord] = {}
    for record in records:
        existing = best.get(record.path)
        if existing is None or record.bytes > existing.bytes:
            best[record.path] = record
    return sorted(best.values(), key=lambda r: r.bytes, reverse=True)


def aggregate(
    records: Iterable[ModuleRecord],
    monorepo_dirs: AbstractSet[str] = DEFAULT_MONOREPO_DIRS,
) -> List[PackageGroup]:
    """Group records by package and rank groups and members by size.

    Total bytes are conserved: the group totals sum to the record totals.
    Ties keep first-seen order since both sorts are stable.
    """
    buckets: Dict[str, List[ModuleRecord]] = defaultdict(list)
    for record in records:
        buckets[classify(record.path, monorepo_dirs)].append(record)

    groups = [
        PackageGroup(
            name=name,
            bytes=sum(f.bytes for f in files),
            files=tuple(sorted(files, key=lambda f: f.bytes, reverse=True)),
        )
        for name, files in buckets.items()
    ]
    groups.sort(key=lambda g: g.bytes, reverse=True)
    return groups
