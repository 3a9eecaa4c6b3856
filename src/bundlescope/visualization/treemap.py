"""Binary-split squarified treemap layout.

Items are laid out largest first. Each step cuts the sorted list where the
running byte sum first reaches half of the region's total, then cuts the
rectangle across its longer side in the same proportion. Cutting the long
side keeps tiles close to square instead of degenerating into slivers.

Coordinates are integers in whatever unit the caller's canvas uses
(terminal cells or pixels). Every surviving item gets at least one unit in
each dimension, so very small items stay visible.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..grouping.classifier import category_of
from ..models import Category, PackageGroup, Tile


@dataclass(frozen=True)
class _Item:
    name: str
    bytes: int
    category: Category
    path: Optional[str] = None


def _field(item: Any, key: str, default: Any = None) -> Any:
    if isinstance(item, dict):
        return item.get(key, default)
    return getattr(item, key, default)


def _coerce(item: Any) -> _Item:
    name = str(_field(item, "name", ""))
    try:
        size = int(_field(item, "bytes", 0) or 0)
    except (TypeError, ValueError):
        size = 0
    category = _field(item, "category") or category_of(name)
    return _Item(name=name, bytes=size, category=category, path=_field(item, "path"))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _split_index(items: Sequence[_Item], total: int) -> int:
    """First prefix length whose byte sum reaches half of *total*."""
    cumulative = 0
    for i, item in enumerate(items[:-1]):
        cumulative += item.bytes
        if 2 * cumulative >= total:
            return i + 1
    return len(items) - 1


def squarify(items: Iterable[Any], x: int, y: int, w: int, h: int) -> List[Tile]:
    """Lay *items* out inside the rectangle ``(x, y, w, h)``.

    *items* may be mappings or objects exposing ``name`` and ``bytes``, and
    optionally ``category`` and ``path``. Items with ``bytes <= 0`` are
    dropped. ``pct`` on every tile is relative to the total of the items
    actually laid out, so a zoomed layout reports shares of that package.

    Returns an empty list for an empty item set or a non-positive canvas.
    """
    sized = [item for item in (_coerce(i) for i in items) if item.bytes > 0]
    if not sized or w <= 0 or h <= 0:
        return []

    ordered = sorted(sized, key=lambda i: i.bytes, reverse=True)
    grand_total = sum(i.bytes for i in ordered)

    tiles: List[Tile] = []
    # Explicit stack: skewed inputs can split off one item per level.
    # Second halves go on first so output order is first-half-first.
    stack: List[Tuple[Sequence[_Item], int, int, int, int, int]] = [
        (ordered, grand_total, x, y, w, h)
    ]
    while stack:
        region, total, rx, ry, rw, rh = stack.pop()
        if not region or rw <= 0 or rh <= 0:
            continue

        if len(region) == 1:
            item = region[0]
            tiles.append(
                Tile(
                    name=item.name,
                    bytes=item.bytes,
                    pct=item.bytes / grand_total,
                    x=rx,
                    y=ry,
                    w=rw,
                    h=rh,
                    category=item.category,
                    path=item.path,
                )
            )
            continue

        split = _split_index(region, total)
        first, second = region[:split], region[split:]
        first_bytes = sum(i.bytes for i in first)
        second_bytes = total - first_bytes
        ratio = first_bytes / total if total > 0 else 0.5

        if rw >= rh:
            left_w = max(1, _round_half_up(rw * ratio))
            right_w = max(1, rw - left_w)
            stack.append((second, second_bytes, rx + left_w, ry, right_w, rh))
            stack.append((first, first_bytes, rx, ry, left_w, rh))
        else:
            top_h = max(1, _round_half_up(rh * ratio))
            bottom_h = max(1, rh - top_h)
            stack.append((second, second_bytes, rx, ry + top_h, rw, bottom_h))
            stack.append((first, first_bytes, rx, ry, rw, top_h))

    return tiles


def layout_packages(packages: Iterable[PackageGroup], width: int, height: int) -> List[Tile]:
    """Top-level layout: one tile per package group, origin at ``(0, 0)``."""
    return squarify(packages, 0, 0, width, height)


def layout_package_files(package: PackageGroup, width: int, height: int) -> List[Tile]:
    """Zoomed layout: one tile per file of *package*.

    Tiles are named by file basename, keep the full path, and inherit the
    package's category.
    """
    category = package.category
    items = [
        {
            "name": f.path.rsplit("/", 1)[-1] or f.path,
            "bytes": f.bytes,
            "category": category,
            "path": f.path,
        }
        for f in package.files
    ]
    return squarify(items, 0, 0, width, height)
