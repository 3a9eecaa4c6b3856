"""Path classification and package aggregation."""

from .aggregator import aggregate, dedupe_records
from .classifier import (
    DEFAULT_MONOREPO_DIRS,
    LOCAL_GROUP,
    category_of,
    classify,
)

__all__ = [
    "aggregate",
    "dedupe_records",
    "classify",
    "category_of",
    "DEFAULT_MONOREPO_DIRS",
    "LOCAL_GROUP",
]
