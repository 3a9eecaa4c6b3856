"""Public API for bundlescope.

Example:
    >>> from bundlescope import analyze, load_analysis
    >>>
    >>> result = analyze(load_analysis("web.analysis.json"))
    >>> [g.name for g in result.packages][:3]
    ['react-dom', 'src (local)', 'lodash']
"""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, AnalysisConfig
from .graph import build_import_graph
from .grouping import aggregate, dedupe_records
from .ingest import BundleInput
from .logging_config import get_logger
from .models import BundleResult

logger = get_logger(__name__)


def analyze(bundle: BundleInput, config: Optional[AnalysisConfig] = None) -> BundleResult:
    """Aggregate one target's module records and import lists.

    Duplicate module paths (a module rendered into several chunks) are
    collapsed to their largest size before grouping.
    """
    config = config or DEFAULT_CONFIG

    modules = dedupe_records(bundle.modules)
    packages = aggregate(modules, config.monorepo_dir_set)
    graph = build_import_graph(bundle.imports)
    input_bytes = sum(m.bytes for m in modules)

    if len(modules) != len(bundle.modules):
        logger.debug(
            f"{bundle.target}: collapsed {len(bundle.modules) - len(modules)} duplicate modules"
        )
    logger.debug(
        f"{bundle.target}: {len(modules)} modules in {len(packages)} packages, "
        f"{input_bytes} bytes, {len(graph)} imported modules"
    )

    return BundleResult(
        target=bundle.target,
        bundler=bundle.bundler,
        entry=bundle.entry,
        modules=tuple(modules),
        packages=tuple(packages),
        import_graph=graph,
        input_bytes=input_bytes,
        output_bytes=bundle.output_bytes,
    )
