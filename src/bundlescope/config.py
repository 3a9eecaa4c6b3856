"""Configuration loading and management for bundlescope.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.bundlescope.toml)
    3. Project config (./bundlescope.toml)
    4. Explicit config file
    5. Environment variables (BUNDLESCOPE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(canvas_width=160)
    >>> config.canvas_width
    160
    >>> "packages" in config.monorepo_dirs
    True
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, Tuple, get_type_hints

from .exceptions import BundleScopeError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "BUNDLESCOPE_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for grouping, chain queries and layout.

    Attributes:
        monorepo_dirs: Top-level directory names that hold sibling workspace
            packages (``../../packages/ui/...`` groups as ``ui (workspace)``)
        canvas_width: Default layout width, in canvas units
        canvas_height: Default layout height, in canvas units
        chain_limit: How many packages get an import chain explained
        verbosity: Logging verbosity level
    """

    monorepo_dirs: Tuple[str, ...] = field(
        default_factory=lambda: ("packages", "apps", "libs", "services", "workers", "modules")
    )
    canvas_width: int = 120
    canvas_height: int = 40
    chain_limit: int = 30
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.monorepo_dirs, str) or not all(
            isinstance(d, str) and d for d in self.monorepo_dirs
        ):
            raise InvalidConfigError(
                "monorepo_dirs", self.monorepo_dirs, "must be a list of directory names"
            )
        # TOML hands us lists; keep the frozen instance hashable
        object.__setattr__(self, "monorepo_dirs", tuple(self.monorepo_dirs))

        if self.canvas_width < 1:
            raise InvalidConfigError("canvas_width", self.canvas_width, "must be at least 1")
        if self.canvas_height < 1:
            raise InvalidConfigError("canvas_height", self.canvas_height, "must be at least 1")
        if self.chain_limit < 0:
            raise InvalidConfigError("chain_limit", self.chain_limit, "must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def monorepo_dir_set(self) -> frozenset:
        return frozenset(self.monorepo_dirs)


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset options fall through.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        BundleScopeError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".bundlescope.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "bundlescope.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise BundleScopeError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise BundleScopeError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from BUNDLESCOPE_* environment variables.

    Supported environment variables:
        BUNDLESCOPE_MONOREPO_DIRS: comma-separated names
        BUNDLESCOPE_CANVAS_WIDTH: int
        BUNDLESCOPE_CANVAS_HEIGHT: int
        BUNDLESCOPE_CHAIN_LIMIT: int
        BUNDLESCOPE_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file, accepting either top-level keys or a [bundlescope] table.

    Raises:
        BundleScopeError: If the file can't be read or parsed
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise BundleScopeError(f"Invalid config file '{path}': {e}")

    section = data.get("bundlescope")
    return dict(section) if isinstance(section, dict) else data
