"""Exception hierarchy for bundlescope."""

from .base import BundleScopeError
from .config import ConfigurationError, InvalidConfigError
from .input import BundleInputError, InputError

__all__ = [
    "BundleScopeError",
    "ConfigurationError",
    "InvalidConfigError",
    "InputError",
    "BundleInputError",
]
