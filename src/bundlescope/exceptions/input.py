"""Input exceptions: analysis files handed over by bundler adapters."""

from pathlib import Path

from .base import BundleScopeError


class InputError(BundleScopeError):
    """Base class for errors in analysis input."""

    pass


class BundleInputError(InputError):
    """Raised when an analysis file cannot be read or has the wrong shape."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot load analysis: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
