"""Custom exception types raised by the bundle scaffolder."""

from __future__ import annotations

from pathlib import Path


class BundleMakerError(RuntimeError):
    """Base class for errors reported to the user by the CLI."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidBundleNameError(BundleMakerError, ValueError):
    """Raised when a bundle name cannot be used to derive identifiers."""


class TargetExistsError(BundleMakerError):
    """Raised when the scaffold target already exists on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f'The path "{path}" already exists.')


class TemplateRenderingError(BundleMakerError):
    """Raised when a template placeholder has no value."""


__all__ = [
    "BundleMakerError",
    "InvalidBundleNameError",
    "TargetExistsError",
    "TemplateRenderingError",
]
