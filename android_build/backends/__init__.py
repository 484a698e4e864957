"""Build backends, one per BuildMethod."""

from __future__ import annotations

from ..options import BuildMethod
from ..shared.config import BuildConfig
from .ant import AntBackend
from .base import BuildBackend
from .gradle import GradleBackend
from .none import NoBuildBackend


def get_backend(method: BuildMethod, config: BuildConfig) -> BuildBackend:
    """Instantiate the backend for a build method."""
    match BuildMethod(method):
        case BuildMethod.ANT:
            return AntBackend(config)
        case BuildMethod.GRADLE:
            return GradleBackend(config)
        case BuildMethod.NONE:
            return NoBuildBackend(config)


__all__ = [
    "AntBackend",
    "BuildBackend",
    "GradleBackend",
    "NoBuildBackend",
    "get_backend",
]
