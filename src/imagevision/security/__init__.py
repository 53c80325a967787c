"""Filesystem confinement for image requests."""

from .paths import DenialReason, PathAuthorizer, PathCheckResult, authorize

__all__ = [
    "DenialReason",
    "PathAuthorizer",
    "PathCheckResult",
    "authorize",
]
