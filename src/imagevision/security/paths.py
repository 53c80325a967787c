"""Path confinement helpers for the permitted image directories."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from ..config import VisionConfig
from ..errors import PathAccessError, PathNotFoundError, PathOutsideRootsError

logger = logging.getLogger(__name__)


class DenialReason(str, enum.Enum):
    NOT_FOUND = "not_found"
    OUTSIDE_ROOTS = "outside_roots"


@dataclass(frozen=True, slots=True)
class PathCheckResult:
    path: Path
    reason: Optional[DenialReason] = None

    @property
    def allowed(self) -> bool:
        return self.reason is None


def _normalise(path: str | Path) -> Path:
    return Path(path).resolve()


def authorize(candidate: str | Path, permitted_roots: Iterable[str | Path]) -> PathCheckResult:
    """Decide whether ``candidate`` may be read.

    Existence is checked before containment, so a missing file is always
    reported as ``NOT_FOUND``. Containment compares whole path segments:
    a root of ``/a/b`` admits ``/a/b/c.png`` but not ``/a/bc/c.png``.
    Symlinks are resolved on both sides before comparing.
    """

    try:
        absolute = _normalise(candidate)
        exists = absolute.exists()
    except (OSError, ValueError, RuntimeError):
        # NUL bytes, over-long names and symlink loops cannot name a readable file
        return PathCheckResult(Path(candidate), DenialReason.NOT_FOUND)
    if not exists:
        return PathCheckResult(absolute, DenialReason.NOT_FOUND)

    for root in permitted_roots:
        if absolute.is_relative_to(_normalise(root)):
            return PathCheckResult(absolute)

    return PathCheckResult(absolute, DenialReason.OUTSIDE_ROOTS)


class PathAuthorizer:
    """Authorizer bound to the roots of a :class:`VisionConfig`."""

    def __init__(self, config: VisionConfig):
        self.config = config
        self._roots = config.resolved_roots()

    def check(self, candidate: str | Path) -> PathCheckResult:
        result = authorize(candidate, self._roots)
        if not result.allowed:
            logger.warning("Denied %s (%s)", candidate, result.reason.value)
        return result

    def ensure_allowed(self, candidate: str) -> Path:
        """Return the resolved path or raise the matching access error."""

        result = self.check(candidate)
        if result.reason is DenialReason.NOT_FOUND:
            raise PathNotFoundError(candidate)
        if result.reason is DenialReason.OUTSIDE_ROOTS:
            raise PathOutsideRootsError(candidate)
        return result.path

    def denial_message(self, error: PathAccessError) -> str:
        if self.config.uniform_denials:
            return "Path not allowed: Not in permitted directories or does not exist"
        return str(error)
