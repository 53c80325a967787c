"""Startup configuration for the Image Vision MCP server."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from .errors import ConfigurationError

DEFAULT_HOST = "http://127.0.0.1:11434"
DEFAULT_MODEL = "llava:34b"


@dataclass(frozen=True, slots=True)
class VisionConfig:
    """Process-wide settings, fixed once the server has started.

    Attributes
    ----------
    permitted_roots:
        Directories under which images may be read. Kept in the order given
        on the command line. At least one is required.
    host:
        URL of the Ollama endpoint serving the vision model.
    model:
        Identifier of the vision model, e.g. ``llava:34b``.
    uniform_denials:
        Report missing paths and paths outside the roots with the same
        message so callers cannot probe which files exist on the host.
    timeout:
        Seconds to wait for a single model response. ``None`` waits forever.
    """

    permitted_roots: Tuple[Path, ...]
    host: str = DEFAULT_HOST
    model: str = DEFAULT_MODEL
    uniform_denials: bool = False
    timeout: float | None = None

    def __post_init__(self) -> None:
        roots = tuple(Path(root) for root in self.permitted_roots)
        if not roots:
            raise ConfigurationError("At least one permitted directory is required")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be a positive number of seconds")
        # frozen dataclass: normalise the field through object.__setattr__
        object.__setattr__(self, "permitted_roots", roots)

    @classmethod
    def from_paths(
        cls,
        permitted: Iterable[str | Path],
        host: str | None = None,
        model: str | None = None,
        **options,
    ) -> "VisionConfig":
        """Build a config, falling back to the defaults for empty values."""

        return cls(
            permitted_roots=tuple(Path(p) for p in permitted),
            host=host or DEFAULT_HOST,
            model=model or DEFAULT_MODEL,
            **options,
        )

    def resolved_roots(self) -> Tuple[Path, ...]:
        """Return the permitted roots as absolute, normalised paths."""

        return tuple(root.resolve() for root in self.permitted_roots)

    def roots_as_strings(self) -> list[str]:
        return [str(root) for root in self.permitted_roots]
