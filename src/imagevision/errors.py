"""Exception hierarchy shared across Image Vision MCP."""

from __future__ import annotations


class ImageVisionError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(ImageVisionError):
    """Startup configuration is missing or invalid."""


class PathAccessError(ImageVisionError):
    """A requested path may not be read."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class PathNotFoundError(PathAccessError):
    def __init__(self, path: str):
        super().__init__(path, f"Path does not exist: {path}")


class PathOutsideRootsError(PathAccessError):
    def __init__(self, path: str):
        super().__init__(path, "Path not allowed: Not in permitted directories")


class ProviderError(ImageVisionError):
    """The vision model call failed (network, HTTP or model error)."""
