"""Read-only resource listing the permitted directories."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ...config import VisionConfig

if TYPE_CHECKING:
    from ..server import ImageVisionServer

ALLOWED_DIRECTORIES_URI = "mcp-utils://getAllowedDirectories"


def get_allowed_directories(config: VisionConfig) -> str:
    """Return the permitted roots, as configured, as a JSON array."""
    return json.dumps(config.roots_as_strings(), indent=2)


def register_resources(server: ImageVisionServer) -> None:
    server.register_resource(
        uri=ALLOWED_DIRECTORIES_URI,
        name="getAllowedDirectories",
        description="Directories from which image files may be described",
        reader=get_allowed_directories,
    )
