"""Image description tools for MCP server."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, List

from ...dispatcher import DescriptionDispatcher, outcomes_as_dicts
from ...prompts import InstructionKind
from ..contracts import DescriptionRequest

if TYPE_CHECKING:
    from ..server import ImageVisionServer


def _media_paths(args: Dict[str, Any]) -> List[str]:
    paths = args.get("mediaPaths")
    if not isinstance(paths, list):
        raise ValueError("mediaPaths must be a list of file paths")
    if not all(isinstance(path, str) for path in paths):
        raise ValueError("mediaPaths must contain only strings")
    return paths


async def _describe(
    dispatcher: DescriptionDispatcher,
    request: DescriptionRequest,
    kind: InstructionKind,
) -> str:
    outcomes = await dispatcher.handle(request, kind)
    return json.dumps(outcomes_as_dicts(outcomes), indent=2)


async def get_image_description(dispatcher: DescriptionDispatcher, args: Dict[str, Any]) -> str:
    """Describe images with the generic accessibility-oriented instruction.

    Parameters
    ----------
    dispatcher:
        Batch dispatcher bound to the server configuration
    args:
        Tool arguments containing 'mediaPaths'

    Returns
    -------
    JSON string with one outcome per requested path
    """
    request = DescriptionRequest(media_paths=_media_paths(args))
    return await _describe(dispatcher, request, InstructionKind.GENERIC)


async def get_image_description_with_prompt(
    dispatcher: DescriptionDispatcher, args: Dict[str, Any]
) -> str:
    """Describe images following caller-supplied instructions.

    Parameters
    ----------
    dispatcher:
        Batch dispatcher bound to the server configuration
    args:
        Tool arguments containing 'mediaPaths' and 'prompt'

    Returns
    -------
    JSON string with one outcome per requested path
    """
    prompt = args.get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        raise ValueError("prompt must be a non-empty string")

    request = DescriptionRequest(media_paths=_media_paths(args), prompt=prompt)
    return await _describe(dispatcher, request, InstructionKind.CUSTOM)


async def get_photoshop_image_description(
    dispatcher: DescriptionDispatcher, args: Dict[str, Any]
) -> str:
    """Describe images as Photoshop compositions or exported layers."""
    request = DescriptionRequest(media_paths=_media_paths(args))
    return await _describe(dispatcher, request, InstructionKind.PHOTOSHOP_LAYER)


async def get_photograph_description(dispatcher: DescriptionDispatcher, args: Dict[str, Any]) -> str:
    """Critique photographs for composition, technique and storytelling."""
    request = DescriptionRequest(media_paths=_media_paths(args))
    return await _describe(dispatcher, request, InstructionKind.PHOTOGRAPH_CRITIQUE)


def _paths_schema(description: str) -> Dict[str, Any]:
    return {
        "type": "array",
        "items": {"type": "string"},
        "description": description,
    }


def register_tools(server: ImageVisionServer) -> None:
    """Register image description tools with the MCP server.

    Parameters
    ----------
    server:
        MCP server instance
    """
    server.register_tool(
        name="getImageDescriptionWithPrompt",
        description="Describe images using custom analysis instructions",
        input_schema={
            "type": "object",
            "properties": {
                "mediaPaths": _paths_schema(
                    "A list of absolute file paths to image files (JPG, PNG, etc.) to analyze. "
                    "Each path must point to an accessible image file that exists on the system."
                ),
                "prompt": {
                    "type": "string",
                    "description": (
                        "Custom instructions for analyzing the images. This prompt determines what "
                        "aspects of the image to focus on, what details to extract, and how the "
                        "description should be structured, e.g. color palette, composition, "
                        "technical aspects, emotional impact, or specific elements within the image."
                    ),
                },
            },
            "required": ["mediaPaths", "prompt"],
        },
        handler=get_image_description_with_prompt,
    )

    server.register_tool(
        name="getImageDescription",
        description="Describe images objectively and in detail, suitable for accessibility",
        input_schema={
            "type": "object",
            "properties": {
                "mediaPaths": _paths_schema(
                    "A list of absolute file paths to image files (JPG, PNG, etc.) for "
                    "comprehensive visual analysis. The analysis examines visual elements, "
                    "objects, colors, text, spatial relationships, context, and overall mood."
                ),
            },
            "required": ["mediaPaths"],
        },
        handler=get_image_description,
    )

    server.register_tool(
        name="getPhotoshopImageDescription",
        description="Analyze Photoshop compositions or layer exports for design work",
        input_schema={
            "type": "object",
            "properties": {
                "mediaPaths": _paths_schema(
                    "A list of absolute file paths to Photoshop images (PNG, JPG) or individual "
                    "layer exports (PNG) to analyze for layer composition, color schemes, and "
                    "design hierarchy."
                ),
            },
            "required": ["mediaPaths"],
        },
        handler=get_photoshop_image_description,
    )

    server.register_tool(
        name="getPhotographDescription",
        description="Critique photographs for composition, technique and storytelling",
        input_schema={
            "type": "object",
            "properties": {
                "mediaPaths": _paths_schema(
                    "A list of absolute file paths to photographs (JPG, PNG, RAW, etc.) for "
                    "technical and artistic evaluation of composition, technique, storytelling, "
                    "and creative intent."
                ),
            },
            "required": ["mediaPaths"],
        },
        handler=get_photograph_description,
    )
