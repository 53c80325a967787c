"""MCP contracts and helpers."""

from .contracts import DescriptionOutcome, DescriptionRequest

__all__ = [
    "DescriptionOutcome",
    "DescriptionRequest",
]
