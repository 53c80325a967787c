"""Dataclasses describing the MCP request/response payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class DescriptionRequest:
    media_paths: List[str]
    prompt: Optional[str] = None


@dataclass(slots=True)
class DescriptionOutcome:
    path: str
    success: bool
    description: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, path: str, description: str) -> "DescriptionOutcome":
        return cls(path=path, success=True, description=description)

    @classmethod
    def failed(cls, path: str, error: str) -> "DescriptionOutcome":
        return cls(path=path, success=False, error=error or "Unknown error occurred")

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "path": self.path,
            "success": self.success,
            "description": self.description,
        }
        if not self.success:
            payload["error"] = self.error
        return payload
