"""Ollama-backed description provider."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from ollama import AsyncClient, Image

from .config import VisionConfig
from .errors import ProviderError

logger = logging.getLogger(__name__)


class DescriptionProvider(Protocol):
    """Anything that turns an image path plus instruction into text."""

    async def describe(self, path: Path, instruction: str) -> str:
        ...


class OllamaDescriptionProvider:
    """Send one single-turn chat per image to an Ollama vision model."""

    def __init__(self, config: VisionConfig, client: AsyncClient | None = None):
        self.host = config.host
        self.model = config.model
        self.client = client or AsyncClient(host=config.host, timeout=config.timeout)

    async def describe(self, path: Path, instruction: str) -> str:
        logger.debug("Requesting description of %s from %s (%s)", path, self.host, self.model)
        try:
            response = await self.client.chat(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": instruction,
                        "images": [Image(value=Path(path))],
                    }
                ],
            )
        except Exception as exc:
            raise ProviderError(str(exc) or "Unknown error occurred") from exc

        content = response.message.content
        if content is None:
            raise ProviderError(f"Model {self.model} returned an empty response")
        return content
