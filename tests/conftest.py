from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from imagevision.config import VisionConfig
from imagevision.errors import ProviderError


class FakeProvider:
    """Records every call and answers with a canned description."""

    def __init__(self, fail_on: Tuple[str, ...] = ()):
        self.calls: List[Tuple[Path, str]] = []
        self.fail_on = fail_on

    async def describe(self, path: Path, instruction: str) -> str:
        self.calls.append((path, instruction))
        if path.name in self.fail_on:
            raise ProviderError("model llava:34b not found")
        return f"a picture of {path.stem}"


@pytest.fixture
def image_root(tmp_path) -> Path:
    root = tmp_path / "images"
    root.mkdir()
    (root / "cat.png").write_bytes(b"\x89PNG fake")
    (root / "dog.jpg").write_bytes(b"\xff\xd8 fake")
    return root


@pytest.fixture
def outside_file(tmp_path) -> Path:
    secret = tmp_path / "secret.txt"
    secret.write_text("root:x:0:0", encoding="utf-8")
    return secret


@pytest.fixture
def config(image_root) -> VisionConfig:
    return VisionConfig(permitted_roots=(image_root,))


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
