"""Run a batch of image paths through the authorizer and the provider."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .config import VisionConfig
from .errors import PathAccessError
from .mcp.contracts import DescriptionOutcome, DescriptionRequest
from .prompts import InstructionKind, instruction_for
from .provider import DescriptionProvider
from .security.paths import PathAuthorizer

logger = logging.getLogger(__name__)


class DescriptionDispatcher:
    """Describe images one at a time, collecting one outcome per path.

    Failures stay local to the path that caused them; the batch always
    yields as many outcomes as paths were requested, in request order.
    """

    def __init__(
        self,
        config: VisionConfig,
        provider: DescriptionProvider,
        authorizer: PathAuthorizer | None = None,
    ):
        self.config = config
        self.provider = provider
        self.authorizer = authorizer or PathAuthorizer(config)

    async def describe_one(self, path: str, instruction: str) -> DescriptionOutcome:
        try:
            resolved = self.authorizer.ensure_allowed(path)
        except PathAccessError as exc:
            return DescriptionOutcome.failed(path, self.authorizer.denial_message(exc))
        except Exception as exc:
            logger.error("Authorization of %r failed: %s", path, exc)
            return DescriptionOutcome.failed(path, str(exc))

        try:
            description = await self.provider.describe(resolved, instruction)
        except Exception as exc:
            logger.error("Description of %s failed: %s", path, exc)
            return DescriptionOutcome.failed(path, str(exc))
        return DescriptionOutcome.ok(path, description)

    async def describe_batch(
        self, paths: Iterable[str], instruction: str
    ) -> List[DescriptionOutcome]:
        outcomes = []
        for path in paths:
            outcomes.append(await self.describe_one(path, instruction))

        failures = sum(1 for outcome in outcomes if not outcome.success)
        logger.info("Described %d image(s), %d failed", len(outcomes), failures)
        return outcomes

    async def handle(
        self,
        request: DescriptionRequest,
        kind: InstructionKind = InstructionKind.GENERIC,
    ) -> List[DescriptionOutcome]:
        """Resolve the instruction for ``kind`` and describe every path.

        A request that carries a prompt but no explicit kind is treated as a
        custom instruction.
        """

        if request.prompt is not None and kind is InstructionKind.GENERIC:
            kind = InstructionKind.CUSTOM
        instruction = instruction_for(kind, request.prompt)
        return await self.describe_batch(request.media_paths, instruction)


def outcomes_as_dicts(outcomes: Iterable[DescriptionOutcome]) -> List[dict]:
    return [outcome.to_dict() for outcome in outcomes]
