"""Built-in instructions sent to the vision model with each image."""

from __future__ import annotations

import enum
from typing import Dict, Optional


class InstructionKind(str, enum.Enum):
    GENERIC = "generic"
    PHOTOSHOP_LAYER = "photoshop-layer"
    PHOTOGRAPH_CRITIQUE = "photograph-critique"
    CUSTOM = "custom"


GENERIC_INSTRUCTION = """Analyze this image and provide a detailed description. Focus on:
1. Main subjects or objects in the image
2. Notable details and characteristics
3. Colors, textures, and visual elements
4. Spatial relationships between elements
5. Overall context or setting
6. Any text visible in the image
7. Mood or atmosphere if applicable

Be objective and thorough in your description, noting both obvious elements and subtle details that might be useful. If there's uncertainty about any element, acknowledge it.

Provide your response in clear, concise language that would be useful for someone who cannot see the image."""

PHOTOSHOP_LAYER_INSTRUCTION = """Analyze this Photoshop layer for design work. Describe:

1. The specific content or elements visible (objects, shapes, text, graphics)
2. Whether this appears to be a full image or an isolated element
3. Colors and predominant tones if any
4. Visual style or artistic appearance
5. Resolution/quality assessment
6. Any transparency or special effects visible
7. Potential purpose or usage in a composition
8. Suggestions for layer naming based on content

Focus on details relevant for a graphic designer working with layer composition, color theory, and visual hierarchy."""

PHOTOGRAPH_CRITIQUE_INSTRUCTION = """Analyze this photograph from your perspective as a visual critic, considering:

- What do you notice first? What draws your eye?
- Technical aspects that contribute to the image's effectiveness
- Creative choices that reveal the photographer's intent or vision
- The story or emotional resonance of the image
- How the photograph fits within its genre or breaks conventions
- What makes this image successful, compelling, or noteworthy

Offer insights that would interest both photographers and viewers who appreciate photography as an art form."""

INSTRUCTIONS: Dict[InstructionKind, str] = {
    InstructionKind.GENERIC: GENERIC_INSTRUCTION,
    InstructionKind.PHOTOSHOP_LAYER: PHOTOSHOP_LAYER_INSTRUCTION,
    InstructionKind.PHOTOGRAPH_CRITIQUE: PHOTOGRAPH_CRITIQUE_INSTRUCTION,
}


def instruction_for(kind: InstructionKind, prompt: Optional[str] = None) -> str:
    """Return the instruction text for ``kind``.

    ``CUSTOM`` requires a non-empty ``prompt``; for the built-in kinds a
    ``prompt`` is ignored.
    """

    if kind is InstructionKind.CUSTOM:
        if not prompt or not prompt.strip():
            raise ValueError("A custom instruction requires a non-empty prompt")
        return prompt
    return INSTRUCTIONS[kind]
