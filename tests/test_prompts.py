from __future__ import annotations

import pytest

from imagevision.prompts import INSTRUCTIONS, InstructionKind, instruction_for


def test_every_builtin_kind_has_a_template() -> None:
    builtin = {kind for kind in InstructionKind if kind is not InstructionKind.CUSTOM}

    assert set(INSTRUCTIONS) == builtin
    assert all(text.strip() for text in INSTRUCTIONS.values())


def test_builtin_kind_ignores_prompt() -> None:
    text = instruction_for(InstructionKind.PHOTOSHOP_LAYER, "ignored")

    assert text.startswith("Analyze this Photoshop layer")


def test_custom_kind_returns_prompt() -> None:
    assert instruction_for(InstructionKind.CUSTOM, "Describe the sky") == "Describe the sky"


@pytest.mark.parametrize("prompt", [None, "", "   "])
def test_custom_kind_requires_prompt(prompt) -> None:
    with pytest.raises(ValueError):
        instruction_for(InstructionKind.CUSTOM, prompt)
