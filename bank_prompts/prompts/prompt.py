"""
Prompt - an immutable, ordered collection of sections.

Provides the Prompt class and the flat text rendering consumed by LLM clients.
"""

from dataclasses import dataclass
from itertools import groupby
from typing import Any

from .sections import (
    Context,
    Example,
    Goal,
    Output,
    PromptSection,
    Role,
    Section,
    Step,
)


# Bumped whenever the dict layout produced by Prompt.to_dict changes
PROMPT_FORMAT_VERSION = "1.0"


def _labeled(label: str, text: str) -> str:
    """Join a label and its text, without a trailing space for empty text."""
    return f"{label} {text}" if text else label


@dataclass(frozen=True)
class Prompt:
    """A finished prompt made of ordered sections.

    Prompts are created by PromptBuilder.build() and never change afterwards.
    `sections` preserves insertion order; rendering uses the canonical order
    Goal, Context, Role, Steps, Examples, Output, keeping insertion order
    among sections of the same kind.

    Example:
        prompt = (
            PromptBuilder()
            .goal("Assess credit risk")
            .step("Check FICO")
            .step("Check DTI")
            .output("Recommendation")
            .build()
        )
        print(prompt.render())
    """
    sections: tuple[Section, ...] = ()

    def __post_init__(self) -> None:
        # Always a tuple, even when built directly from a list
        object.__setattr__(self, "sections", tuple(self.sections))

    def ordered_sections(self) -> list[Section]:
        """Sections in render order.

        Returns:
            The sections sorted by their canonical order. The sort is stable,
            so sections of the same kind keep their insertion order.
        """
        return sorted(self.sections, key=lambda s: s.order)

    def count(self, section_type: type[PromptSection]) -> int:
        """Count sections of a given type."""
        return sum(1 for s in self.sections if type(s) is section_type)

    def is_empty(self) -> bool:
        """Whether the prompt has no sections."""
        return not self.sections

    def render(self) -> str:
        """Render the prompt to flat labeled text.

        Each Goal, Context, Role and Output section becomes one
        "<Label> <text>" block. Each step becomes its own "Step: <n>. <text>"
        block, numbered from 1 in insertion order. Each example becomes its
        own numbered block with both sides labeled. Blocks are separated by a
        blank line and an empty prompt renders to an empty string.

        Returns:
            The rendered prompt text.
        """
        blocks: list[str] = []

        for section_type, group in groupby(self.ordered_sections(), key=type):
            items = list(group)
            if section_type is Step:
                blocks.extend(
                    _labeled(f"{Step.label} {number}.", step.text)
                    for number, step in enumerate(items, start=1)
                )
            elif section_type is Example:
                for number, example in enumerate(items, start=1):
                    blocks.append("\n".join([
                        f"{Example.label} {number}:",
                        _labeled("User:", example.user),
                        _labeled("Assistant:", example.assistant),
                    ]))
            elif section_type in (Goal, Context, Role, Output):
                blocks.extend(_labeled(s.label, s.text) for s in items)
            else:
                raise TypeError(f"Unknown section type: {section_type.__name__}")

        return "\n\n".join(blocks)

    def to_dict(self) -> dict[str, Any]:
        """Convert the prompt to a dictionary for serialization.

        Returns:
            A dict with the format version and the sections in insertion order.
        """
        return {
            "version": PROMPT_FORMAT_VERSION,
            "sections": [s.to_dict() for s in self.sections],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Prompt":
        """Create a Prompt from a dictionary produced by to_dict().

        Raises:
            PromptFormatError: If the data does not describe a valid prompt.
        """
        from .serialization import prompt_from_dict

        return prompt_from_dict(data)

    def __len__(self) -> int:
        """Return the number of sections."""
        return len(self.sections)

    def __str__(self) -> str:
        return self.render()
