"""
Prompt section types.

Provides the closed set of section value types that make up a prompt:
Goal, Context, Role, Step, Example and Output. Each type carries a kind
slug, a render label and a canonical sort order.
"""

from abc import ABC
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Union


class PromptSection(ABC):
    """Base class for all prompt sections.

    A section is a plain immutable value: it carries its payload and the
    class-level metadata needed to place and label it when a prompt is
    rendered. Sections have no behavior beyond that.

    Class attributes:
        kind: Stable identifier used for serialization (e.g. "goal").
        label: Label printed in front of the section when rendered.
        order: Canonical sort order (lower = earlier in the prompt).
    """

    kind: ClassVar[str]
    label: ClassVar[str]
    order: ClassVar[int]

    def to_dict(self) -> dict[str, Any]:
        """Convert the section to a dictionary for serialization.

        Returns:
            A dict with the section kind and its payload fields.
        """
        data: dict[str, Any] = {"kind": self.kind}
        for f in fields(self):  # type: ignore[arg-type]
            data[f.name] = getattr(self, f.name)
        return data


@dataclass(frozen=True)
class Goal(PromptSection):
    """The main goal or objective."""
    text: str

    kind: ClassVar[str] = "goal"
    label: ClassVar[str] = "Goal:"
    order: ClassVar[int] = 10


@dataclass(frozen=True)
class Context(PromptSection):
    """Background information the model should take into account."""
    text: str

    kind: ClassVar[str] = "context"
    label: ClassVar[str] = "Context:"
    order: ClassVar[int] = 20


@dataclass(frozen=True)
class Role(PromptSection):
    """The role or persona for the model."""
    text: str

    kind: ClassVar[str] = "role"
    label: ClassVar[str] = "Role:"
    order: ClassVar[int] = 30


@dataclass(frozen=True)
class Step(PromptSection):
    """One instruction; steps are numbered in insertion order."""
    text: str

    kind: ClassVar[str] = "step"
    label: ClassVar[str] = "Step:"
    order: ClassVar[int] = 40


@dataclass(frozen=True)
class Example(PromptSection):
    """A worked user/assistant exchange."""
    user: str
    assistant: str

    kind: ClassVar[str] = "example"
    label: ClassVar[str] = "Example"
    order: ClassVar[int] = 50


@dataclass(frozen=True)
class Output(PromptSection):
    """Desired output format."""
    text: str

    kind: ClassVar[str] = "output"
    label: ClassVar[str] = "Output:"
    order: ClassVar[int] = 60


Section = Union[Goal, Context, Role, Step, Example, Output]

# Kind slug -> section class, in canonical order
SECTION_TYPES: dict[str, type[PromptSection]] = {
    cls.kind: cls for cls in (Goal, Context, Role, Step, Example, Output)
}
