"""
PromptBuilder - fluent accumulator for prompt sections.

Provides the PromptBuilder class used directly by callers and returned
by banking templates.
"""

import logging

from .prompt import Prompt
from .sections import Context, Example, Goal, Output, Role, Section, Step


logger = logging.getLogger(__name__)


class PromptBuilder:
    """Builds prompts using a fluent API.

    Every append method adds exactly one section and returns the same
    builder, so calls can be chained. Nothing is validated: empty strings
    are accepted and appends never fail.

    A builder has a single owner. Do not share one instance between call
    sites, and treat it as spent once build() has been called; the Prompt
    returned by build() is a snapshot and is not affected by later appends.

    Example:
        prompt = (
            PromptBuilder()
            .goal("Evaluate loan application")
            .role("Credit Analyst")
            .step("Review credit score and history")
            .step("Analyze income and debt ratios")
            .output("Approval recommendation with terms")
            .build()
        )
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._sections: list[Section] = []

    def add(self, section: Section) -> "PromptBuilder":
        """Append an already constructed section.

        Args:
            section: The section to append.

        Returns:
            This builder.
        """
        self._sections.append(section)
        logger.debug(f"Appended {section.kind} section ({len(self._sections)} total)")
        return self

    def goal(self, text: str) -> "PromptBuilder":
        """Add a goal section."""
        return self.add(Goal(text))

    def context(self, text: str) -> "PromptBuilder":
        """Add a context section."""
        return self.add(Context(text))

    def role(self, text: str) -> "PromptBuilder":
        """Add a role section."""
        return self.add(Role(text))

    def step(self, text: str) -> "PromptBuilder":
        """Add a step section."""
        return self.add(Step(text))

    def steps(self, *texts: str) -> "PromptBuilder":
        """Add one step section per argument, in order."""
        for text in texts:
            self.step(text)
        return self

    def example(self, user: str, assistant: str) -> "PromptBuilder":
        """Add an example exchange.

        Args:
            user: What the user says.
            assistant: The expected assistant reply.
        """
        return self.add(Example(user, assistant))

    def output(self, text: str) -> "PromptBuilder":
        """Add an output format section."""
        return self.add(Output(text))

    def copy(self) -> "PromptBuilder":
        """Return an independent builder holding the same sections."""
        clone = PromptBuilder()
        clone._sections = list(self._sections)
        return clone

    def build(self) -> Prompt:
        """Finish building and return the prompt.

        Returns:
            An immutable Prompt with the sections appended so far.
        """
        logger.debug(f"Building prompt with {len(self._sections)} sections")
        return Prompt(tuple(self._sections))

    def __len__(self) -> int:
        """Return the number of appended sections."""
        return len(self._sections)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sections={len(self._sections)})"
