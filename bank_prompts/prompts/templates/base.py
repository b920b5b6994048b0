"""
Base class for banking prompt templates.

Provides the BankingTemplate abstract base class and the TemplateError
raised by the template catalog.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import fields
from typing import ClassVar

from ..builder import PromptBuilder


logger = logging.getLogger(__name__)


class TemplateError(Exception):
    """Raised when a template cannot be looked up or instantiated."""


class BankingTemplate(ABC):
    """Abstract base class for banking prompt templates.

    A template is a named, parameterized skeleton. Its parameters are the
    dataclass fields of the concrete subclass and are interpolated into
    fixed text when the template is expanded.

    Class attributes:
        slug: Unique catalog identifier (lowercase, hyphenated).
        name: Human-readable display name.
    """

    slug: ClassVar[str]
    name: ClassVar[str]

    @classmethod
    def parameters(cls) -> tuple[str, ...]:
        """Names of the parameters this template takes, in declaration order."""
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    @abstractmethod
    def _expand(self, builder: PromptBuilder) -> PromptBuilder:
        """Append this template's skeleton sections to `builder`."""
        ...

    @abstractmethod
    def description(self) -> str:
        """One-line summary of what this template does."""
        ...

    def to_builder(self) -> PromptBuilder:
        """Create a pre-configured prompt builder.

        The same template with the same parameters always yields a builder
        with the same sections. The caller may keep appending sections
        before calling build().

        Returns:
            A new PromptBuilder populated with the template skeleton.
        """
        logger.debug(f"Expanding template '{self.slug}'")
        return self._expand(PromptBuilder())
