"""Domain value types and enums for lexicon-kit."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from lexicon_kit.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ExpressionGroup(str, Enum):
    """Common classification tags for expressions.

    Any non-empty string is a valid group; these are the usual ones.
    """

    WORD = "Word"
    PHRASE = "Phrase"
    QUESTION = "Question"


class ValidationSeverity(str, Enum):
    """Severity level for validation results."""

    ERROR = "ERROR"
    WARNING = "WARNING"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class Language:
    """The name of a language, distinguishing vocabularies."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError("Language name must be a non-empty string")

    @classmethod
    def of(cls, name: str) -> Language | None:
        """Create a language, or return None for an empty or non-string name."""
        if not isinstance(name, str) or not name:
            return None
        return cls(name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, order=True)
class Expression:
    """A word or phrase bound to a language and a classification group.

    Expressions order by text, then language, then group. The context is a
    display note only and takes no part in equality, hashing or ordering.
    """

    text: str
    language: Language
    group: str
    context: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise ValidationError("Expression text must be a non-empty string")
        if not isinstance(self.language, Language):
            raise ValidationError(
                f"Expression language must be a Language, got {self.language!r}"
            )
        if isinstance(self.group, ExpressionGroup):
            object.__setattr__(self, "group", self.group.value)
        if not isinstance(self.group, str) or not self.group:
            raise ValidationError("Expression group must be a non-empty string")
        if self.context is None:
            object.__setattr__(self, "context", "")

    @classmethod
    def of(
        cls,
        text: str,
        language: Language | None,
        group: str,
        context: str = "",
    ) -> Expression | None:
        """Create an expression, or return None if any part is invalid."""
        if not isinstance(text, str) or not text:
            return None
        if isinstance(group, ExpressionGroup):
            group = group.value
        if not isinstance(group, str) or not group:
            return None
        if not isinstance(language, Language):
            return None
        if context is not None and not isinstance(context, str):
            return None
        return cls(text, language, group, context or "")

    def with_group(self, group: str) -> Expression:
        return replace(self, group=group)

    def with_language(self, language: Language) -> Expression:
        return replace(self, language=language)

    def __str__(self) -> str:
        if self.context:
            return f"{self.text} ({self.context})"
        return self.text


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """A single validation finding (error or warning)."""

    rule_id: str
    severity: str
    entity_type: str
    entity_id: str
    message: str
    details: dict[str, Any] | None
