"""Synoset: a sorted set of synonymous expressions of one language."""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable, Iterator
from functools import total_ordering

from lexicon_kit.models import Expression, Language

logger = logging.getLogger(__name__)


def _merge_unique(
    left: list[Expression], right: list[Expression]
) -> list[Expression]:
    """Merge two sorted lists of unique expressions, dropping duplicates."""
    merged: list[Expression] = []
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if a == b:
            i += 1
        elif a < b:
            merged.append(a)
            i += 1
        else:
            merged.append(b)
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


@total_ordering
class Synoset:
    """An ordered set of expressions of the same language, similar in meaning.

    Members are unique and kept sorted at all times. Operations given an
    expression or synoset of another language are rejected and return False
    (or None) rather than raising.
    """

    __slots__ = ("_language", "_synonyms")

    def __init__(
        self,
        language: Language,
        expressions: Iterable[Expression] = (),
    ) -> None:
        self._language = language
        self._synonyms: list[Expression] = sorted(
            {e for e in expressions if e.language == language}
        )

    @classmethod
    def of(cls, expression: Expression) -> Synoset:
        """Create a synoset holding a single expression."""
        return cls(expression.language, (expression,))

    @classmethod
    def from_expressions(
        cls,
        expressions: Iterable[Expression],
        language: Language | None = None,
    ) -> Synoset | None:
        """Create a synoset, inferring the language from the first expression.

        Expressions of any other language are discarded. Returns None if no
        language is given and ``expressions`` is empty.
        """
        expressions = list(expressions)
        if language is None:
            if not expressions:
                return None
            language = expressions[0].language
        return cls(language, expressions)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def synonyms(self) -> tuple[Expression, ...]:
        return tuple(self._synonyms)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, expression: Expression) -> bool:
        """Insert ``expression`` in sort order.

        Returns True only if it was of this synoset's language and not
        already present.
        """
        if expression.language != self._language:
            logger.debug(
                f"Rejected {expression.language} expression {expression.text!r} "
                f"for {self._language} synoset"
            )
            return False
        index = bisect.bisect_left(self._synonyms, expression)
        if index < len(self._synonyms) and self._synonyms[index] == expression:
            return False
        self._synonyms.insert(index, expression)
        return True

    def extend(self, expressions: Iterable[Expression]) -> int:
        """Insert every expression of this language; return how many were new."""
        if isinstance(expressions, Synoset):
            if expressions.language != self._language:
                return 0
            before = len(self._synonyms)
            self._synonyms = _merge_unique(self._synonyms, expressions._synonyms)
            return len(self._synonyms) - before
        return sum(1 for e in list(expressions) if self.insert(e))

    def remove(self, expression: Expression) -> bool:
        """Remove ``expression`` if present. Empty synosets are valid."""
        index = bisect.bisect_left(self._synonyms, expression)
        if index < len(self._synonyms) and self._synonyms[index] == expression:
            del self._synonyms[index]
            return True
        return False

    def clear(self) -> list[Expression]:
        """Remove all members, returning them."""
        removed, self._synonyms = self._synonyms, []
        return removed

    def merge(self, other: Synoset) -> bool:
        """Merge ``other`` into this synoset. Both must share a language."""
        if other.language != self._language:
            logger.debug(
                f"Refused to merge {other.language} synoset into "
                f"{self._language} synoset"
            )
            return False
        if not other._synonyms:
            return True
        if not self._synonyms:
            self._synonyms = list(other._synonyms)
            return True
        self._synonyms = _merge_unique(self._synonyms, other._synonyms)
        return True

    def merging(self, other: Synoset) -> Synoset | None:
        """Return the merge of this synoset and ``other``, or None."""
        result = self.copy()
        if not result.merge(other):
            return None
        return result

    def copy(self) -> Synoset:
        clone = Synoset(self._language)
        clone._synonyms = list(self._synonyms)
        return clone

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._synonyms)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self._synonyms)

    def __getitem__(self, index: int) -> Expression:
        return self._synonyms[index]

    def __contains__(self, expression: object) -> bool:
        if not isinstance(expression, Expression):
            return False
        index = bisect.bisect_left(self._synonyms, expression)
        return index < len(self._synonyms) and self._synonyms[index] == expression

    def _key(self) -> tuple[Language, tuple[Expression, ...]]:
        return (self._language, tuple(self._synonyms))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Synoset):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Synoset) -> bool:
        if not isinstance(other, Synoset):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        members = ", ".join(e.text for e in self._synonyms)
        return f"Synoset({self._language.name}: [{members}])"
