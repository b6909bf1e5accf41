"""Entry: one titled expression and its direct translations."""

from __future__ import annotations

from functools import total_ordering

from lexicon_kit.models import Expression, Language
from lexicon_kit.synoset import Synoset


@total_ordering
class Entry:
    """A title expression plus a synoset of its translations.

    Equality and hashing cover the title and the full set of translations,
    so inserting a translation changes an entry's identity. A ``Lexicon``
    therefore stores its own copies and never edits them in place.
    """

    __slots__ = ("_title", "_translations")

    def __init__(self, title: Expression, translations: Synoset) -> None:
        self._title = title
        self._translations = translations.copy()

    @classmethod
    def of(cls, title: Expression, *translations: Expression) -> Entry | None:
        """Build an entry from loose translations of one language.

        Returns None if no translations are given.
        """
        synoset = Synoset.from_expressions(translations)
        if synoset is None:
            return None
        return cls(title, synoset)

    @property
    def title(self) -> Expression:
        return self._title

    @property
    def translations(self) -> Synoset:
        return self._translations

    @property
    def languages(self) -> tuple[Language, Language]:
        """The (title, translations) language pair."""
        return (self._title.language, self._translations.language)

    def insert(self, expression: Expression) -> bool:
        return self._translations.insert(expression)

    def remove(self, expression: Expression) -> bool:
        return self._translations.remove(expression)

    def flipped(self) -> set[Entry]:
        """Swap the title with each translation in turn.

        Every translation becomes the title of a new entry whose only
        translation is the old title.
        """
        if not self._translations:
            return set()
        single = Synoset.of(self._title)
        return {Entry(translation, single) for translation in self._translations}

    def copy(self) -> Entry:
        return Entry(self._title, self._translations)

    def __contains__(self, expression: object) -> bool:
        return expression == self._title or expression in self._translations

    def _key(self) -> tuple[Expression, Synoset]:
        return (self._title, self._translations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Entry) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Entry({self._title.text!r} [{self._title.language}] -> {self._translations!r})"

    def __str__(self) -> str:
        translations = ", ".join(str(t) for t in self._translations)
        return f"{self._title}: {translations}"
