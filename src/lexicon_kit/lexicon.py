"""Lexicon: a registry of entries and the transitive translation query."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import NamedTuple

from lexicon_kit.entry import Entry
from lexicon_kit.models import Expression, Language
from lexicon_kit.synoset import Synoset

logger = logging.getLogger(__name__)


class _Chain(NamedTuple):
    """A source expression and the current end of its translation chain."""

    source: Expression
    hop: Expression
    finished: bool
    used: frozenset[Entry]


def _carve(entries: set[Entry], predicate: Callable[[Entry], bool]) -> set[Entry]:
    """Remove and return the entries matching ``predicate``."""
    carved = {entry for entry in entries if predicate(entry)}
    entries -= carved
    return carved


def _flip_all(entries: Iterable[Entry]) -> set[Entry]:
    flipped: set[Entry] = set()
    for entry in entries:
        flipped |= entry.flipped()
    return flipped


def _step(
    chain: _Chain,
    pool: set[Entry],
    destination: Language,
) -> list[_Chain]:
    """Advance an unfinished chain by one entry.

    Returns no chains if nothing unused in ``pool`` contains the hop.
    """
    associated = [
        entry for entry in pool
        if entry not in chain.used and chain.hop in entry
    ]
    if not associated:
        return []

    used = chain.used.union(associated)
    extended: list[_Chain] = []
    for entry in associated:
        if entry.title == chain.hop:
            candidates: Iterable[Expression] = entry.translations
        else:
            candidates = (entry.title,)
        for candidate in candidates:
            extended.append(_Chain(
                source=chain.source,
                hop=candidate,
                finished=candidate.language == destination,
                used=used,
            ))
    return extended


class Lexicon:
    """A set of entries that can be queried for any pair of languages.

    Entries are added and removed whole. Queries work on a snapshot of the
    stored entries and never modify them.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._lock = threading.RLock()
        self._storage: set[Entry] = {entry.copy() for entry in entries}

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def insert(self, entry: Entry) -> bool:
        """Add a copy of ``entry``. Returns False if an equal entry exists."""
        with self._lock:
            if entry in self._storage:
                return False
            self._storage.add(entry.copy())
            return True

    def remove(self, entry: Entry) -> bool:
        """Remove the entry equal to ``entry``. Returns False if absent."""
        with self._lock:
            if entry not in self._storage:
                return False
            self._storage.discard(entry)
            return True

    def _snapshot(self) -> set[Entry]:
        """Return the set of stored entries, detached from storage.

        The entries themselves are shared; callers must not modify them.
        """
        with self._lock:
            return set(self._storage)

    def languages(self) -> set[Language]:
        """Return every language used by a stored entry."""
        found: set[Language] = set()
        for entry in self._snapshot():
            found.update(entry.languages)
        return found

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def __iter__(self) -> Iterator[Entry]:
        return iter(sorted(entry.copy() for entry in self._snapshot()))

    def __contains__(self, entry: object) -> bool:
        with self._lock:
            return entry in self._storage

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} entries)"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def entries(
        self,
        title: Language,
        translations: Language,
        *,
        max_rounds: int | None = None,
    ) -> list[Entry]:
        """Return all entries constructable for the given languages.

        Stored entries of the requested pair are returned as is, and those of
        the reversed pair are flipped. The rest are chained through
        intermediate languages: every stored path from an expression in
        ``title`` to expressions in ``translations`` contributes, and the
        reached expressions are merged into one entry per source expression.

        Every entry matched in a round counts as used for all chains grown
        from it, so a path that needs an entry a sibling branch already
        matched is not found, and swapping the languages can give a
        different set of pairs.

        Args:
            title: Language of the returned entries' titles.
            translations: Language of the returned entries' translations.
            max_rounds: Optional cap on chain expansion rounds. Chains still
                unfinished when it is hit are discarded.

        Returns:
            A sorted list of unique entries.
        """
        remaining = self._snapshot()

        if title == translations:
            return sorted(
                e.copy() for e in remaining if e.languages == (title, title)
            )

        complete = _carve(remaining, lambda e: e.languages == (title, translations))
        complete |= _flip_all(
            _carve(remaining, lambda e: e.languages == (translations, title))
        )

        incomplete = _carve(remaining, lambda e: e.title.language == title)
        incomplete |= _flip_all(
            _carve(remaining, lambda e: e.translations.language == title)
        )

        chains = {
            _Chain(entry.title, hop, False, frozenset())
            for entry in incomplete
            for hop in entry.translations
        }
        logger.debug(
            f"Query {title} -> {translations}: {len(complete)} direct entries, "
            f"{len(chains)} chains to expand over {len(remaining)} entries"
        )

        rounds = 0
        while any(not chain.finished for chain in chains):
            if max_rounds is not None and rounds >= max_rounds:
                unfinished = sum(1 for chain in chains if not chain.finished)
                logger.warning(
                    f"Query {title} -> {translations} stopped after {rounds} "
                    f"rounds; discarding {unfinished} unfinished chains"
                )
                chains = {chain for chain in chains if chain.finished}
                break
            rounds += 1

            expanded: set[_Chain] = set()
            dropped = 0
            for chain in chains:
                if chain.finished:
                    expanded.add(chain)
                    continue
                steps = _step(chain, remaining, translations)
                if not steps:
                    dropped += 1
                expanded.update(steps)
            chains = expanded
            logger.debug(
                f"Round {rounds}: {len(chains)} chains, {dropped} dropped"
            )

        synthesized: dict[Expression, Synoset] = {}
        for chain in chains:
            synoset = synthesized.setdefault(chain.source, Synoset(translations))
            synoset.insert(chain.hop)

        result = complete | {
            Entry(source, synoset) for source, synoset in synthesized.items()
        }
        return sorted(entry.copy() for entry in result)

    def page(
        self,
        title: Language,
        translations: Language,
        groups: Iterable[str] | None = None,
    ) -> list[Entry]:
        """Return the query result for the given languages, limited to groups.

        Only entries whose title belongs to one of ``groups`` are kept. An
        empty or missing ``groups`` keeps every entry.
        """
        wanted = {str(getattr(g, "value", g)) for g in groups or ()}
        result = self.entries(title, translations)
        if not wanted:
            return result
        return [entry for entry in result if entry.title.group in wanted]
