"""Validation rules for entries and lexicons."""

from __future__ import annotations

from collections import defaultdict

from lexicon_kit.entry import Entry
from lexicon_kit.lexicon import Lexicon
from lexicon_kit.models import Expression, Language, ValidationResult, ValidationSeverity


def _entry_id(entry: Entry) -> str:
    title = entry.title
    return f"{title.text}@{title.language}:{title.group}"


def validate_entry(entry: Entry) -> list[ValidationResult]:
    """Validate a single entry."""
    results: list[ValidationResult] = []
    results.extend(_val_ent_001(entry))
    results.extend(_val_ent_002(entry))
    return results


def validate_lexicon(lexicon: Lexicon) -> list[ValidationResult]:
    """Run all validation rules over every stored entry."""
    entries = list(lexicon)
    results: list[ValidationResult] = []
    for entry in entries:
        results.extend(validate_entry(entry))
    results.extend(_val_lex_001(entries))
    return results


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def _val_ent_001(entry: Entry) -> list[ValidationResult]:
    """LEX-ENT-001: Entry without translations."""
    if entry.translations:
        return []
    return [ValidationResult(
        rule_id="LEX-ENT-001",
        severity=ValidationSeverity.WARNING.value,
        entity_type="entry",
        entity_id=_entry_id(entry),
        message="Entry has no translations",
        details=None,
    )]


def _val_ent_002(entry: Entry) -> list[ValidationResult]:
    """LEX-ENT-002: Title and translations in the same language."""
    title_language, translations_language = entry.languages
    if title_language != translations_language:
        return []
    return [ValidationResult(
        rule_id="LEX-ENT-002",
        severity=ValidationSeverity.WARNING.value,
        entity_type="entry",
        entity_id=_entry_id(entry),
        message=f"Entry translates {title_language} into itself",
        details={"language": title_language.name},
    )]


def _val_lex_001(entries: list[Entry]) -> list[ValidationResult]:
    """LEX-LEX-001: Several entries for one title and language pair."""
    groups: dict[tuple[Expression, Language], list[Entry]] = defaultdict(list)
    for entry in entries:
        groups[(entry.title, entry.translations.language)].append(entry)

    results: list[ValidationResult] = []
    for (title, language), same in sorted(groups.items()):
        if len(same) < 2:
            continue
        results.append(ValidationResult(
            rule_id="LEX-LEX-001",
            severity=ValidationSeverity.WARNING.value,
            entity_type="entry",
            entity_id=_entry_id(same[0]),
            message=(
                f"{len(same)} entries translate {title.text!r} into "
                f"{language}; they could be merged"
            ),
            details={"count": len(same)},
        ))
    return results
