"""Shared test fixtures for lexicon-kit."""

import pytest

from lexicon_kit import Entry, Expression, Language, Lexicon, Synoset


@pytest.fixture
def english():
    return Language("English")


@pytest.fixture
def german():
    return Language("German")


@pytest.fixture
def norwegian():
    return Language("Norwegian")


@pytest.fixture
def word():
    """Factory for 'Word' expressions."""
    def make(text, language, context=""):
        return Expression(text, language, "Word", context)
    return make


@pytest.fixture
def entry(word):
    """Factory for entries: entry(title, translation, ...)."""
    def make(title, *translations):
        return Entry(title, Synoset(translations[0].language, translations))
    return make


@pytest.fixture
def travel_lexicon(english, german, norwegian, word, entry):
    """English/German/Norwegian entries; no English-Norwegian entry is direct
    except through the flipped Norwegian 'hei'."""
    phrase = Expression("How are you doing?", english, "Phrase")
    hvordan = Expression("Hvordan går det?", norwegian, "Phrase")

    baum = word("Baum", german, "der")
    pkw = word("PKW", german, "der")
    viele = word("viele", german)
    leben = word("leben", german)

    entries = [
        entry(word("tree", english), baum),
        entry(word("car", english), word("Auto", german, "das"), pkw),
        entry(word("much", english), word("viel", german)),
        entry(word("many", english), viele),
        entry(word("live", english), leben, word("wohnen", german)),
        entry(word("hallo", german), word("hei", norwegian), hvordan),
        entry(baum, word("tre", norwegian, "et")),
        entry(pkw, word("bil", norwegian, "en")),
        entry(viele, word("mange", norwegian)),
        entry(leben, word("bor", norwegian), word("lever", norwegian)),
        entry(word("hei", norwegian), word("hello", english), phrase),
    ]
    return Lexicon(entries)
