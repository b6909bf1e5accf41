"""Tests for Synoset insertion, removal and merging."""

from lexicon_kit import Synoset


class TestConstruction:

    def test_filters_language_sorts_and_dedups(self, english, german, word):
        synoset = Synoset(english, [
            word("reside", english),
            word("live", english),
            word("leben", german),
            word("live", english),
        ])
        assert [e.text for e in synoset] == ["live", "reside"]
        assert synoset.language == english

    def test_from_expressions_infers_language(self, english, german, word):
        synoset = Synoset.from_expressions(
            [word("wohnen", german), word("live", english), word("leben", german)]
        )
        assert synoset.language == german
        assert [e.text for e in synoset] == ["leben", "wohnen"]

    def test_from_expressions_empty_without_language(self, english):
        assert Synoset.from_expressions([]) is None
        empty = Synoset.from_expressions([], language=english)
        assert empty is not None
        assert len(empty) == 0

    def test_of_single_expression(self, norwegian, word):
        synoset = Synoset.of(word("hei", norwegian))
        assert synoset.synonyms == (word("hei", norwegian),)


class TestInsert:

    def test_insert_keeps_order(self, english, word):
        synoset = Synoset(english, [word("a", english), word("c", english)])
        assert synoset.insert(word("b", english))
        assert [e.text for e in synoset] == ["a", "b", "c"]

    def test_insert_duplicate_fails(self, english, word):
        synoset = Synoset.of(word("much", english))
        assert not synoset.insert(word("much", english))
        assert len(synoset) == 1

    def test_insert_context_variant_is_duplicate(self, german, word):
        synoset = Synoset.of(word("Kiefer", german, "der"))
        assert not synoset.insert(word("Kiefer", german, "die"))
        assert not synoset.insert(word("Kiefer", german))
        assert len(synoset) == 1
        assert synoset[0].context == "der"

    def test_insert_other_language_is_rejected(self, english, german, word):
        synoset = Synoset.of(word("much", english))
        assert not synoset.insert(word("viel", german))
        assert word("viel", german) not in synoset

    def test_extend_counts_new_members(self, english, german, word):
        synoset = Synoset.of(word("many", english))
        added = synoset.extend([
            word("many", english), word("lots", english), word("viele", german),
        ])
        assert added == 1
        assert [e.text for e in synoset] == ["lots", "many"]

    def test_extend_with_synoset(self, english, word):
        synoset = Synoset.of(word("b", english))
        other = Synoset(english, [word("a", english), word("b", english)])
        assert synoset.extend(other) == 1
        assert [e.text for e in synoset] == ["a", "b"]


class TestRemove:

    def test_remove_present(self, english, word):
        synoset = Synoset(english, [word("live", english), word("reside", english)])
        assert synoset.remove(word("live", english))
        assert [e.text for e in synoset] == ["reside"]

    def test_remove_last_member_leaves_empty_synoset(self, english, word):
        synoset = Synoset.of(word("live", english))
        assert synoset.remove(word("live", english))
        assert len(synoset) == 0
        assert synoset.language == english

    def test_remove_absent(self, english, word):
        synoset = Synoset.of(word("live", english))
        assert not synoset.remove(word("reside", english))

    def test_clear_returns_previous_members(self, english, word):
        synoset = Synoset(english, [word("a", english), word("b", english)])
        removed = synoset.clear()
        assert [e.text for e in removed] == ["a", "b"]
        assert len(synoset) == 0


class TestMerge:

    def test_merge_interleaves_and_dedups(self, german, word):
        left = Synoset(german, [word("Auto", german), word("Wagen", german)])
        right = Synoset(german, [word("PKW", german), word("Wagen", german)])
        assert left.merge(right)
        assert [e.text for e in left] == ["Auto", "PKW", "Wagen"]

    def test_merge_is_idempotent(self, german, word):
        synoset = Synoset(german, [word("Auto", german), word("PKW", german)])
        copy = synoset.copy()
        assert synoset.merge(copy)
        assert synoset.merge(copy)
        assert synoset == copy

    def test_merge_into_empty(self, german, word):
        empty = Synoset(german)
        other = Synoset.of(word("Auto", german))
        assert empty.merge(other)
        assert empty == other

    def test_merge_other_language_is_rejected(self, english, german, word):
        synoset = Synoset.of(word("car", english))
        assert not synoset.merge(Synoset.of(word("Auto", german)))
        assert [e.text for e in synoset] == ["car"]

    def test_merging_does_not_modify_operands(self, german, word):
        left = Synoset.of(word("Auto", german))
        right = Synoset.of(word("PKW", german))
        merged = left.merging(right)
        assert [e.text for e in merged] == ["Auto", "PKW"]
        assert len(left) == 1
        assert len(right) == 1

    def test_merging_other_language_returns_none(self, english, german, word):
        assert Synoset.of(word("car", english)).merging(
            Synoset.of(word("Auto", german))
        ) is None


class TestEquality:

    def test_equal_synosets_hash_equal(self, english, word):
        a = Synoset(english, [word("x", english), word("y", english)])
        b = Synoset(english, [word("y", english), word("x", english)])
        assert a == b
        assert hash(a) == hash(b)

    def test_empty_synosets_of_different_languages_differ(self, english, german):
        assert Synoset(english) != Synoset(german)
