"""
Tests for the diacritic tables.

Covers the built-in tables, DiacriticMap validation, merging,
the name registry and JSON save/load.
"""

import json
import re

import pytest

from skcz_diacritics import DiacriticMapError
from skcz_diacritics.maps import (
    CZECH,
    SLOVAK,
    SLOVAK_CZECH,
    TABLES,
    DiacriticMap,
    check_entry,
    get_map,
)


# =============================================================================
# Built-in Tables
# =============================================================================


class TestBuiltinTables:
    def test_slovak_entries(self):
        assert SLOVAK["a"] == "[a,á,ä]"
        assert SLOVAK["o"] == "[o,ó,ô]"
        assert SLOVAK["l"] == "[l,ľ,ĺ]"
        assert SLOVAK["r"] == "[r,ŕ]"

    def test_czech_entries(self):
        assert CZECH["e"] == "[e,é,ě]"
        assert CZECH["r"] == "[r,ř]"
        assert "l" not in CZECH

    def test_combined_entries(self):
        assert SLOVAK_CZECH["e"] == "[e,é,ě]"
        assert SLOVAK_CZECH["r"] == "[r,ŕ,ř]"
        assert SLOVAK_CZECH["a"] == "[a,á,ä]"

    def test_sizes(self):
        assert len(SLOVAK) == 14
        assert len(CZECH) == 13
        assert len(SLOVAK_CZECH) == 14

    def test_combined_is_merge_of_both(self):
        assert DiacriticMap.merge(SLOVAK, CZECH) == SLOVAK_CZECH

    def test_keys_are_single_lowercase_letters(self):
        for table in TABLES.values():
            for key in table:
                assert len(key) == 1
                assert key.islower()

    @pytest.mark.parametrize("table", [SLOVAK, CZECH, SLOVAK_CZECH])
    def test_every_variant_matches_fragment(self, table):
        for key in table:
            for letter in table.variants(key):
                assert re.fullmatch(table[key], letter)

    def test_names(self):
        assert SLOVAK.name == "slovak"
        assert CZECH.name == "czech"
        assert SLOVAK_CZECH.name == "slovak_czech"

    def test_immutable(self):
        with pytest.raises(TypeError):
            SLOVAK["a"] = "[a]"

    def test_hashable(self):
        assert hash(SLOVAK) == hash(DiacriticMap(dict(SLOVAK), name="copy"))

    def test_repr(self):
        assert repr(CZECH) == "DiacriticMap(name='czech', letters='aeiouycdnrstz')"


# =============================================================================
# Validation
# =============================================================================


class TestValidation:
    def test_valid_entry(self):
        check_entry("a", "[a,á]")

    @pytest.mark.parametrize("key", ["A", "ab", "", "1", 5])
    def test_bad_key(self, key):
        with pytest.raises(DiacriticMapError):
            DiacriticMap({key: "[a,á]"})

    def test_unbalanced_bracket(self):
        with pytest.raises(DiacriticMapError) as exc_info:
            DiacriticMap({"a": "[a,á"})
        assert exc_info.value.key == "a"
        assert exc_info.value.fragment == "[a,á"
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_fragment_broken_only_when_embedded(self):
        # Compiles alone, but a repeated named group does not
        with pytest.raises(DiacriticMapError) as exc_info:
            DiacriticMap({"a": "(?P<v>[a,á])"})
        assert exc_info.value.key == "a"
        assert exc_info.value.fragment == "(?P<v>[a,á])"
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_empty_fragment(self):
        with pytest.raises(DiacriticMapError) as exc_info:
            DiacriticMap({"a": ""})
        assert exc_info.value.key == "a"

    def test_fragment_must_match_base_letter(self):
        with pytest.raises(DiacriticMapError) as exc_info:
            DiacriticMap({"a": "[á,ä]"})
        assert exc_info.value.fragment == "[á,ä]"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            DiacriticMap({"e": "(e"})

    def test_input_mapping_is_copied(self):
        patterns = {"a": "[a,á]"}
        table = DiacriticMap(patterns)
        patterns["a"] = "[a]"
        assert table["a"] == "[a,á]"

    def test_empty_table(self):
        table = DiacriticMap({})
        assert len(table) == 0
        assert table.trigger_pattern is None


# =============================================================================
# Construction Helpers
# =============================================================================


class TestFromVariants:
    def test_string_variants(self):
        table = DiacriticMap.from_variants({"a": "áä", "r": "ŕř"}, name="demo")
        assert table["a"] == "[a,á,ä]"
        assert table["r"] == "[r,ŕ,ř]"
        assert table.name == "demo"

    def test_list_variants(self):
        table = DiacriticMap.from_variants({"e": ["é", "ě"]})
        assert table["e"] == "[e,é,ě]"

    def test_duplicates_dropped(self):
        table = DiacriticMap.from_variants({"o": "oóóô"})
        assert table["o"] == "[o,ó,ô]"

    def test_no_variants(self):
        assert DiacriticMap.from_variants({"x": ""})["x"] == "[x]"

    def test_rejects_non_letters(self):
        with pytest.raises(DiacriticMapError) as exc_info:
            DiacriticMap.from_variants({"a": "á]"})
        assert exc_info.value.key == "a"

    def test_matches_builtin(self):
        table = DiacriticMap.from_variants({"a": "áä", "e": "é"})
        assert table["a"] == SLOVAK["a"]
        assert table["e"] == SLOVAK["e"]


class TestVariantsAndMerge:
    def test_variants(self):
        assert SLOVAK.variants("o") == ["o", "ó", "ô"]

    def test_variants_missing_key(self):
        with pytest.raises(KeyError):
            CZECH.variants("l")

    def test_variants_not_a_class(self):
        table = DiacriticMap({"a": "(?:a|á)"})
        with pytest.raises(ValueError):
            table.variants("a")

    def test_merge_keeps_first_seen_order(self):
        merged = DiacriticMap.merge(CZECH, SLOVAK)
        assert merged["r"] == "[r,ř,ŕ]"
        assert merged.name == "merged"

    def test_merge_unions_keys(self):
        merged = DiacriticMap.merge(
            DiacriticMap.from_variants({"a": "á"}),
            DiacriticMap.from_variants({"l": "ľ"}),
            name="mix",
        )
        assert dict(merged) == {"a": "[a,á]", "l": "[l,ľ]"}


# =============================================================================
# Registry
# =============================================================================


class TestGetMap:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("slovak", SLOVAK),
            ("sk", SLOVAK),
            ("czech", CZECH),
            ("cs", CZECH),
            ("CZ", CZECH),
            ("slovak_czech", SLOVAK_CZECH),
            ("sk-cz", SLOVAK_CZECH),
        ],
    )
    def test_lookup(self, name, expected):
        assert get_map(name) is expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown diacritic table"):
            get_map("polish")


# =============================================================================
# Save / Load
# =============================================================================


class TestSaveLoad:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "tables" / "slovak.json"
        SLOVAK.save(path)
        loaded = DiacriticMap.load(path)
        assert loaded == SLOVAK
        assert loaded.name == "slovak"

    def test_file_is_readable_json(self, tmp_path):
        path = tmp_path / "czech.json"
        CZECH.save(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["patterns"]["r"] == "[r,ř]"

    def test_load_validates(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text(
            json.dumps({"name": "broken", "patterns": {"a": "[a,á"}}),
            encoding="utf-8",
        )
        with pytest.raises(DiacriticMapError) as exc_info:
            DiacriticMap.load(path)
        assert exc_info.value.key == "a"

    def test_name_defaults_to_file_stem(self, tmp_path):
        path = tmp_path / "mine.json"
        path.write_text(json.dumps({"patterns": {"a": "[a,á]"}}), encoding="utf-8")
        assert DiacriticMap.load(path).name == "mine"
