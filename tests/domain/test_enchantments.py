"""Unit tests for the packed enchantment string codec."""
import pytest

from armory.domain.catalog import LookupTables
from armory.domain.enchantments import gems_of, parse_enchantments, plain_enchantments_of


class TestParseEnchantments:
    def test_zero_tokens_dropped(self):
        assert parse_enchantments("0 0 3789 0") == [3789]

    def test_blank_string(self):
        assert parse_enchantments("  ") == []

    def test_empty_string(self):
        assert parse_enchantments("") == []

    def test_non_numeric_tokens_dropped(self):
        assert parse_enchantments("12 abc 34") == [12, 34]

    def test_only_plain_ascii_integers_parse(self):
        assert parse_enchantments("1_000 +5 \u0663 12abc -7") == [-7]

    def test_order_and_duplicates_preserved(self):
        assert parse_enchantments("5 3 5 0 1") == [5, 3, 5, 1]

    def test_surrounding_whitespace_trimmed(self):
        assert parse_enchantments("  7 0 8  ") == [7, 8]

    def test_double_space_yields_no_token(self):
        assert parse_enchantments("7  8") == [7, 8]

    def test_full_legacy_string(self):
        raw = "3789 0 0 0 0 0 3520 0 0 3520 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 "
        assert parse_enchantments(raw) == [3789, 3520, 3520]


@pytest.fixture
def gem_tables():
    return LookupTables(
        gem_items={24026},
        enchant_src_items={3789: 24026, 3790: 0, 2673: 0},
        socket_bonuses={100: 3790},
    )


class TestGemsOf:
    def test_gem_sourced_enchant_maps_to_gem_item(self, gem_tables):
        assert gems_of(100, "3789", gem_tables) == [24026]

    def test_plain_enchant_is_not_a_gem(self, gem_tables):
        assert gems_of(100, "2673", gem_tables) == []

    def test_unknown_enchant_ignored(self, gem_tables):
        assert gems_of(100, "9999", gem_tables) == []

    def test_source_item_not_a_gem(self):
        tables = LookupTables(enchant_src_items={3789: 24026})
        assert gems_of(100, "3789", tables) == []

    def test_gems_in_slot_order(self, gem_tables):
        assert gems_of(100, "0 0 3789 0 3789", gem_tables) == [24026, 24026]


class TestPlainEnchantmentsOf:
    def test_gem_enchant_excluded(self, gem_tables):
        assert plain_enchantments_of(100, "3789", gem_tables) == []

    def test_socket_bonus_excluded(self, gem_tables):
        assert plain_enchantments_of(100, "2673 0 3790", gem_tables) == [2673]

    def test_socket_bonus_only_applies_to_its_item(self, gem_tables):
        assert plain_enchantments_of(555, "2673 0 3790", gem_tables) == [2673, 3790]

    def test_unknown_enchant_dropped(self, gem_tables):
        assert plain_enchantments_of(100, "9999 2673", gem_tables) == [2673]

    def test_classification_is_exclusive(self, gem_tables):
        raw = "2673 3789 3790 9999"
        gems = gems_of(100, raw, gem_tables)
        plain = plain_enchantments_of(100, raw, gem_tables)
        assert gems == [24026]
        assert plain == [2673]
