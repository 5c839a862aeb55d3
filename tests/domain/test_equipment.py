"""Unit tests for equipment annotation and model viewer filtering."""
from armory.domain.enums import CharacterClass, EquipmentSlot
from armory.domain.equipment import (
    annotate_equipment, model_viewer_items, resolve_equipment,
)
from tests.conftest import make_row


class TestModelViewerItems:
    def test_visible_item_emits_inventory_type_and_display(self, tables):
        rows = [make_row(slot=EquipmentSlot.HEAD, item_entry=100)]
        assert model_viewer_items(rows, CharacterClass.WARRIOR, tables) == [(1, 5000)]

    def test_ranged_hidden_for_non_hunter(self, tables):
        rows = [make_row(slot=EquipmentSlot.RANGED, item_entry=101)]
        assert model_viewer_items(rows, CharacterClass.WARRIOR, tables) == []

    def test_ranged_shown_for_hunter(self, tables):
        rows = [make_row(slot=EquipmentSlot.RANGED, item_entry=101)]
        assert model_viewer_items(rows, CharacterClass.HUNTER, tables) == [(15, 5001)]

    def test_neck_fingers_trinkets_never_shown(self, tables):
        rows = [
            make_row(slot=slot, item_entry=102)
            for slot in (EquipmentSlot.NECK, EquipmentSlot.FINGER1, EquipmentSlot.FINGER2,
                         EquipmentSlot.TRINKET1, EquipmentSlot.TRINKET2)
        ]
        assert model_viewer_items(rows, CharacterClass.HUNTER, tables) == []

    def test_guild_tabard_excluded(self, tables):
        rows = [make_row(slot=EquipmentSlot.TABARD, item_entry=5976)]
        assert model_viewer_items(rows, CharacterClass.WARRIOR, tables) == []

    def test_item_without_appearance_skipped(self, tables):
        rows = [make_row(slot=EquipmentSlot.CHEST, item_entry=103)]
        assert model_viewer_items(rows, CharacterClass.WARRIOR, tables) == []

    def test_order_follows_rows(self, tables):
        rows = [
            make_row(slot=EquipmentSlot.HEAD, item_entry=100),
            make_row(slot=EquipmentSlot.NECK, item_entry=102),
            make_row(slot=EquipmentSlot.OFF_HAND, item_entry=102),
        ]
        assert model_viewer_items(rows, CharacterClass.WARRIOR, tables) == [(1, 5000), (11, 5002)]


class TestAnnotateEquipment:
    def test_entry_fields(self, tables):
        rows = [make_row(slot=0, item_entry=100, enchantments="2673 0 3789 0 3790",
                         flags=1, random_property_id=7)]
        [entry] = annotate_equipment(rows, tables)
        assert entry == {
            "slot": 0,
            "itemEntry": 100,
            "flags": 1,
            "randomPropertyId": 7,
            "icon": 9100,
            "gems": [24026],
            "enchantments": [2673],
        }

    def test_icon_omitted_when_unknown(self, tables):
        [entry] = annotate_equipment([make_row(slot=1, item_entry=102)], tables)
        assert "icon" not in entry
        assert entry["gems"] == []
        assert entry["enchantments"] == []

    def test_invisible_slots_still_listed(self, tables):
        rows = [make_row(slot=s, item_entry=102) for s in range(19)]
        assert [e["slot"] for e in annotate_equipment(rows, tables)] == list(range(19))


class TestResolveEquipment:
    def test_bag_slots_excluded(self, tables):
        rows = [make_row(slot=0, item_entry=100), make_row(slot=23, item_entry=102)]
        equipment, model_items = resolve_equipment(rows, CharacterClass.WARRIOR, tables)
        assert [e["slot"] for e in equipment] == [0]
        assert model_items == [(1, 5000)]

    def test_deterministic(self, tables):
        rows = [make_row(slot=0, item_entry=100, enchantments="3789"),
                make_row(slot=17, item_entry=101)]
        first = resolve_equipment(rows, CharacterClass.HUNTER, tables)
        second = resolve_equipment(rows, CharacterClass.HUNTER, tables)
        assert first == second
