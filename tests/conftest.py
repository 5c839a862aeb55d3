"""
Shared pytest fixtures for the ARMORY test suite.

Strategy:
- Domain tests: pure in-memory, zero I/O.
- Repository tests: throwaway SQLite databases through SQLAlchemy.
- API tests: FastAPI TestClient with in-memory fake repositories.
"""
import os
import pytest

os.environ.pop("WORLD_DATABASE_URL", None)
os.environ.pop("ARMORY_CONFIG", None)

from armory.domain.catalog import (
    GameDataCatalog, Item, ItemAppearance, ItemDisplayInfo,
    ItemModifiedAppearance, ItemRetail, LookupTables, SpellItemEnchantment,
)
from armory.domain.character import CharacterRecord, EquipmentRow
from armory.domain.customization import (
    CustomizationChoice, CustomizationData, CustomizationDefinitionSet, CustomizationOption,
)
from armory.domain.enums import CharacterClass, Gender, Race


# ---------------------------------------------------------------------------
# Domain helpers (reusable across many test modules)
# ---------------------------------------------------------------------------

def make_character(**kwargs) -> CharacterRecord:
    defaults = {
        "guid": 1,
        "name": "Arthas",
        "race": Race.HUMAN,
        "char_class": CharacterClass.WARRIOR,
        "gender": Gender.MALE,
        "level": 80,
    }
    defaults.update(kwargs)
    return CharacterRecord(**defaults)


def make_row(slot=0, item_entry=100, enchantments="", **kwargs) -> EquipmentRow:
    return EquipmentRow(slot=slot, item_entry=item_entry, enchantments=enchantments, **kwargs)


def make_option(option_id, name, choice_names) -> CustomizationOption:
    """Option whose choices get ids option_id * 100 + order index."""
    choices = [
        CustomizationChoice(choice_id=option_id * 100 + i, name=choice_name, order_index=i)
        for i, choice_name in enumerate(choice_names)
    ]
    return CustomizationOption(option_id=option_id, name=name, choices=choices)


def make_data(options_by_name: dict) -> CustomizationData:
    """``{option name: [choice names]}`` -> CustomizationData with ids 1..n."""
    return CustomizationData([
        make_option(i + 1, name, choices)
        for i, (name, choices) in enumerate(options_by_name.items())
    ])


def make_definitions(race, gender, options_by_name: dict) -> CustomizationDefinitionSet:
    return CustomizationDefinitionSet({(race, gender): make_data(options_by_name)})


def option_id_of(data: CustomizationData, name: str) -> int:
    return data.option(name).id


# Item fixtures used by several modules:
#   100 helm       -> appearance 1000 -> display 5000, inventory type 1, icon 9100
#   101 bow        -> appearance 1001 -> display 5001, inventory type 15
#   102 ring       -> appearance 1002 -> display 5002, inventory type 11
#   5976 tabard    -> appearance 1003 -> display 5003, inventory type 19
#   103 no appearance mapping, inventory type 5
#   24026 gem (class 3), 3789 enchant sourced from it, 3790 socket bonus of 100,
#   2673 plain enchant (no source item).
def make_catalog() -> GameDataCatalog:
    return GameDataCatalog(
        items=[
            Item(id=100, class_id=4, display_info_id=7100),
            Item(id=101, class_id=2, display_info_id=7101),
            Item(id=102, class_id=4, display_info_id=7102),
            Item(id=103, class_id=4, display_info_id=7103),
            Item(id=5976, class_id=4, display_info_id=7104),
            Item(id=24026, class_id=3, display_info_id=7105),
        ],
        items_retail=[
            ItemRetail(id=100, inventory_type=1),
            ItemRetail(id=101, inventory_type=15),
            ItemRetail(id=102, inventory_type=11),
            ItemRetail(id=103, inventory_type=5),
            ItemRetail(id=5976, inventory_type=19),
        ],
        display_infos=[
            ItemDisplayInfo(id=7100, inventory_icon=9100),
            ItemDisplayInfo(id=7101, inventory_icon=9101),
        ],
        appearances=[
            ItemAppearance(id=1000, item_display_info_id=5000),
            ItemAppearance(id=1001, item_display_info_id=5001),
            ItemAppearance(id=1002, item_display_info_id=5002),
            ItemAppearance(id=1003, item_display_info_id=5003),
        ],
        modified_appearances=[
            ItemModifiedAppearance(item_id=100, item_appearance_id=1000),
            ItemModifiedAppearance(item_id=101, item_appearance_id=1001),
            ItemModifiedAppearance(item_id=102, item_appearance_id=1002),
            ItemModifiedAppearance(item_id=5976, item_appearance_id=1003),
        ],
        enchantments=[
            SpellItemEnchantment(id=3789, src_item_id=24026),
            SpellItemEnchantment(id=3790, src_item_id=0),
            SpellItemEnchantment(id=2673, src_item_id=0),
        ],
    )


def make_tables() -> LookupTables:
    return LookupTables.build(make_catalog(), {100: 3790})


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog():
    return make_catalog()


@pytest.fixture
def tables():
    return make_tables()


@pytest.fixture
def character():
    return make_character()


class FakeCharacterRepository:
    """In-memory stand-in for SqlCharacterRepository."""

    def __init__(self, characters=(), equipment=None):
        self._characters = list(characters)
        self._equipment = equipment or {}

    def get_by_name(self, name):
        for c in self._characters:
            if c.name.lower() == name.lower():
                return c
        return None

    def get_equipment(self, guid):
        return list(self._equipment.get(guid, []))
