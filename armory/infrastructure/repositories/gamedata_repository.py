"""Loads exported game content tables (JSON) into domain catalogs.

Each client database table is exported as a JSON array of rows. A missing
file loads as an empty table so the armory still serves profiles, only
without the data that table would provide.
"""
import json
import logging
import os
from typing import Callable, List

from armory.domain.catalog import (
    GameDataCatalog, Item, ItemAppearance, ItemDisplayInfo,
    ItemModifiedAppearance, ItemRetail, SpellItemEnchantment,
)
from armory.domain.customization import (
    CustomizationChoice, CustomizationData, CustomizationDefinitionSet, CustomizationOption,
)

log = logging.getLogger("armory.gamedata")

CUSTOMIZATION_FILE = "CharacterCustomization.json"


def _load_rows(data_dir: str, filename: str) -> list:
    path = os.path.join(data_dir, filename)
    if not os.path.exists(path):
        log.warning("Data file missing, loading empty table: %s", path)
        return []
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_table(data_dir: str, filename: str, to_row: Callable[[dict], object]) -> List:
    rows = [to_row(raw) for raw in _load_rows(data_dir, filename)]
    log.info("Loaded %d rows from %s", len(rows), filename)
    return rows


def load_game_data(data_dir: str) -> GameDataCatalog:
    return GameDataCatalog(
        items=_load_table(data_dir, "Item.json", lambda r: Item(
            id=r["id"], class_id=r.get("classId", 0), display_info_id=r.get("displayInfoId", 0),
        )),
        items_retail=_load_table(data_dir, "ItemRetail.json", lambda r: ItemRetail(
            id=r["id"], inventory_type=r["inventoryType"],
        )),
        display_infos=_load_table(data_dir, "ItemDisplayInfo.json", lambda r: ItemDisplayInfo(
            id=r["id"], inventory_icon=r["inventoryIcon0"],
        )),
        appearances=_load_table(data_dir, "ItemAppearance.json", lambda r: ItemAppearance(
            id=r["id"], item_display_info_id=r["itemDisplayInfoId"],
        )),
        modified_appearances=_load_table(data_dir, "ItemModifiedAppearance.json", lambda r: ItemModifiedAppearance(
            item_id=r["itemId"], item_appearance_id=r["itemAppearanceId"],
        )),
        enchantments=_load_table(data_dir, "SpellItemEnchantment.json", lambda r: SpellItemEnchantment(
            id=r["id"], src_item_id=r.get("srcItemId", 0),
        )),
    )


def _to_option(raw: dict) -> CustomizationOption:
    choices = [
        CustomizationChoice(
            choice_id=ch["Id"],
            name=ch.get("Name", ""),
            order_index=ch.get("OrderIndex", 0),
        )
        for ch in raw.get("Choices", [])
    ]
    return CustomizationOption(option_id=raw["Id"], name=raw["Name"], choices=choices)


def load_customization(data_dir: str) -> CustomizationDefinitionSet:
    """Customization options per (race, gender).

    The file is a list of ``{"race", "gender", "Options": [...]}`` entries,
    each option carrying ``Id``, ``Name`` and ``Choices`` (``Id``, ``Name``,
    ``OrderIndex``).
    """
    data = {}
    for entry in _load_rows(data_dir, CUSTOMIZATION_FILE):
        options = [_to_option(opt) for opt in entry.get("Options", [])]
        data[(entry["race"], entry["gender"])] = CustomizationData(options)
    log.info("Loaded customization data for %d race/gender combinations", len(data))
    return CustomizationDefinitionSet(data)
