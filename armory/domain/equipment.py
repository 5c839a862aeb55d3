"""Equipment projection: tooltip list and 3D model viewer items."""
from typing import List, Sequence, Tuple

from armory.domain.catalog import LookupTables
from armory.domain.character import EquipmentRow
from armory.domain.enchantments import gems_of, plain_enchantments_of
from armory.domain.enums import CharacterClass, EquipmentSlot


# Neck, fingers and trinkets are never rendered on the model.
VISIBLE_SLOTS = frozenset({
    EquipmentSlot.HEAD,
    EquipmentSlot.SHOULDERS,
    EquipmentSlot.SHIRT,
    EquipmentSlot.CHEST,
    EquipmentSlot.WAIST,
    EquipmentSlot.LEGS,
    EquipmentSlot.FEET,
    EquipmentSlot.WRISTS,
    EquipmentSlot.HANDS,
    EquipmentSlot.BACK,
    EquipmentSlot.MAIN_HAND,
    EquipmentSlot.OFF_HAND,
    EquipmentSlot.RANGED,
    EquipmentSlot.TABARD,
})

# Items that render as a blank model piece.
HIDDEN_MODEL_ITEMS = frozenset({
    5976,  # Guild Tabard
})


def _shown_on_model(row: EquipmentRow, char_class: int) -> bool:
    if row.slot == EquipmentSlot.RANGED and char_class != CharacterClass.HUNTER:
        return False
    return row.slot in VISIBLE_SLOTS and row.item_entry not in HIDDEN_MODEL_ITEMS


def model_viewer_items(
    rows: Sequence[EquipmentRow], char_class: int, tables: LookupTables
) -> List[Tuple[int, int]]:
    """(inventoryType, displayId) pairs for the equipment drawn on the model.

    Items without an appearance mapping or without a retail inventory type
    are left out.
    """
    items = []
    for row in rows:
        if not _shown_on_model(row, char_class):
            continue
        display_id = tables.appearance_display_id(row.item_entry)
        if display_id is None:
            continue
        inventory_type = tables.inventory_type(row.item_entry)
        if inventory_type is None:
            continue
        items.append((inventory_type, display_id))
    return items


def annotate_equipment(rows: Sequence[EquipmentRow], tables: LookupTables) -> List[dict]:
    """Every equipped row decorated with its icon, gems and enchantments."""
    equipment = []
    for row in rows:
        entry = {
            "slot": row.slot,
            "itemEntry": row.item_entry,
            "flags": row.flags,
            "randomPropertyId": row.random_property_id,
        }
        icon = tables.icon(row.item_entry)
        if icon is not None:
            entry["icon"] = icon
        entry["gems"] = gems_of(row.item_entry, row.enchantments, tables)
        entry["enchantments"] = plain_enchantments_of(row.item_entry, row.enchantments, tables)
        equipment.append(entry)
    return equipment


def resolve_equipment(
    rows: Sequence[EquipmentRow], char_class: int, tables: LookupTables
) -> Tuple[List[dict], List[Tuple[int, int]]]:
    equip_rows = [r for r in rows if 0 <= r.slot <= EquipmentSlot.TABARD]
    return (
        annotate_equipment(equip_rows, tables),
        model_viewer_items(equip_rows, char_class, tables),
    )
