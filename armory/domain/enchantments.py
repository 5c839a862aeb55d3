"""Packed enchantment string codec.

``item_instance.enchantments`` stores one integer per enchantment sub-slot,
space separated, with ``0`` for an empty sub-slot. A token is classified as a
gem (its enchantment was produced by socketing a gem item), a plain
enchantment, or the item's socket bonus, which is never displayed.
"""
import re
from typing import List

from armory.domain.catalog import LookupTables

_INT_TOKEN = re.compile(r"-?[0-9]+")


def _to_int(token: str) -> int:
    if not _INT_TOKEN.fullmatch(token):
        return 0
    return int(token)


def parse_enchantments(raw: str) -> List[int]:
    """Non-zero enchantment ids in sub-slot order, duplicates kept."""
    tokens = (raw or "").strip().split(" ")
    return [value for value in (_to_int(t) for t in tokens) if value != 0]


def gems_of(item_entry: int, raw: str, tables: LookupTables) -> List[int]:
    """Item ids of the gems socketed into the item."""
    gems = []
    for enchant in parse_enchantments(raw):
        src_item = tables.enchant_source_item(enchant)
        if src_item is not None and tables.is_gem(src_item):
            gems.append(src_item)
    return gems


def plain_enchantments_of(item_entry: int, raw: str, tables: LookupTables) -> List[int]:
    """Known enchantment ids that are neither gems nor the item's socket bonus."""
    socket_bonus = tables.socket_bonus(item_entry)
    result = []
    for enchant in parse_enchantments(raw):
        src_item = tables.enchant_source_item(enchant)
        if src_item is None or tables.is_gem(src_item):
            continue
        if enchant == socket_bonus:
            continue
        result.append(enchant)
    return result
