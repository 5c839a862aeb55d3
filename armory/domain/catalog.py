"""Static game-content tables and the lookup indices derived from them.

The catalog is built once during startup and never written afterwards, so a
single instance is shared by every request without locking.
"""
from typing import Dict, FrozenSet, List, Mapping, NamedTuple

from armory.domain.enums import ItemClass


class Item(NamedTuple):
    id: int
    class_id: int
    display_info_id: int


class ItemRetail(NamedTuple):
    id: int
    inventory_type: int


class ItemDisplayInfo(NamedTuple):
    id: int
    inventory_icon: int


class ItemAppearance(NamedTuple):
    id: int
    item_display_info_id: int


class ItemModifiedAppearance(NamedTuple):
    item_id: int
    item_appearance_id: int


class SpellItemEnchantment(NamedTuple):
    id: int
    src_item_id: int


class GameDataCatalog:
    """Raw content tables as produced by the game data exporter."""

    def __init__(
        self,
        items: List[Item] | None = None,
        items_retail: List[ItemRetail] | None = None,
        display_infos: List[ItemDisplayInfo] | None = None,
        appearances: List[ItemAppearance] | None = None,
        modified_appearances: List[ItemModifiedAppearance] | None = None,
        enchantments: List[SpellItemEnchantment] | None = None,
    ):
        self._items = tuple(items or ())
        self._items_retail = tuple(items_retail or ())
        self._display_infos = tuple(display_infos or ())
        self._appearances = tuple(appearances or ())
        self._modified_appearances = tuple(modified_appearances or ())
        self._enchantments = tuple(enchantments or ())

    @property
    def items(self) -> tuple:
        return self._items

    @property
    def items_retail(self) -> tuple:
        return self._items_retail

    @property
    def display_infos(self) -> tuple:
        return self._display_infos

    @property
    def appearances(self) -> tuple:
        return self._appearances

    @property
    def modified_appearances(self) -> tuple:
        return self._modified_appearances

    @property
    def enchantments(self) -> tuple:
        return self._enchantments

    def sizes(self) -> dict:
        return {
            "items": len(self._items),
            "items_retail": len(self._items_retail),
            "display_infos": len(self._display_infos),
            "appearances": len(self._appearances),
            "modified_appearances": len(self._modified_appearances),
            "enchantments": len(self._enchantments),
        }


def _first_by(rows, key) -> dict:
    index: dict = {}
    for row in rows:
        index.setdefault(key(row), row)
    return index


class LookupTables:
    """Immutable id-keyed indices passed into the resolution functions."""

    def __init__(
        self,
        inventory_types: Mapping[int, int] | None = None,
        icons: Mapping[int, int] | None = None,
        gem_items: FrozenSet[int] = frozenset(),
        enchant_src_items: Mapping[int, int] | None = None,
        socket_bonuses: Mapping[int, int] | None = None,
        modified_appearances: Mapping[int, int] | None = None,
        appearance_display_ids: Mapping[int, int] | None = None,
    ):
        self._inventory_types = dict(inventory_types or {})
        self._icons = dict(icons or {})
        self._gem_items = frozenset(gem_items)
        self._enchant_src_items = dict(enchant_src_items or {})
        self._socket_bonuses = dict(socket_bonuses or {})
        self._modified_appearances = dict(modified_appearances or {})
        self._appearance_display_ids = dict(appearance_display_ids or {})

    @classmethod
    def build(cls, catalog: GameDataCatalog, socket_bonuses: Mapping[int, int]) -> "LookupTables":
        """Join the raw catalog tables into the per-item indices."""
        retail = _first_by(catalog.items_retail, lambda r: r.id)
        inventory_types = {
            item.id: retail[item.id].inventory_type
            for item in catalog.items
            if item.id in retail
        }

        icon_by_display_info = {row.id: row.inventory_icon for row in catalog.display_infos}
        icons = {
            item.id: icon_by_display_info[item.display_info_id]
            for item in catalog.items
            if item.display_info_id in icon_by_display_info
        }

        gem_items = frozenset(item.id for item in catalog.items if item.class_id == ItemClass.GEM)
        enchant_src_items = {row.id: row.src_item_id for row in catalog.enchantments}

        modified = _first_by(catalog.modified_appearances, lambda r: r.item_id)
        appearances = _first_by(catalog.appearances, lambda r: r.id)

        return cls(
            inventory_types=inventory_types,
            icons=icons,
            gem_items=gem_items,
            enchant_src_items=enchant_src_items,
            socket_bonuses={k: v for k, v in socket_bonuses.items() if v},
            modified_appearances={k: v.item_appearance_id for k, v in modified.items()},
            appearance_display_ids={k: v.item_display_info_id for k, v in appearances.items()},
        )

    def inventory_type(self, item_entry: int) -> int | None:
        return self._inventory_types.get(item_entry)

    def icon(self, item_entry: int) -> int | None:
        return self._icons.get(item_entry)

    def is_gem(self, item_id: int) -> bool:
        return item_id in self._gem_items

    def enchant_source_item(self, enchant_id: int) -> int | None:
        return self._enchant_src_items.get(enchant_id)

    def socket_bonus(self, item_entry: int) -> int | None:
        return self._socket_bonuses.get(item_entry)

    def appearance_display_id(self, item_entry: int) -> int | None:
        """Model display id via ItemModifiedAppearance -> ItemAppearance."""
        appearance_id = self._modified_appearances.get(item_entry)
        if appearance_id is None:
            return None
        return self._appearance_display_ids.get(appearance_id)

    def sizes(self) -> Dict[str, int]:
        return {
            "inventory_types": len(self._inventory_types),
            "icons": len(self._icons),
            "gem_items": len(self._gem_items),
            "enchantments": len(self._enchant_src_items),
            "socket_bonuses": len(self._socket_bonuses),
        }
