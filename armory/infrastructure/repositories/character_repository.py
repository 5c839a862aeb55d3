"""Characters database repository (one instance per realm)."""
from typing import List

from sqlalchemy import func

from armory.domain.character import CharacterRecord, EquipmentRow
from armory.domain.enums import EquipmentSlot
from armory.infrastructure.database.models import (
    CharacterInventoryModel, CharacterModel, ItemInstanceModel,
)

_EQUIP_SLOTS = [int(s) for s in EquipmentSlot.equip_range()]


class SqlCharacterRepository:
    """Read-only access to a realm's characters database."""

    def __init__(self, session_factory):
        self._sf = session_factory

    def get_by_name(self, name: str) -> CharacterRecord | None:
        """Case-insensitive name lookup. Returns None if absent."""
        with self._sf() as session:
            row = (
                session.query(CharacterModel)
                .filter(func.lower(CharacterModel.name) == func.lower(name))
                .first()
            )
            return self._to_domain(row) if row else None

    def get_equipment(self, guid: int) -> List[EquipmentRow]:
        """Items equipped in the backpack's equip slots (bag 0, slots 0-18)."""
        with self._sf() as session:
            rows = (
                session.query(CharacterInventoryModel.slot, ItemInstanceModel)
                .join(ItemInstanceModel, ItemInstanceModel.guid == CharacterInventoryModel.item)
                .filter(
                    CharacterInventoryModel.guid == guid,
                    CharacterInventoryModel.bag == 0,
                    CharacterInventoryModel.slot.in_(_EQUIP_SLOTS),
                )
                .order_by(CharacterInventoryModel.slot)
                .all()
            )
            return [
                EquipmentRow(
                    slot=slot,
                    item_entry=item.item_entry,
                    flags=item.flags,
                    enchantments=item.enchantments,
                    random_property_id=item.random_property_id,
                )
                for slot, item in rows
            ]

    @staticmethod
    def _to_domain(row: CharacterModel) -> CharacterRecord:
        return CharacterRecord(
            guid=row.guid,
            name=row.name,
            race=row.race,
            char_class=row.char_class,
            gender=row.gender,
            level=row.level,
            skin=row.skin,
            face=row.face,
            hair_style=row.hair_style,
            hair_color=row.hair_color,
            facial_style=row.facial_style,
            online=row.online,
        )
