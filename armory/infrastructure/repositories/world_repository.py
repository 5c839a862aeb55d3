"""World database repository."""
from typing import Dict

from armory.infrastructure.database.models import ItemTemplateModel


class SqlWorldRepository:
    def __init__(self, session_factory):
        self._sf = session_factory

    def get_socket_bonuses(self) -> Dict[int, int]:
        """item entry -> socket bonus enchantment id, for items that have one."""
        with self._sf() as session:
            rows = (
                session.query(ItemTemplateModel.entry, ItemTemplateModel.socket_bonus)
                .filter(ItemTemplateModel.socket_bonus != 0)
                .all()
            )
            return {entry: bonus for entry, bonus in rows}
