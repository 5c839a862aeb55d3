"""Character profile handed to the presentation layer."""
from typing import List, Sequence, Tuple

from armory.domain.character import CharacterRecord


class CharacterProfile:
    """Render-ready character view. Built per request, never persisted."""

    def __init__(
        self,
        name: str,
        race: int,
        char_class: int,
        gender: int,
        level: int,
        online: bool,
        customization_options: List[dict],
        equipment: List[dict],
        character_model_items: List[Tuple[int, int]],
    ):
        self._name = name
        self._race = race
        self._class = char_class
        self._gender = gender
        self._level = level
        self._online = online
        self._customization_options = list(customization_options)
        self._equipment = list(equipment)
        self._character_model_items = list(character_model_items)

    @property
    def name(self) -> str:
        return self._name

    @property
    def online(self) -> bool:
        return self._online

    @property
    def customization_options(self) -> List[dict]:
        return list(self._customization_options)

    @property
    def equipment(self) -> List[dict]:
        return list(self._equipment)

    @property
    def character_model_items(self) -> List[Tuple[int, int]]:
        return list(self._character_model_items)

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "race": self._race,
            "class": self._class,
            "gender": self._gender,
            "level": self._level,
            "online": self._online,
            "characterModelItems": [list(item) for item in self._character_model_items],
            "customizationOptions": list(self._customization_options),
            "equipment": list(self._equipment),
        }


def assemble_profile(
    character: CharacterRecord,
    customization_options: Sequence[dict],
    equipment: Sequence[dict],
    model_items: Sequence[Tuple[int, int]],
) -> CharacterProfile:
    return CharacterProfile(
        name=character.name,
        race=character.race,
        char_class=character.char_class,
        gender=character.gender,
        level=character.level,
        online=character.online == 1,
        customization_options=list(customization_options),
        equipment=list(equipment),
        character_model_items=list(model_items),
    )
