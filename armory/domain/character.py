"""
ARMORY - Domain Layer: persisted character data.

Both records are read-only projections of the legacy characters database.
Appearance codes are ordinals into historical choice lists, not values.
"""


class CharacterRecord:
    """A character row as stored by the game server."""

    def __init__(
        self,
        guid: int,
        name: str,
        race: int,
        char_class: int,
        gender: int,
        level: int,
        skin: int = 0,
        face: int = 0,
        hair_style: int = 0,
        hair_color: int = 0,
        facial_style: int = 0,
        online: int = 0,
    ):
        self._guid = guid
        self._name = name
        self._race = race
        self._class = char_class
        self._gender = gender
        self._level = level
        self._skin = skin
        self._face = face
        self._hair_style = hair_style
        self._hair_color = hair_color
        self._facial_style = facial_style
        self._online = online

    @property
    def guid(self) -> int:
        return self._guid

    @property
    def name(self) -> str:
        return self._name

    @property
    def race(self) -> int:
        return self._race

    @property
    def char_class(self) -> int:
        return self._class

    @property
    def gender(self) -> int:
        return self._gender

    @property
    def level(self) -> int:
        return self._level

    @property
    def skin(self) -> int:
        return self._skin

    @property
    def face(self) -> int:
        return self._face

    @property
    def hair_style(self) -> int:
        return self._hair_style

    @property
    def hair_color(self) -> int:
        return self._hair_color

    @property
    def facial_style(self) -> int:
        return self._facial_style

    @property
    def online(self) -> int:
        return self._online


class EquipmentRow:
    """One equipped item instance. ``enchantments`` is the packed token string."""

    def __init__(
        self,
        slot: int,
        item_entry: int,
        flags: int = 0,
        enchantments: str = "",
        random_property_id: int = 0,
    ):
        self._slot = slot
        self._item_entry = item_entry
        self._flags = flags
        self._enchantments = enchantments or ""
        self._random_property_id = random_property_id

    @property
    def slot(self) -> int:
        return self._slot

    @property
    def item_entry(self) -> int:
        return self._item_entry

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def enchantments(self) -> str:
        return self._enchantments

    @property
    def random_property_id(self) -> int:
        return self._random_property_id
