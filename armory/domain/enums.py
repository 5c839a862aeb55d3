"""Enums and id constants used across the domain."""
from enum import IntEnum


class Race(IntEnum):
    HUMAN = 1
    ORC = 2
    DWARF = 3
    NIGHT_ELF = 4
    UNDEAD = 5
    TAUREN = 6
    GNOME = 7
    TROLL = 8
    BLOOD_ELF = 10
    DRAENEI = 11

    @staticmethod
    def druid_capable() -> list:
        return [Race.NIGHT_ELF, Race.TAUREN]


class CharacterClass(IntEnum):
    WARRIOR = 1
    PALADIN = 2
    HUNTER = 3
    ROGUE = 4
    PRIEST = 5
    DEATH_KNIGHT = 6
    SHAMAN = 7
    MAGE = 8
    WARLOCK = 9
    DRUID = 11


class Gender(IntEnum):
    MALE = 0
    FEMALE = 1


class EquipmentSlot(IntEnum):
    """Legacy equip slot ordering of the character_inventory table."""

    HEAD = 0
    NECK = 1
    SHOULDERS = 2
    SHIRT = 3
    CHEST = 4
    WAIST = 5
    LEGS = 6
    FEET = 7
    WRISTS = 8
    HANDS = 9
    FINGER1 = 10
    FINGER2 = 11
    TRINKET1 = 12
    TRINKET2 = 13
    BACK = 14
    MAIN_HAND = 15
    OFF_HAND = 16
    RANGED = 17
    TABARD = 18

    @staticmethod
    def equip_range() -> list:
        return list(EquipmentSlot)


class ItemClass(IntEnum):
    GEM = 3
