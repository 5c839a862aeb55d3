"""SQLAlchemy ORM models for the legacy game server schema (read-only)."""
from sqlalchemy import Column, Integer, SmallInteger, String, Text, BigInteger
from sqlalchemy.orm import DeclarativeBase


class CharactersBase(DeclarativeBase):
    pass


class WorldBase(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Characters database
# ---------------------------------------------------------------------------

class CharacterModel(CharactersBase):
    __tablename__ = "characters"

    guid = Column(BigInteger, primary_key=True)
    name = Column(String(12), nullable=False, index=True)
    race = Column(SmallInteger, nullable=False, default=0)
    char_class = Column("class", SmallInteger, nullable=False, default=0)
    gender = Column(SmallInteger, nullable=False, default=0)
    level = Column(SmallInteger, nullable=False, default=0)
    skin = Column(SmallInteger, nullable=False, default=0)
    face = Column(SmallInteger, nullable=False, default=0)
    hair_style = Column("hairStyle", SmallInteger, nullable=False, default=0)
    hair_color = Column("hairColor", SmallInteger, nullable=False, default=0)
    facial_style = Column("facialStyle", SmallInteger, nullable=False, default=0)
    online = Column(SmallInteger, nullable=False, default=0)


class CharacterInventoryModel(CharactersBase):
    __tablename__ = "character_inventory"

    guid = Column(BigInteger, nullable=False, index=True)
    bag = Column(BigInteger, nullable=False, default=0)
    slot = Column(SmallInteger, nullable=False, default=0)
    item = Column(BigInteger, primary_key=True)


class ItemInstanceModel(CharactersBase):
    __tablename__ = "item_instance"

    guid = Column(BigInteger, primary_key=True)
    item_entry = Column("itemEntry", Integer, nullable=False, default=0)
    flags = Column(Integer, nullable=False, default=0)
    enchantments = Column(Text, nullable=False, default="")
    random_property_id = Column("randomPropertyId", Integer, nullable=False, default=0)


# ---------------------------------------------------------------------------
# World database
# ---------------------------------------------------------------------------

class ItemTemplateModel(WorldBase):
    __tablename__ = "item_template"

    entry = Column(Integer, primary_key=True)
    socket_bonus = Column("socketBonus", Integer, nullable=False, default=0)
