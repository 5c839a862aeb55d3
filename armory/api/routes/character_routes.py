"""Character API routes -- realm list and character profile."""
import logging
from typing import List, Optional, Tuple

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from armory.application.character_profile import (
    CharacterNotFoundError, RealmNotFoundError, get_character_profile, list_realms,
)

log = logging.getLogger("armory.character")

router = APIRouter(prefix="/api", tags=["character"])


class CustomizationOptionOut(BaseModel):
    optionId: int
    choiceId: int


class EquipmentOut(BaseModel):
    slot: int
    itemEntry: int
    flags: int
    randomPropertyId: int
    icon: Optional[int] = None
    gems: List[int]
    enchantments: List[int]


class CharacterProfileOut(BaseModel):
    name: str
    race: int
    class_: int = Field(..., alias="class")
    gender: int
    level: int
    online: bool
    characterModelItems: List[Tuple[int, int]]
    customizationOptions: List[CustomizationOptionOut]
    equipment: List[EquipmentOut]


class RealmsOut(BaseModel):
    realms: List[str]


_character_repos = {}
_tables = None
_definitions = None


def init_character_routes(character_repos, tables, definitions):
    """Wire collaborators. Must run after game data has finished loading."""
    global _character_repos, _tables, _definitions
    _character_repos = dict(character_repos)
    _tables = tables
    _definitions = definitions


@router.get("/realms", response_model=RealmsOut)
def api_realms():
    """Names of the configured realms."""
    return {"realms": list_realms(_character_repos)}


# Unset fields are dropped so items without a known icon carry no "icon" key.
@router.get(
    "/character/{realm}/{name}",
    response_model=CharacterProfileOut,
    response_model_exclude_unset=True,
)
def api_character(realm: str, name: str):
    """Render-ready profile of a character."""
    try:
        profile = get_character_profile(realm, name, _character_repos, _tables, _definitions)
    except (RealmNotFoundError, CharacterNotFoundError) as e:
        log.info("Profile lookup failed: %s", e)
        raise HTTPException(status_code=404, detail=str(e))
    return profile.to_dict()
