"""Use case: build the public profile of a character on a realm."""
from typing import Dict, List

from armory.domain.catalog import LookupTables
from armory.domain.customization import CustomizationDefinitionSet
from armory.domain.customization_rules import resolve_customization
from armory.domain.equipment import resolve_equipment
from armory.domain.profile import CharacterProfile, assemble_profile


class RealmNotFoundError(LookupError):
    pass


class CharacterNotFoundError(LookupError):
    pass


def _find_realm_repo(realm: str, character_repos: Dict[str, object]):
    for name, repo in character_repos.items():
        if name.lower() == realm.lower():
            return repo
    raise RealmNotFoundError(f"Realm {realm!r} not found.")


def list_realms(character_repos: Dict[str, object]) -> List[str]:
    return list(character_repos.keys())


def get_character_profile(
    realm: str,
    name: str,
    character_repos: Dict[str, object],
    tables: LookupTables,
    definitions: CustomizationDefinitionSet,
) -> CharacterProfile:
    """
    Looks up the character on the realm's database and projects it.
    ``character_repos`` maps realm name to a character repository.
    Raises RealmNotFoundError / CharacterNotFoundError.
    """
    repo = _find_realm_repo(realm, character_repos)

    character = repo.get_by_name(name)
    if character is None:
        raise CharacterNotFoundError(f"Character {name!r} not found on {realm!r}.")

    rows = repo.get_equipment(character.guid)
    customization = resolve_customization(character, definitions)
    equipment, model_items = resolve_equipment(rows, character.char_class, tables)

    return assemble_profile(character, customization, equipment, model_items)
