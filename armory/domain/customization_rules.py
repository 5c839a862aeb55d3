"""
ARMORY - Domain Layer: legacy appearance -> customization option mapping.

Characters store face, hair and facial style as ordinals into the historical
choice lists. The modern model viewer expects (optionId, choiceId) pairs, so
every race/gender combination carries a recorded translation table. The
tables are transcriptions of what each legacy ordinal looked like in game and
are not derivable from one another.

A rule is one of three primitives applied to the options of the character's
(race, gender) customization data:

  ByIndex(option, index)  choice whose OrderIndex equals ``index``
  ByName(option, name)    choice whose Name equals ``name``
  ById(option, choice_id) the given choice id, trusted as is

Every miss (unknown option, unknown choice, unmapped ordinal) emits nothing.
"""
from typing import Callable, Dict, List, NamedTuple, Sequence, Tuple

from armory.domain.character import CharacterRecord
from armory.domain.customization import CustomizationData, CustomizationDefinitionSet
from armory.domain.enums import CharacterClass, Gender, Race


class ByIndex(NamedTuple):
    option: str
    index: int | None


class ByName(NamedTuple):
    option: str
    choice: str | None


class ById(NamedTuple):
    option: str
    choice_id: int | None


Rule = ByIndex | ByName | ById


def apply_rule(rule: Rule, data: CustomizationData) -> dict | None:
    """Resolve a single rule to an ``{optionId, choiceId}`` entry, or None."""
    option = data.option(rule.option)
    if option is None:
        return None
    if isinstance(rule, ById):
        if rule.choice_id is None:
            return None
        return {"optionId": option.id, "choiceId": rule.choice_id}
    if isinstance(rule, ByIndex):
        choice = option.choice_by_index(rule.index)
    else:
        choice = option.choice_by_name(rule.choice)
    if choice is None:
        return None
    return {"optionId": option.id, "choiceId": choice.id}


def universal_rules(c: CharacterRecord) -> List[Rule]:
    return [
        ByIndex("Face", c.face),
        ByIndex("Skin Color", c.skin),
        ByIndex("Hair Style", c.hair_style),
        ByIndex("Hair Color", c.hair_color),
    ]


def _is_death_knight(c: CharacterRecord) -> bool:
    return c.char_class == CharacterClass.DEATH_KNIGHT


# ---------------------------------------------------------------------------
# Human
# ---------------------------------------------------------------------------

HUMAN_MALE_MUSTACHE = {0: "Horseshoe", 1: "Brush", 2: "Horseshoe", 3: "None", 4: "Brush", 5: "Brush", 6: "Horseshoe", 7: "Brush", 8: "None"}
HUMAN_MALE_BEARD = {0: "Short", 1: "Chin Puff", 2: "Soul Patch", 3: "Goatee", 4: "Goatee", 5: "None", 6: "Goatee", 7: "None", 8: "None"}
HUMAN_MALE_SIDEBURNS = {0: "Medium", 1: "None", 2: "None", 3: "Medium", 4: "Long", 5: "Long", 6: "None", 7: "None", 8: "None"}
HUMAN_MALE_EYE_COLOR_BY_FACE = {0: 4138, 1: 4140, 2: 4130, 3: 4136, 4: 4141, 5: 4134, 6: 4130, 7: 4138, 8: 4144, 9: 4135, 10: 4126, 11: 4136}
HUMAN_FEMALE_EYE_COLOR_BY_FACE = {0: 4162, 1: 4153, 2: 4161, 3: 4164, 4: 4154, 5: 4160, 6: 4160, 7: 4157, 8: 4152, 9: 4154, 10: 4155, 11: 4165, 12: 4163, 13: 4155, 14: 4151}


def human_rules(c: CharacterRecord) -> List[Rule]:
    if c.gender == Gender.MALE:
        return [
            ByName("Mustache", HUMAN_MALE_MUSTACHE.get(c.facial_style)),
            ByName("Beard", HUMAN_MALE_BEARD.get(c.facial_style)),
            ByName("Sideburns", HUMAN_MALE_SIDEBURNS.get(c.facial_style)),
            ByName("Eyebrows", "Natural"),
            ByName("Face Shape", "Narrow"),
            ById("Eye Color", HUMAN_MALE_EYE_COLOR_BY_FACE.get(c.face)),
        ]
    return [
        ByIndex("Piercings", c.facial_style),
        ByName("Eyebrows", "Natural"),
        ByName("Face Shape", "Narrow"),
        ByName("Makeup", "None"),
        ByName("Necklace", "None"),
        ById("Eye Color", HUMAN_FEMALE_EYE_COLOR_BY_FACE.get(c.face)),
    ]


# ---------------------------------------------------------------------------
# Orc
# ---------------------------------------------------------------------------

ORC_MALE_BEARD = {0: "None", 1: "Stubble", 2: "Thick", 3: "Full", 4: "Tied", 5: "Braid", 6: "Twin Braids", 7: "None", 8: "Ringed", 9: "Split", 10: "Goatee"}
ORC_MALE_SIDEBURNS = {0: "None", 1: "None", 2: "Full", 3: "Low", 4: "Full", 5: "None", 6: "None", 7: "Braids", 8: "None", 9: "Full", 10: "Thick"}
ORC_FEMALE_EARRINGS = {0: 0, 1: 1, 2: 2, 3: 0, 4: 1, 5: 2, 6: 4}
ORC_FEMALE_NOSE_RING = {0: 0, 1: 0, 2: 0, 3: 1, 4: 1, 5: 1, 6: 0}


def orc_rules(c: CharacterRecord) -> List[Rule]:
    rules: List[Rule] = [
        ByName("Scars", "None"),
        ByName("Grime", "None"),
        ByName("Tattoo", "None"),
        ByName("War Paint", "None"),
        ByName("War Paint Color", "None"),
    ]
    if c.gender == Gender.MALE:
        rules += [
            ByName("Beard", ORC_MALE_BEARD.get(c.facial_style)),
            ByName("Sideburns", ORC_MALE_SIDEBURNS.get(c.facial_style)),
            ByName("Earrings", "None"),
            ByName("Nose Ring", "None"),
            ByName("Tusks", "Natural"),
            ByName("Upright", "Hunched"),
            ByIndex("Eye Color", 0),  # TODO: no recorded orc eye colors yet
        ]
    else:
        rules += [
            ByIndex("Earrings", ORC_FEMALE_EARRINGS.get(c.facial_style)),
            ByIndex("Nose Ring", ORC_FEMALE_NOSE_RING.get(c.facial_style)),
            ByName("Necklace", "None"),
            ByIndex("Eye Color", 0),  # TODO: no recorded orc eye colors yet
        ]
    return rules


# ---------------------------------------------------------------------------
# Dwarf
# ---------------------------------------------------------------------------

DWARF_MALE_MUSTACHE = {0: "Trimmed", 1: "Bushy", 2: "Grand", 3: "Thin Braids", 4: "Wise", 5: "Thick Braids", 6: "Fancy", 7: "Bold", 8: "Tied", 9: "None", 10: "None"}
DWARF_FEMALE_EARRINGS = {0: 0, 1: 1, 2: 2, 3: 3, 4: 0, 5: 4}
DWARF_FEMALE_PIERCINGS = {0: "None", 1: "None", 2: "None", 3: "None", 4: "Right Nostril", 5: "None"}


def dwarf_rules(c: CharacterRecord) -> List[Rule]:
    rules: List[Rule] = [
        ByName("Tattoo", "None"),
        ByIndex("Tattoo Color", 0),
        ByIndex("Eyebrows", 0),
    ]
    if c.gender == Gender.MALE:
        rules += [
            ByName("Mustache", DWARF_MALE_MUSTACHE.get(c.facial_style)),
            ByIndex("Beard", c.facial_style),
            ByName("Earrings", "None"),
            ByName("Nose Ring", "None"),
            ByIndex("Eye Color", 0),  # TODO: no recorded dwarf eye colors yet
        ]
    else:
        rules += [
            ByIndex("Earrings", DWARF_FEMALE_EARRINGS.get(c.facial_style)),
            ByName("Piercings", DWARF_FEMALE_PIERCINGS.get(c.facial_style)),
            ByIndex("Eye Color", 0),  # TODO: no recorded dwarf eye colors yet
        ]
    return rules


# ---------------------------------------------------------------------------
# Night Elf
# ---------------------------------------------------------------------------

NIGHT_ELF_MALE_SIDEBURNS = {0: "None", 1: "Groomed", 2: "None", 3: "Short", 4: "Medium", 5: "Groomed"}
NIGHT_ELF_MALE_MUSTACHE = {0: "None", 1: "Groomed", 2: "None", 3: "Thin", 4: "None", 5: "None"}
NIGHT_ELF_MALE_BEARD = {0: "None", 1: "Trimmed", 2: "Full", 3: "None", 4: "Short", 5: "Long"}
NIGHT_ELF_MALE_EYEBROWS = {0: "Shaved", 1: "Short", 2: "Long", 3: "Flat", 4: "Short", 5: "Owl"}
NIGHT_ELF_FEMALE_MARKINGS_COLOR_BY_HAIR_COLOR = {0: 1, 1: 2, 2: 3, 3: 4, 4: 5, 5: 3, 6: 6, 7: 7}


def night_elf_rules(c: CharacterRecord) -> List[Rule]:
    rules: List[Rule] = [
        ByName("Vines", "None"),
        ByIndex("Vine Color", 0),
        ByName("Ears", "Thin"),
        ByName("Scars", "None"),
    ]
    if c.gender == Gender.MALE:
        rules += [
            ByName("Sideburns", NIGHT_ELF_MALE_SIDEBURNS.get(c.facial_style)),
            ByName("Mustache", NIGHT_ELF_MALE_MUSTACHE.get(c.facial_style)),
            ByName("Beard", NIGHT_ELF_MALE_BEARD.get(c.facial_style)),
            ByName("Eyebrows", NIGHT_ELF_MALE_EYEBROWS.get(c.facial_style)),
        ]
    else:
        rules += [
            ByName("Eyebrows", "Long"),
            ByIndex("Markings", c.facial_style + 1),
            ByIndex("Markings Color", NIGHT_ELF_FEMALE_MARKINGS_COLOR_BY_HAIR_COLOR.get(c.hair_color)),
        ]
    rules += [
        ByName("Blindfold", ""),
        ByName("Headdress", "None"),
        ByName("Earrings", "None"),
        ByName("Nose Ring", "None"),
        ByName("Necklace", "None"),
        ByName("Horns", "None"),
        ByName("Tattoo", "None"),
        ByName("Tattoo Color", "None"),
    ]
    if not _is_death_knight(c):
        rules.append(ById("Eye Color", 7610 if c.gender == Gender.MALE else 7619))
    return rules


# ---------------------------------------------------------------------------
# Undead
# ---------------------------------------------------------------------------

UNDEAD_MALE_JAW_FEATURES = {0: "Intact", 1: "Rot-Kissed", 2: "Intact", 3: "Slackjawed", 4: "Drooler", 5: "Intact", 6: "Slackjawed", 7: "Drooler", 8: "Bonejawed", 9: "Jawsome", 10: "Toothy", 11: "Unhinged", 12: "Cheeky", 13: "Loose", 14: "Intact", 15: "Slackjawed", 16: "Slobber"}
UNDEAD_MALE_FACE_FEATURES = {0: 0, 1: 0, 2: 1, 3: 1, 4: 1, 5: 2, 6: 3, 7: 3, 8: 0, 9: 0, 10: 0, 11: 0, 12: 0, 13: 0, 14: 4, 15: 4, 16: 0}
UNDEAD_MALE_EYE_COLOR = {0: 5330, 1: 5330, 2: 6304, 3: 6304, 4: 6304, 5: 5330, 6: 5330, 7: 5330, 8: 5330, 9: 5330, 10: 6304, 11: 6304, 12: 5330, 13: 5330, 14: 5330, 15: 5330, 16: 5330}
UNDEAD_FEMALE_FACE_FEATURES = {0: "None", 1: "None", 2: "Strapped", 3: "Rotting", 4: "None", 5: "None", 6: "None", 7: "Putrid"}
UNDEAD_FEMALE_JAW_FEATURES = {0: "Intact", 1: "Stitched", 2: "Intact", 3: "Intact", 4: "Bonejawed", 5: "Toothy", 6: "Cheeky", 7: "Intact"}
UNDEAD_FEMALE_EYE_COLOR = {0: 5337, 1: 5337, 2: 6305, 3: 5337, 4: 5337, 5: 6305, 6: 5337, 7: 5337}


def undead_rules(c: CharacterRecord) -> List[Rule]:
    rules: List[Rule] = [ByName("Skin Type", "Bony")]
    if c.gender == Gender.MALE:
        rules += [
            ByName("Jaw Features", UNDEAD_MALE_JAW_FEATURES.get(c.facial_style)),
            ByIndex("Face Features", UNDEAD_MALE_FACE_FEATURES.get(c.facial_style)),
            ById("Eye Color", UNDEAD_MALE_EYE_COLOR.get(c.facial_style)),
        ]
    else:
        rules += [
            ByName("Face Features", UNDEAD_FEMALE_FACE_FEATURES.get(c.facial_style)),
            ByName("Jaw Features", UNDEAD_FEMALE_JAW_FEATURES.get(c.facial_style)),
            ById("Eye Color", UNDEAD_FEMALE_EYE_COLOR.get(c.facial_style)),
        ]
    return rules


# ---------------------------------------------------------------------------
# Tauren
# ---------------------------------------------------------------------------

TAUREN_MALE_HAIR = {0: "Mane", 1: "Braids", 2: "Chops", 3: "Sideburns", 4: "Mane", 5: "Wrapped", 6: "Braids"}
TAUREN_MALE_FACIAL_HAIR = {0: "Clean", 1: "Braid", 2: "Beard", 3: "Wrapped", 4: "Curtain", 5: "Clean", 6: "Split"}
TAUREN_MALE_NOSE_RING = {0: "None", 1: "Small", 2: "Open", 3: "None", 4: "None", 5: "Bead", 6: "Open"}


def tauren_rules(c: CharacterRecord) -> List[Rule]:
    rules: List[Rule] = [
        ByIndex("Horn Style", c.hair_style),
        ByIndex("Horn Color", c.hair_color),
        ByName("Foremane", "Short"),
        ByName("Face Paint", "None"),
        ByName("Headdress", "None"),
        ByName("Necklace", "None"),
        ByIndex("Jewelry Color", 0),
        ByName("Flower", "None"),
        ByName("Body Paint", "None"),
        ByIndex("Paint Color", 0),
    ]
    if c.gender == Gender.MALE:
        rules += [
            ByName("Hair", TAUREN_MALE_HAIR.get(c.facial_style)),
            ByName("Facial Hair", TAUREN_MALE_FACIAL_HAIR.get(c.facial_style)),
            ByName("Nose Ring", TAUREN_MALE_NOSE_RING.get(c.facial_style)),
            ByIndex("Eye Color", 0),  # TODO: no recorded tauren eye colors yet
        ]
    else:
        rules += [
            ByIndex("Hair", c.facial_style),
            ByName("Earrings", "None"),
            ByName("Nose Ring", "None"),
            ByIndex("Eye Color", 0),  # TODO: no recorded tauren eye colors yet
        ]
    return rules


# ---------------------------------------------------------------------------
# Gnome
# ---------------------------------------------------------------------------

def gnome_rules(c: CharacterRecord) -> List[Rule]:
    fs = c.facial_style
    if c.gender == Gender.MALE:
        return [
            ByIndex("Mustache", fs - 1 if fs > 1 else 0),
            ByIndex("Beard", fs if fs < 7 else 0),
            ByIndex("Eyebrows", fs if fs < 6 else 1),
            ByIndex("Eye Color", 0),  # TODO: no recorded gnome eye colors yet
        ]
    return [
        ByIndex("Earrings", fs),
        ById("Earring Color", 8796),
        ByIndex("Eye Color", 0),  # TODO: no recorded gnome eye colors yet
    ]


# ---------------------------------------------------------------------------
# Troll
# ---------------------------------------------------------------------------

TROLL_MALE_TUSKS = {0: "Tusked", 1: "Gougers", 2: "Mammoth", 3: "Spears", 4: "Bridle", 5: "Tusked", 6: "Gougers", 7: "Mammoth", 8: "Spears", 9: "Bridle", 10: "Gougers"}
TROLL_MALE_FACE_PAINT = {0: "None", 1: "None", 2: "None", 3: "None", 4: "None", 5: "Berserker", 6: "Fangs", 7: "Mask", 8: "Oni", 9: "Prophet", 10: "War"}


def troll_rules(c: CharacterRecord) -> List[Rule]:
    rules: List[Rule] = [
        ByName("Body Paint", "None"),
        ByName("Body Paint Color", "None"),
        ByName("Piercing", "None"),
    ]
    if c.gender == Gender.MALE:
        rules += [
            ByName("Tusks", TROLL_MALE_TUSKS.get(c.facial_style)),
            ByName("Face Paint", TROLL_MALE_FACE_PAINT.get(c.facial_style)),
            ByIndex("Face Paint Color", c.hair_color + 1),
            ByName("Earrings", "None"),
            ByIndex("Eye Color", 0),  # TODO: no recorded troll eye colors yet
        ]
    else:
        rules += [
            ByIndex("Tusks", c.facial_style),
            ByName("Face Paint", "None"),
            ByIndex("Face Paint Color", 0),
            ByName("Earrings", "Hoops"),
            ByIndex("Eye Color", 0),  # TODO: no recorded troll eye colors yet
        ]
    return rules


# ---------------------------------------------------------------------------
# Blood Elf
# ---------------------------------------------------------------------------

def blood_elf_rules(c: CharacterRecord) -> List[Rule]:
    rules: List[Rule] = [
        ByName("Ears", "Long"),
        ByName("Horns", "None"),
        ByName("Blindfold", "None"),
        ByName("Tattoo", "None"),
        ByIndex("Tattoo Color", 0),
    ]
    if c.gender == Gender.MALE:
        rules.append(ByIndex("Facial Hair", c.facial_style))
    else:
        rules += [
            ByIndex("Earrings", c.facial_style),
            ByIndex("Jewelry Color", 0),
            ByName("Necklace", "None"),
            ByName("Armbands", "None"),
            ByName("Bracelets", "None"),
        ]
    if not _is_death_knight(c):
        rules.append(ById("Eye Color", 6570 if c.gender == Gender.MALE else 6589))
    return rules


# ---------------------------------------------------------------------------
# Draenei
# ---------------------------------------------------------------------------

DRAENEI_MALE_FACIAL_HAIR = {0: "Bare", 1: "Bare", 2: "Burns", 3: "Chops", 4: "Mustache", 5: "Soul Patch", 6: "Handlebar", 7: "Bare"}
DRAENEI_MALE_TENDRILS = {0: "None", 1: "Splayed", 2: "Double", 3: "Fanned", 4: "Single", 5: "Paired", 6: "Uniform", 7: "Twin"}
DRAENEI_FEMALE_HORNS = {0: "Sweeping", 1: "Curled", 2: "Curved", 3: "Thick", 4: "Wide", 5: "Grand", 6: "Short"}


def draenei_rules(c: CharacterRecord) -> List[Rule]:
    male = c.gender == Gender.MALE
    rules: List[Rule] = [
        ByName("Circlet", "None"),
        ById("Jewelry Color", 8707 if male else 8646),
        ByName("Horn Decoration", "None"),
        ByName("Tail", "Long" if male else "Short"),
    ]
    if male:
        rules += [
            ByName("Facial Hair", DRAENEI_MALE_FACIAL_HAIR.get(c.facial_style)),
            ByName("Tendrils", DRAENEI_MALE_TENDRILS.get(c.facial_style)),
        ]
    else:
        rules.append(ByName("Horns", DRAENEI_FEMALE_HORNS.get(c.facial_style)))
    if not _is_death_knight(c):
        rules.append(ById("Eye Color", 6976 if male else 6978))
    return rules


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

RACE_RULES: Dict[int, Callable[[CharacterRecord], List[Rule]]] = {
    Race.HUMAN: human_rules,
    Race.ORC: orc_rules,
    Race.DWARF: dwarf_rules,
    Race.NIGHT_ELF: night_elf_rules,
    Race.UNDEAD: undead_rules,
    Race.TAUREN: tauren_rules,
    Race.GNOME: gnome_rules,
    Race.TROLL: troll_rules,
    Race.BLOOD_ELF: blood_elf_rules,
    Race.DRAENEI: draenei_rules,
}

# (male, female) eye color choice ids of Death Knights.
DEATH_KNIGHT_EYE_COLORS: Dict[int, Tuple[int, int]] = {
    Race.HUMAN: (4534, 4535),
    Race.ORC: (9289, 9313),
    Race.DWARF: (5559, 5587),
    Race.NIGHT_ELF: (7618, 7634),
    Race.UNDEAD: (5344, 5345),
    Race.TAUREN: (7281, 7289),
    Race.GNOME: (5629, 5643),
    Race.TROLL: (8451, 8468),
    Race.BLOOD_ELF: (6586, 6605),
    Race.DRAENEI: (6977, 6979),
}

DRUID_FORMS = (
    "Bear Form",
    "Cat Form",
    "Aquatic Form",
    "Travel Form",
    "Flight Form",
    "Moonkin Form",
)


def race_rules(c: CharacterRecord) -> List[Rule]:
    table = RACE_RULES.get(c.race)
    return table(c) if table else []


def class_override_rules(c: CharacterRecord) -> List[Rule]:
    if not _is_death_knight(c) or c.race not in DEATH_KNIGHT_EYE_COLORS:
        return []
    male_id, female_id = DEATH_KNIGHT_EYE_COLORS[c.race]
    return [ById("Eye Color", male_id if c.gender == Gender.MALE else female_id)]


def druid_form_rules(c: CharacterRecord) -> List[Rule]:
    if c.race not in Race.druid_capable():
        return []
    return [ByIndex(form, 0) for form in DRUID_FORMS]


def customization_rules(c: CharacterRecord) -> List[Rule]:
    """Full ordered rule sequence for a character. Later entries win."""
    return (
        universal_rules(c)
        + race_rules(c)
        + class_override_rules(c)
        + druid_form_rules(c)
    )


def apply_rules(rules: Sequence[Rule], data: CustomizationData) -> List[dict]:
    options = []
    for rule in rules:
        entry = apply_rule(rule, data)
        if entry is not None:
            options.append(entry)
    return options


def resolve_customization(c: CharacterRecord, definitions: CustomizationDefinitionSet) -> List[dict]:
    """Ordered ``{optionId, choiceId}`` list for the character's appearance."""
    data = definitions.for_character(c.race, c.gender)
    return apply_rules(customization_rules(c), data)
