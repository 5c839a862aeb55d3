"""Modern character customization reference data (options and choices)."""
from typing import Dict, List, Tuple


class CustomizationChoice:
    """One selectable value of an option."""

    def __init__(self, choice_id: int, name: str, order_index: int):
        self._id = choice_id
        self._name = name
        self._order_index = order_index

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def order_index(self) -> int:
        return self._order_index


class CustomizationOption:
    """A visual trait with its ordered choices."""

    def __init__(self, option_id: int, name: str, choices: List[CustomizationChoice]):
        self._id = option_id
        self._name = name
        self._choices = tuple(choices)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def choice_by_index(self, order_index: int) -> CustomizationChoice | None:
        for choice in self._choices:
            if choice.order_index == order_index:
                return choice
        return None

    def choice_by_name(self, name: str | None) -> CustomizationChoice | None:
        if name is None:
            return None
        for choice in self._choices:
            if choice.name == name:
                return choice
        return None


class CustomizationData:
    """Options available to one (race, gender) combination."""

    def __init__(self, options: List[CustomizationOption] | None = None):
        self._options = tuple(options or ())

    def option(self, name: str) -> CustomizationOption | None:
        for opt in self._options:
            if opt.name == name:
                return opt
        return None


class CustomizationDefinitionSet:
    """All customization data keyed by (race, gender)."""

    def __init__(self, data: Dict[Tuple[int, int], CustomizationData] | None = None):
        self._data = dict(data or {})

    def for_character(self, race: int, gender: int) -> CustomizationData:
        return self._data.get((race, gender), CustomizationData())

    def __len__(self) -> int:
        return len(self._data)
