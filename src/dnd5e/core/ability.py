"""The six abilities that measure a creature's innate capability."""

from enum import StrEnum
from typing import TYPE_CHECKING

from dnd5e.errors import UnknownNameError

if TYPE_CHECKING:
    from .skill import Skill


class Ability(StrEnum):
    """Core creature abilities, in their conventional order.

    Members are their display names, so ``str(Ability.STRENGTH) == "Strength"``.
    """

    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    CONSTITUTION = "Constitution"
    INTELLIGENCE = "Intelligence"
    WISDOM = "Wisdom"
    CHARISMA = "Charisma"

    @classmethod
    def all(cls) -> tuple["Ability", ...]:
        """Every ability in declaration order."""
        return _ALL

    @classmethod
    def from_string(cls, text: str) -> "Ability":
        """Parse an ability from its full name or 3-letter abbreviation.

        Matching is case-sensitive: ``"Strength"`` and ``"STR"`` are accepted,
        ``"strength"`` is not.

        Raises:
            UnknownNameError: If ``text`` names no ability
        """
        for ability in _ALL:
            if text == ability.value or text == _ABBREVIATIONS[ability]:
                return ability
        raise UnknownNameError("Ability", text)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Ability":
        """Look up an ability by its stable declaration index.

        Raises:
            UnknownNameError: If no ability has that index
        """
        if not 0 <= ordinal < len(_ALL):
            raise UnknownNameError("Ability", ordinal)
        return _ALL[ordinal]

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``"Strength"``."""
        return self.value

    @property
    def abbr(self) -> str:
        """Three-letter abbreviation, e.g. ``"STR"``."""
        return _ABBREVIATIONS[self]

    @property
    def ordinal(self) -> int:
        """Zero-based declaration index, stable across releases."""
        return _ORDINALS[self]

    def skills(self) -> tuple["Skill", ...]:
        """Skills governed by this ability (empty for Constitution)."""
        from .skill import ABILITY_SKILLS

        return ABILITY_SKILLS[self]


_ALL: tuple[Ability, ...] = tuple(Ability)

_ORDINALS: dict[Ability, int] = {ability: index for index, ability in enumerate(_ALL)}

_ABBREVIATIONS: dict[Ability, str] = {
    Ability.STRENGTH: "STR",
    Ability.DEXTERITY: "DEX",
    Ability.CONSTITUTION: "CON",
    Ability.INTELLIGENCE: "INT",
    Ability.WISDOM: "WIS",
    Ability.CHARISMA: "CHA",
}
