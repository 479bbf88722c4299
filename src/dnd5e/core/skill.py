"""The eighteen skills and their governing abilities.

Both directions of the Skill/Ability association are written out as constant
tables below. They must agree: every skill appears in its ability's tuple.
"""

from enum import StrEnum

from dnd5e.errors import UnknownNameError

from .ability import Ability


class Skill(StrEnum):
    """Specific areas of expertise, each tied to exactly one Ability."""

    ACROBATICS = "Acrobatics"
    ANIMAL_HANDLING = "Animal Handling"
    ARCANA = "Arcana"
    ATHLETICS = "Athletics"
    DECEPTION = "Deception"
    HISTORY = "History"
    INSIGHT = "Insight"
    INTIMIDATION = "Intimidation"
    INVESTIGATION = "Investigation"
    MEDICINE = "Medicine"
    NATURE = "Nature"
    PERCEPTION = "Perception"
    PERFORMANCE = "Performance"
    PERSUASION = "Persuasion"
    RELIGION = "Religion"
    SLEIGHT_OF_HAND = "Sleight of Hand"
    STEALTH = "Stealth"
    SURVIVAL = "Survival"

    @classmethod
    def all(cls) -> tuple["Skill", ...]:
        """Every skill in declaration order."""
        return _ALL

    @classmethod
    def from_string(cls, text: str) -> "Skill":
        """Parse a skill from its exact display name, e.g. ``"Sleight of Hand"``.

        Raises:
            UnknownNameError: If ``text`` names no skill
        """
        for skill in _ALL:
            if text == skill.value:
                return skill
        raise UnknownNameError("Skill", text)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Skill":
        """Look up a skill by its stable declaration index.

        Raises:
            UnknownNameError: If no skill has that index
        """
        if not 0 <= ordinal < len(_ALL):
            raise UnknownNameError("Skill", ordinal)
        return _ALL[ordinal]

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``"Sleight of Hand"``."""
        return self.value

    @property
    def ability(self) -> Ability:
        """The ability this skill is checked with."""
        return SKILL_ABILITIES[self]

    @property
    def ordinal(self) -> int:
        """Zero-based declaration index, used as the skill's bit position."""
        return _ORDINALS[self]


_ALL: tuple[Skill, ...] = tuple(Skill)

_ORDINALS: dict[Skill, int] = {skill: index for index, skill in enumerate(_ALL)}

SKILL_ABILITIES: dict[Skill, Ability] = {
    Skill.ACROBATICS: Ability.DEXTERITY,
    Skill.ANIMAL_HANDLING: Ability.WISDOM,
    Skill.ARCANA: Ability.INTELLIGENCE,
    Skill.ATHLETICS: Ability.STRENGTH,
    Skill.DECEPTION: Ability.CHARISMA,
    Skill.HISTORY: Ability.INTELLIGENCE,
    Skill.INSIGHT: Ability.WISDOM,
    Skill.INTIMIDATION: Ability.CHARISMA,
    Skill.INVESTIGATION: Ability.INTELLIGENCE,
    Skill.MEDICINE: Ability.WISDOM,
    Skill.NATURE: Ability.INTELLIGENCE,
    Skill.PERCEPTION: Ability.WISDOM,
    Skill.PERFORMANCE: Ability.CHARISMA,
    Skill.PERSUASION: Ability.CHARISMA,
    Skill.RELIGION: Ability.INTELLIGENCE,
    Skill.SLEIGHT_OF_HAND: Ability.DEXTERITY,
    Skill.STEALTH: Ability.DEXTERITY,
    Skill.SURVIVAL: Ability.WISDOM,
}

ABILITY_SKILLS: dict[Ability, tuple[Skill, ...]] = {
    Ability.STRENGTH: (Skill.ATHLETICS,),
    Ability.DEXTERITY: (Skill.ACROBATICS, Skill.SLEIGHT_OF_HAND, Skill.STEALTH),
    Ability.CONSTITUTION: (),
    Ability.INTELLIGENCE: (
        Skill.ARCANA,
        Skill.HISTORY,
        Skill.INVESTIGATION,
        Skill.NATURE,
        Skill.RELIGION,
    ),
    Ability.WISDOM: (
        Skill.ANIMAL_HANDLING,
        Skill.INSIGHT,
        Skill.MEDICINE,
        Skill.PERCEPTION,
        Skill.SURVIVAL,
    ),
    Ability.CHARISMA: (
        Skill.DECEPTION,
        Skill.INTIMIDATION,
        Skill.PERFORMANCE,
        Skill.PERSUASION,
    ),
}
