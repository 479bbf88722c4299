"""A creature's six ability scores."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .ability import Ability
from .ability_modifier import AbilityModifier
from .ability_score import AbilityScore

# Slot attribute for each ability
_SLOTS: dict[Ability, str] = {
    Ability.STRENGTH: "strength",
    Ability.DEXTERITY: "dexterity",
    Ability.CONSTITUTION: "constitution",
    Ability.INTELLIGENCE: "intelligence",
    Ability.WISDOM: "wisdom",
    Ability.CHARISMA: "charisma",
}

_ABILITIES_BY_SLOT: dict[str, Ability] = {slot: ability for ability, slot in _SLOTS.items()}


@dataclass
class Abilities:
    """One AbilityScore per Ability, indexable by Ability.

    Examples:
        >>> abilities = Abilities()
        >>> abilities[Ability.STRENGTH] = AbilityScore(16)
        >>> abilities.modifier(Ability.STRENGTH)
        AbilityModifier(3)
    """

    strength: AbilityScore = AbilityScore.DEFAULT
    dexterity: AbilityScore = AbilityScore.DEFAULT
    constitution: AbilityScore = AbilityScore.DEFAULT
    intelligence: AbilityScore = AbilityScore.DEFAULT
    wisdom: AbilityScore = AbilityScore.DEFAULT
    charisma: AbilityScore = AbilityScore.DEFAULT

    def __setattr__(self, name: str, value: Any) -> None:
        # Also runs for __init__ and __setitem__
        ability = _ABILITIES_BY_SLOT.get(name)
        if ability is not None and not isinstance(value, AbilityScore):
            raise TypeError(f"{ability} must be an AbilityScore, got {type(value).__name__}")
        super().__setattr__(name, value)

    @classmethod
    def new(cls) -> "Abilities":
        """All six abilities at the default score of 10."""
        return cls()

    @classmethod
    def with_uniform(cls, score: AbilityScore) -> "Abilities":
        """All six abilities at the same score."""
        return cls(**{slot: score for slot in _SLOTS.values()})

    def __getitem__(self, ability: Ability) -> AbilityScore:
        if not isinstance(ability, Ability):
            raise KeyError(ability)
        return getattr(self, _SLOTS[ability])

    def __setitem__(self, ability: Ability, score: AbilityScore) -> None:
        if not isinstance(ability, Ability):
            raise KeyError(ability)
        setattr(self, _SLOTS[ability], score)

    def __iter__(self) -> Iterator[tuple[Ability, AbilityScore]]:
        return self.iter()

    def iter(self) -> Iterator[tuple[Ability, AbilityScore]]:
        """Yield ``(Ability, AbilityScore)`` pairs in ability declaration order."""
        for ability in Ability.all():
            yield ability, self[ability]

    def modifier(self, ability: Ability) -> AbilityModifier:
        """The ability modifier derived from one slot."""
        return self[ability].modifier()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from dnd5e.schemas import AbilitiesRecord

        from_record = core_schema.no_info_after_validator_function(
            AbilitiesRecord.to_abilities, handler.generate_schema(AbilitiesRecord)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_record,
            python_schema=core_schema.union_schema(
                [from_record, core_schema.is_instance_schema(cls)]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda abilities: AbilitiesRecord.from_abilities(abilities).model_dump(mode="json")
            ),
        )
