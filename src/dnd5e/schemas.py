"""
Wire records for the composite dnd5e types.

Abilities and SkillProficiencies are plain Python objects; these Pydantic
models describe how they look as structured data and re-validate every field
on the way back in.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dnd5e.core import Abilities, AbilityScore, Skill, SkillLevel, SkillProficiencies


class AbilitiesRecord(BaseModel):
    """
    Structured form of Abilities.

    Attributes:
        strength: Strength score (1-30)
        dexterity: Dexterity score (1-30)
        constitution: Constitution score (1-30)
        intelligence: Intelligence score (1-30)
        wisdom: Wisdom score (1-30)
        charisma: Charisma score (1-30)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strength: AbilityScore = Field(..., description="Strength score")
    dexterity: AbilityScore = Field(..., description="Dexterity score")
    constitution: AbilityScore = Field(..., description="Constitution score")
    intelligence: AbilityScore = Field(..., description="Intelligence score")
    wisdom: AbilityScore = Field(..., description="Wisdom score")
    charisma: AbilityScore = Field(..., description="Charisma score")

    @classmethod
    def from_abilities(cls, abilities: Abilities) -> "AbilitiesRecord":
        return cls(
            strength=abilities.strength,
            dexterity=abilities.dexterity,
            constitution=abilities.constitution,
            intelligence=abilities.intelligence,
            wisdom=abilities.wisdom,
            charisma=abilities.charisma,
        )

    def to_abilities(self) -> Abilities:
        return Abilities(
            strength=self.strength,
            dexterity=self.dexterity,
            constitution=self.constitution,
            intelligence=self.intelligence,
            wisdom=self.wisdom,
            charisma=self.charisma,
        )


class SkillProficienciesRecord(BaseModel):
    """
    Structured form of SkillProficiencies.

    Attributes:
        proficient: Skills at the Proficient tier, by display name
        expertise: Skills at the Expertise tier, by display name
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    proficient: list[Skill] = Field(..., description="Skills the creature is proficient in")
    expertise: list[Skill] = Field(..., description="Skills the creature has expertise in")

    @model_validator(mode="after")
    def check_disjoint(self) -> "SkillProficienciesRecord":
        overlap = set(self.proficient) & set(self.expertise)
        if overlap:
            names = ", ".join(sorted(skill.value for skill in overlap))
            raise ValueError(f"Skills cannot be both proficient and expertise: {names}")
        return self

    @classmethod
    def from_proficiencies(cls, profs: SkillProficiencies) -> "SkillProficienciesRecord":
        return cls(
            proficient=[skill for skill, level in profs if level is SkillLevel.PROFICIENT],
            expertise=[skill for skill, level in profs if level is SkillLevel.EXPERTISE],
        )

    def to_proficiencies(self) -> SkillProficiencies:
        pairs = [(skill, SkillLevel.PROFICIENT) for skill in self.proficient]
        pairs += [(skill, SkillLevel.EXPERTISE) for skill in self.expertise]
        return SkillProficiencies.with_proficiencies(pairs)
