"""Core D&D 5e value types: scalars, abilities, skills and proficiencies."""

from .abilities import Abilities
from .ability import Ability
from .ability_modifier import AbilityModifier
from .ability_score import AbilityScore
from .level import Level
from .proficiency_bonus import ProficiencyBonus
from .scalar import BoundedScalar
from .skill import Skill
from .skill_proficiencies import SkillLevel, SkillProficiencies

__all__ = [
    "Abilities",
    "Ability",
    "AbilityModifier",
    "AbilityScore",
    "BoundedScalar",
    "Level",
    "ProficiencyBonus",
    "Skill",
    "SkillLevel",
    "SkillProficiencies",
]
