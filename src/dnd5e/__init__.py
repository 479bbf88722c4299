"""dnd5e - D&D 5e value types and common mechanics."""

from dnd5e.codec import from_data, from_json, from_yaml, to_data, to_json, to_yaml
from dnd5e.core import (
    Abilities,
    Ability,
    AbilityModifier,
    AbilityScore,
    BoundedScalar,
    Level,
    ProficiencyBonus,
    Skill,
    SkillLevel,
    SkillProficiencies,
)
from dnd5e.errors import Bound, MalformedEncodingError, OutOfRangeError, UnknownNameError

__version__ = "0.2.0"

__all__ = [
    "Abilities",
    "Ability",
    "AbilityModifier",
    "AbilityScore",
    "Bound",
    "BoundedScalar",
    "Level",
    "MalformedEncodingError",
    "OutOfRangeError",
    "ProficiencyBonus",
    "Skill",
    "SkillLevel",
    "SkillProficiencies",
    "UnknownNameError",
    "from_data",
    "from_json",
    "from_yaml",
    "to_data",
    "to_json",
    "to_yaml",
]
