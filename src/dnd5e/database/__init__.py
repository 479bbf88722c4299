"""SQLAlchemy integration for dnd5e values."""

from dnd5e.database.types import (
    AbilitiesType,
    AbilityType,
    BoundedScalarType,
    SkillProficienciesType,
    SkillType,
)

__all__ = [
    "AbilitiesType",
    "AbilityType",
    "BoundedScalarType",
    "SkillProficienciesType",
    "SkillType",
]
