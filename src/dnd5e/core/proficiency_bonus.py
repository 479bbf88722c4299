"""Proficiency bonus derived from character level."""

from typing import TYPE_CHECKING

from .scalar import BoundedScalar

if TYPE_CHECKING:
    from .level import Level


class ProficiencyBonus(BoundedScalar):
    """The 2-9 bonus added to checks a creature is proficient in."""

    LOWER = 2
    UPPER = 9
    LABEL = "Proficiency bonus"

    @classmethod
    def from_level(cls, level: "Level") -> "ProficiencyBonus":
        """Look up the proficiency bonus for a level."""
        return level.proficiency_bonus()
