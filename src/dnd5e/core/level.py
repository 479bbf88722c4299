"""Character level and the proficiency bonus step table."""

from .proficiency_bonus import ProficiencyBonus
from .scalar import BoundedScalar

# (first level, last level, bonus). Rows past 20 cover expanded level caps.
PROFICIENCY_BONUS_TABLE: tuple[tuple[int, int, int], ...] = (
    (1, 4, 2),
    (5, 8, 3),
    (9, 12, 4),
    (13, 16, 5),
    (17, 20, 6),
    (21, 24, 7),
    (25, 28, 8),
    (29, 30, 9),
)


class Level(BoundedScalar):
    """A creature's overall experience tier, 1-20."""

    LOWER = 1
    UPPER = 20
    LABEL = "Level"

    @classmethod
    def default(cls) -> "Level":
        """New creatures start at the minimum level."""
        return cls.MIN

    def proficiency_bonus(self) -> ProficiencyBonus:
        """Look up the proficiency bonus for this level.

        Returns:
            ProficiencyBonus: 2 at levels 1-4, rising by one every four levels
        """
        for first, last, bonus in PROFICIENCY_BONUS_TABLE:
            if first <= self.value <= last:
                return ProficiencyBonus.new_clamped(bonus)
        raise AssertionError(f"Level {self.value} missing from proficiency table")
