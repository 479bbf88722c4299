"""Ability scores: the 1-30 magnitude of an Ability."""

from typing import ClassVar

from .ability_modifier import AbilityModifier
from .scalar import BoundedScalar


class AbilityScore(BoundedScalar):
    """Represents the magnitude of an Ability.

    Examples:
        >>> AbilityScore(16).modifier()
        AbilityModifier(3)
        >>> AbilityScore.new_clamped(42)
        AbilityScore(30)
    """

    LOWER = 1
    UPPER = 30
    LABEL = "Ability score"

    DEFAULT: ClassVar["AbilityScore"]

    @classmethod
    def default(cls) -> "AbilityScore":
        """A sensible default score, 10."""
        return cls.DEFAULT

    def modifier(self) -> AbilityModifier:
        """Derive the ability modifier: ``(score - 10) // 2``, clamped."""
        return AbilityModifier.new_clamped((self.value - 10) // 2)


AbilityScore.DEFAULT = AbilityScore(10)
