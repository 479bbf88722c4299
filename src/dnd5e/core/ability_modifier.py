"""Ability modifiers derived from ability scores."""

from typing import TYPE_CHECKING

from .scalar import BoundedScalar

if TYPE_CHECKING:
    from .ability_score import AbilityScore


class AbilityModifier(BoundedScalar):
    """Represents a modifier to a d20 test, usually derived from an AbilityScore."""

    LOWER = -5
    UPPER = 10
    LABEL = "Ability modifier"

    @classmethod
    def from_score(cls, score: "AbilityScore") -> "AbilityModifier":
        """Derive the modifier for an ability score.

        Args:
            score: The ability score to derive from

        Returns:
            The modifier, using floor division so odd scores below 10 round down

        Examples:
            >>> AbilityModifier.from_score(AbilityScore(9))
            AbilityModifier(-1)
        """
        return score.modifier()
