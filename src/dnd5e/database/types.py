"""SQLAlchemy column types for storing dnd5e values compactly.

These let an application keep dnd5e values in its own tables:

    class Character(Base):
        __tablename__ = "characters"

        level: Mapped[Level] = mapped_column(BoundedScalarType(Level))
        primary_ability: Mapped[Ability] = mapped_column(AbilityType())
        skills: Mapped[SkillProficiencies] = mapped_column(SkillProficienciesType())

Values are validated on the way in and on the way out. SkillProficiencies and
Abilities are mutable, but changes made in place are not tracked; assign a new
value to persist a change.
"""

from typing import Any

from sqlalchemy import JSON, BigInteger, SmallInteger
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from dnd5e import codec
from dnd5e.core import Abilities, Ability, BoundedScalar, Skill, SkillProficiencies
from dnd5e.core.skill_proficiencies import SKILL_MASK
from dnd5e.errors import MalformedEncodingError

# Expertise mask is stored above the proficient mask
EXPERTISE_SHIFT = SKILL_MASK.bit_length()


class BoundedScalarType(TypeDecorator[BoundedScalar]):
    """Stores a bounded scalar (AbilityScore, Level, ...) as a small integer."""

    impl = SmallInteger
    cache_ok = True

    def __init__(self, scalar_cls: type[BoundedScalar]) -> None:
        super().__init__()
        self.scalar_cls = scalar_cls

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        if isinstance(value, self.scalar_cls):
            return value.value
        return self.scalar_cls.try_new(value).value

    def process_result_value(self, value: int | None, dialect: Dialect) -> BoundedScalar | None:
        if value is None:
            return None
        return self.scalar_cls.try_new(value)


class AbilityType(TypeDecorator[Ability]):
    """Stores an Ability as its ordinal."""

    impl = SmallInteger
    cache_ok = True

    def process_bind_param(self, value: Ability | None, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return Ability(value).ordinal

    def process_result_value(self, value: int | None, dialect: Dialect) -> Ability | None:
        if value is None:
            return None
        return Ability.from_ordinal(value)


class SkillType(TypeDecorator[Skill]):
    """Stores a Skill as its ordinal."""

    impl = SmallInteger
    cache_ok = True

    def process_bind_param(self, value: Skill | None, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return Skill(value).ordinal

    def process_result_value(self, value: int | None, dialect: Dialect) -> Skill | None:
        if value is None:
            return None
        return Skill.from_ordinal(value)


class SkillProficienciesType(TypeDecorator[SkillProficiencies]):
    """Stores both proficiency masks in a single integer."""

    impl = BigInteger
    cache_ok = True

    def process_bind_param(
        self, value: SkillProficiencies | None, dialect: Dialect
    ) -> int | None:
        if value is None:
            return None
        return value.proficient_bits | (value.expertise_bits << EXPERTISE_SHIFT)

    def process_result_value(
        self, value: int | None, dialect: Dialect
    ) -> SkillProficiencies | None:
        if value is None:
            return None
        try:
            return SkillProficiencies.from_bits(value & SKILL_MASK, value >> EXPERTISE_SHIFT)
        except ValueError as e:
            raise MalformedEncodingError("SkillProficiencies", str(e)) from e


class AbilitiesType(TypeDecorator[Abilities]):
    """Stores Abilities as a JSON record, re-validated on load."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Abilities | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        return codec.to_data(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> Abilities | None:
        if value is None:
            return None
        return codec.from_data(Abilities, value, policy="strict")
