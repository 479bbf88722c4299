"""Per-creature skill proficiency tracking.

Proficiency is held as two bitmasks over skill ordinals, one for Proficient
and one for Expertise. A skill is in at most one of them at any time.
"""

from collections.abc import Iterable, Iterator
from enum import StrEnum
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .skill import Skill

SKILL_MASK = (1 << len(Skill.all())) - 1


class SkillLevel(StrEnum):
    """Tiers of skill competence. Expertise supersedes Proficient."""

    PROFICIENT = "Proficient"
    EXPERTISE = "Expertise"


def _bit(skill: Skill) -> int:
    return 1 << Skill(skill).ordinal


class SkillProficiencies:
    """Which skills a creature is proficient in or has expertise with."""

    __slots__ = ("_proficient", "_expertise")

    def __init__(self) -> None:
        self._proficient = 0
        self._expertise = 0

    @classmethod
    def new(cls) -> "SkillProficiencies":
        return cls()

    @classmethod
    def with_proficiencies(
        cls, proficiencies: Iterable[tuple[Skill, SkillLevel]]
    ) -> "SkillProficiencies":
        """Build a set from ``(skill, level)`` pairs; later pairs win."""
        profs = cls()
        profs.set_proficiencies(proficiencies)
        return profs

    @classmethod
    def from_bits(cls, proficient: int, expertise: int) -> "SkillProficiencies":
        """Rebuild a set from its two raw masks.

        Raises:
            ValueError: If either mask has bits beyond the skill range, or the
                masks overlap
        """
        for label, mask in (("proficient", proficient), ("expertise", expertise)):
            if mask < 0 or mask & ~SKILL_MASK:
                raise ValueError(f"{label} mask {mask:#x} has bits outside the skill range")
        if proficient & expertise:
            raise ValueError(
                f"proficient and expertise masks overlap: {proficient & expertise:#x}"
            )
        profs = cls()
        profs._proficient = proficient
        profs._expertise = expertise
        return profs

    @property
    def proficient_bits(self) -> int:
        return self._proficient

    @property
    def expertise_bits(self) -> int:
        return self._expertise

    def is_proficient(self, skill: Skill) -> bool:
        """True only when the skill is Proficient (not Expertise)."""
        return bool(self._proficient & _bit(skill))

    def has_expertise(self, skill: Skill) -> bool:
        return bool(self._expertise & _bit(skill))

    def get_proficiency(self, skill: Skill) -> SkillLevel | None:
        """The skill's tier, or None when the creature has no proficiency."""
        if self.has_expertise(skill):
            return SkillLevel.EXPERTISE
        if self.is_proficient(skill):
            return SkillLevel.PROFICIENT
        return None

    def set_proficiency(self, skill: Skill, level: SkillLevel) -> None:
        bit = _bit(skill)
        if SkillLevel(level) is SkillLevel.PROFICIENT:
            self._proficient |= bit
            self._expertise &= ~bit
        else:
            self._expertise |= bit
            self._proficient &= ~bit

    def set_proficiencies(self, proficiencies: Iterable[tuple[Skill, SkillLevel]]) -> None:
        for skill, level in proficiencies:
            self.set_proficiency(skill, level)

    def set_proficient(self, skill: Skill) -> None:
        self.set_proficiency(skill, SkillLevel.PROFICIENT)

    def set_expertise(self, skill: Skill) -> None:
        self.set_proficiency(skill, SkillLevel.EXPERTISE)

    def clear_proficiency(self, skill: Skill) -> None:
        bit = _bit(skill)
        self._proficient &= ~bit
        self._expertise &= ~bit

    def clear_all(self) -> None:
        self._proficient = 0
        self._expertise = 0

    def iter(self) -> Iterator[tuple[Skill, SkillLevel]]:
        """Yield ``(skill, level)`` for each skill with a proficiency, in skill order."""
        for skill in Skill.all():
            level = self.get_proficiency(skill)
            if level is not None:
                yield skill, level

    def __iter__(self) -> Iterator[tuple[Skill, SkillLevel]]:
        return self.iter()

    def __len__(self) -> int:
        return (self._proficient | self._expertise).bit_count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SkillProficiencies):
            return NotImplemented
        return (self._proficient, self._expertise) == (other._proficient, other._expertise)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        entries = ", ".join(f"{skill.value}: {level.value}" for skill, level in self)
        return f"SkillProficiencies({{{entries}}})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from dnd5e.schemas import SkillProficienciesRecord

        from_record = core_schema.no_info_after_validator_function(
            SkillProficienciesRecord.to_proficiencies,
            handler.generate_schema(SkillProficienciesRecord),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_record,
            python_schema=core_schema.union_schema(
                [from_record, core_schema.is_instance_schema(cls)]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda profs: SkillProficienciesRecord.from_proficiencies(profs).model_dump(
                    mode="json"
                )
            ),
        )
