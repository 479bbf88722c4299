"""Shared fixtures for all tests."""

import pytest
import structlog

from dnd5e import Abilities, AbilityScore, Skill, SkillProficiencies
from dnd5e.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep DND5E_* environment variables and cached settings out of each test.

    Settings are cached with lru_cache, so the cache is cleared before and
    after every test; structlog is reset in case a test configured it.
    """
    for name in ("DND5E_DECODE_POLICY", "DND5E_LOG_LEVEL", "DND5E_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def rogue_abilities() -> Abilities:
    """Ability scores for a dexterous rogue."""
    return Abilities(
        strength=AbilityScore(8),
        dexterity=AbilityScore(16),
        constitution=AbilityScore(12),
        intelligence=AbilityScore(13),
        wisdom=AbilityScore(10),
        charisma=AbilityScore(14),
    )


@pytest.fixture
def rogue_skills() -> SkillProficiencies:
    """A rogue proficient in Acrobatics and Deception with Stealth expertise."""
    profs = SkillProficiencies()
    profs.set_proficient(Skill.ACROBATICS)
    profs.set_proficient(Skill.DECEPTION)
    profs.set_expertise(Skill.STEALTH)
    return profs
