"""
Encoding and decoding of dnd5e values.

Values travel as plain structured data: scalars as bare integers, Ability and
Skill as their display names, Abilities and SkillProficiencies as records (see
``dnd5e.schemas``). Decoding always re-validates through the strict constructors,
or through the clamping constructors when the ``clamp`` policy is selected.
"""

from functools import lru_cache
from typing import Any, TypeVar

import structlog
import yaml
from pydantic import TypeAdapter, ValidationError

from dnd5e.config import DecodePolicy, get_settings
from dnd5e.core import Ability, Skill
from dnd5e.core.scalar import CLAMP_POLICY, STRICT_POLICY
from dnd5e.errors import MalformedEncodingError, UnknownNameError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(cls: type[T]) -> TypeAdapter[T]:
    return TypeAdapter(cls)


def _context(policy: DecodePolicy | None) -> dict[str, str]:
    if policy is None:
        policy = get_settings().decode_policy
    if policy not in (STRICT_POLICY, CLAMP_POLICY):
        raise ValueError(f"Unknown decode policy: {policy!r}")
    return {"decode_policy": policy}


def _malformed(cls: type, error: ValidationError) -> MalformedEncodingError:
    errors = error.errors(include_url=False)
    logger.warning(
        "decode_failed",
        type=cls.__name__,
        error_count=error.error_count(),
        first_error=errors[0]["msg"] if errors else None,
    )
    message = errors[0]["msg"] if errors else str(error)
    return MalformedEncodingError(cls.__name__, message, errors)


def to_data(value: Any) -> Any:
    """
    Encode a value as plain structured data (ints, strings, lists, dicts).

    Examples:
        >>> to_data(AbilityScore(18))
        18
        >>> to_data(Skill.SLEIGHT_OF_HAND)
        'Sleight of Hand'
    """
    return _adapter(type(value)).dump_python(value, mode="json")


def from_data(cls: type[T], data: Any, policy: DecodePolicy | None = None) -> T:
    """
    Decode plain structured data into a value of type ``cls``.

    Args:
        cls: The dnd5e type to decode
        data: Structured data, as produced by ``to_data``
        policy: ``"strict"`` or ``"clamp"``; defaults to ``Settings.decode_policy``

    Returns:
        The decoded value

    Raises:
        MalformedEncodingError: If a field is missing, has the wrong shape, names
            an unknown ability or skill, or is out of range under the strict policy
    """
    try:
        return _adapter(cls).validate_python(data, context=_context(policy))
    except ValidationError as e:
        raise _malformed(cls, e) from e


def to_json(value: Any) -> str:
    """Encode a value as a JSON document."""
    return _adapter(type(value)).dump_json(value).decode("utf-8")


def from_json(cls: type[T], text: str | bytes, policy: DecodePolicy | None = None) -> T:
    """
    Decode a JSON document into a value of type ``cls``.

    Raises:
        MalformedEncodingError: If the document is not valid JSON or fails validation
    """
    try:
        return _adapter(cls).validate_json(text, context=_context(policy))
    except ValidationError as e:
        raise _malformed(cls, e) from e


def to_yaml(value: Any) -> str:
    """Encode a value as a YAML document."""
    return yaml.safe_dump(to_data(value), sort_keys=False, allow_unicode=True)


def from_yaml(cls: type[T], text: str, policy: DecodePolicy | None = None) -> T:
    """
    Decode a YAML document into a value of type ``cls``.

    Raises:
        MalformedEncodingError: If the document cannot be parsed or fails validation
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("yaml_parse_failed", type=cls.__name__, error=str(e))
        raise MalformedEncodingError(cls.__name__, f"YAML parsing error: {e}") from e

    return from_data(cls, data, policy)


def to_discriminant(member: Ability | Skill) -> bytes:
    """Encode an Ability or Skill as its one-byte ordinal."""
    return bytes([member.ordinal])


def from_discriminant(cls: type[Ability] | type[Skill], data: bytes) -> Ability | Skill:
    """
    Decode a one-byte ordinal produced by ``to_discriminant``.

    Raises:
        MalformedEncodingError: If ``data`` is not exactly one byte or names no variant
    """
    if len(data) != 1:
        logger.warning("decode_failed", type=cls.__name__, length=len(data))
        raise MalformedEncodingError(
            cls.__name__, f"expected a single byte, got {len(data)}"
        )
    try:
        return cls.from_ordinal(data[0])
    except UnknownNameError as e:
        logger.warning("decode_failed", type=cls.__name__, ordinal=data[0])
        raise MalformedEncodingError(cls.__name__, str(e)) from e
