"""Bounded integer quantities shared by every dnd5e scalar type.

A bounded scalar wraps one integer and guarantees ``MIN <= value <= MAX`` for
its whole lifetime. Concrete types only declare their bounds, a display label
and the messages used when strict construction fails.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Self

import structlog
from pydantic import GetCoreSchemaHandler, ValidationInfo
from pydantic_core import core_schema

from dnd5e.errors import Bound, OutOfRangeError

logger = structlog.get_logger(__name__)

CLAMP_POLICY = "clamp"
STRICT_POLICY = "strict"


@dataclass(frozen=True, order=True)
class BoundedScalar:
    """Integer restricted to the closed range ``[LOWER, UPPER]``.

    Constructing the type directly is the strict path: ``AbilityScore(31)``
    raises ``OutOfRangeError`` exactly like ``AbilityScore.try_new(31)``.
    """

    _value: int

    LOWER: ClassVar[int]
    UPPER: ClassVar[int]
    LABEL: ClassVar[str]

    MIN: ClassVar["BoundedScalar"]
    MAX: ClassVar["BoundedScalar"]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.MIN = cls(cls.LOWER)
        cls.MAX = cls(cls.UPPER)

    def __post_init__(self) -> None:
        raw = self._value
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"{type(self).__name__} requires an int, got {type(raw).__name__}")
        if raw < self.LOWER:
            raise OutOfRangeError(
                type(self).__name__,
                Bound.LOWER,
                f"{self.LABEL} cannot be less than {self.LOWER}",
            )
        if raw > self.UPPER:
            raise OutOfRangeError(
                type(self).__name__,
                Bound.UPPER,
                f"{self.LABEL} cannot be greater than {self.UPPER}",
            )

    @classmethod
    def try_new(cls, raw: int) -> Self:
        """Create a validated value.

        Raises:
            OutOfRangeError: If ``raw`` is below ``MIN`` or above ``MAX``
            TypeError: If ``raw`` is not an int
        """
        return cls(raw)

    @classmethod
    def new_clamped(cls, raw: int) -> Self:
        """Create a value, saturating ``raw`` to the nearest bound."""
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"{cls.__name__} requires an int, got {type(raw).__name__}")
        clamped = max(cls.LOWER, min(cls.UPPER, raw))
        if clamped != raw:
            logger.debug(
                "scalar_clamped",
                scalar=cls.__name__,
                raw=raw,
                value=clamped,
            )
        return cls(clamped)

    @classmethod
    def new(cls, raw: int) -> Self:
        """Create a value at a trusted call site.

        Asserts the value is in range (stripped under ``python -O``), then clamps.
        """
        assert cls.LOWER <= raw <= cls.UPPER, (
            f"{cls.LABEL} must be between {cls.LOWER} and {cls.UPPER}"
        )
        return cls.new_clamped(raw)

    @property
    def value(self) -> int:
        """The raw underlying integer."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def from_int(raw: int, info: ValidationInfo) -> BoundedScalar:
            context = info.context or {}
            if context.get("decode_policy") == CLAMP_POLICY:
                return cls.new_clamped(raw)
            return cls.try_new(raw)

        from_int_schema = core_schema.with_info_after_validator_function(
            from_int, core_schema.int_schema(strict=True)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_int_schema,
            python_schema=core_schema.union_schema(
                [from_int_schema, core_schema.is_instance_schema(cls)]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda scalar: scalar.value
            ),
        )
