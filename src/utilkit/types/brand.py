"""Branded (nominal) types and their runtime validators.

A brand is a plain ``typing.NewType``: the type checker treats it as a
distinct type, while at runtime the branded value IS the base value.
Declare one per domain meaning::

    Email = NewType("Email", str)
    Milliseconds = NewType("Milliseconds", float)

Passing a bare ``str`` where ``Email`` is expected, or ``Milliseconds``
where ``Seconds`` is expected, is a type error.

Because the brand does not exist at runtime, membership is decided by a
predicate.  :func:`create_brand` pairs a predicate with a brand and returns
a :class:`BrandDescriptor` exposing ``is_`` (type guard) and ``from_``
(validated construction)::

    EMAIL = create_brand(lambda v: isinstance(v, str) and "@" in v, Email)

    EMAIL.is_("a@b.com")        # True
    EMAIL.from_("a@b.com")      # "a@b.com", typed as Email
    EMAIL.from_("nope")         # BrandMismatchError

INVARIANT: a value belongs to a brand iff the predicate accepts it.
Results are never cached.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NewType, TypeGuard, TypeVar, cast

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from utilkit.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_ERROR_PREFIX = "Value does not match the brand criteria: "


def _display(value: Any) -> str:
    """``str(value)``, or the default object repr if that raises."""
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


class BrandMismatchError(TypeError):
    """Raised by :meth:`BrandDescriptor.from_` when the predicate rejects a value."""

    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.value = value


def is_brand(tp: Any) -> bool:
    """Whether *tp* was declared with ``typing.NewType``."""
    return isinstance(tp, NewType)


def unbrand(tp: Any) -> Any:
    """Return the base type of a brand, or *tp* unchanged if it is not one.

    Only one level is peeled: a brand declared over another brand yields
    the inner brand.

    Examples:
        >>> Milliseconds = NewType("Milliseconds", float)
        >>> unbrand(Milliseconds)
        <class 'float'>
        >>> unbrand(str)
        <class 'str'>
    """
    if is_brand(tp):
        return tp.__supertype__
    return tp


@dataclass(frozen=True, slots=True)
class BrandDescriptor(Generic[T]):
    """Validator/factory pair for one brand.

    Created once, usually at module level, and shared freely: it holds no
    mutable state besides the predicate it closes over.

    Attributes:
        predicate: Decides membership.  Expected to check the base
            representation first, then the domain rule, but nothing
            enforces that.
        brand: The ``NewType`` this descriptor validates, if any.  Only
            used for display.
    """

    predicate: Callable[[Any], bool]
    brand: Callable[..., T] | None = None

    @property
    def name(self) -> str:
        return getattr(self.brand, "__name__", "brand")

    def is_(self, value: Any) -> TypeGuard[T]:
        """Return True iff *value* satisfies the predicate."""
        return bool(self.predicate(value))

    def from_(self, value: Any, error_message: str | None = None) -> T:
        """Return *value* as the branded type, validating it first.

        Raises:
            BrandMismatchError: If the predicate rejects *value*.  The
                message is *error_message* verbatim when given, otherwise
                the default prefix followed by ``str(value)`` (or the
                plain object repr when ``__str__`` itself fails).
        """
        if self.is_(value):
            return cast(T, value)
        shown = _display(value)
        message = error_message if error_message is not None else DEFAULT_ERROR_PREFIX + shown
        logger.debug("brand.mismatch", brand=self.name, value=shown)
        raise BrandMismatchError(message, value)

    # -- pydantic integration -------------------------------------------------

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate ``Annotated[Brand, descriptor]`` fields with the predicate."""
        return core_schema.no_info_after_validator_function(
            self._validate_field, handler(source_type)
        )

    def _validate_field(self, value: Any) -> T:
        try:
            return self.from_(value)
        except BrandMismatchError as exc:
            raise PydanticCustomError(
                "brand_mismatch",
                "{message}",
                {"message": str(exc), "brand": self.name},
            ) from exc


def create_brand(
    predicate: Callable[[Any], bool],
    brand: Callable[..., T] | None = None,
) -> BrandDescriptor[T]:
    """Create the ``is_``/``from_`` pair for a brand.

    Args:
        predicate: Membership test.  Must be pure; it is called on every
            ``is_``/``from_`` call.
        brand: The ``NewType`` being validated.  Binds the descriptor's
            type parameter so ``from_`` returns the branded type.
    """
    return BrandDescriptor(predicate=predicate, brand=brand)
