"""
Optional containers for values that may or may not be present.

This module provides two null-safe single-value containers:

- ``Optional`` holds a right-hand (success) value.
- ``LeftOptional`` holds a left-hand (failure) value.

Both behave the same way. They are kept as separate types so that code which
converts between optionals and ``Either`` keeps track of which side a value
belongs to. Unlike a bare ``None`` check, ``map`` refuses mapper results of
``None`` instead of silently turning them into an empty container.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from eitherkit.errors import (
    MapperContractError,
    NoValuePresentError,
    require_non_none,
)

if TYPE_CHECKING:
    from typing import Self

    from eitherkit.core.either import Either

T = TypeVar("T")
U = TypeVar("U")
L = TypeVar("L")
R = TypeVar("R")


class AbstractOptional(Generic[T], ABC):
    """Base class for Optional and LeftOptional.

    Instances are immutable. There are exactly two concrete subclasses, both
    defined in this module; further subclassing is rejected.
    """

    __slots__ = ("_value",)

    _NAME: ClassVar[str] = "AbstractOptional"
    _EMPTY: ClassVar[AbstractOptional[Any]]

    _value: T | None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"{cls.__name__} cannot extend a sealed optional type")

    @classmethod
    def _require_concrete(cls) -> None:
        if cls is AbstractOptional:
            raise TypeError("Use Optional or LeftOptional, not AbstractOptional")

    @classmethod
    def _make(cls, value: T | None) -> Self:
        cls._require_concrete()
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", value)
        return instance

    @classmethod
    def of(cls, value: T) -> Self:
        """Return a container holding ``value``, which must not be None."""
        return cls._make(require_non_none(value, f"{cls._NAME}.of() requires a value"))

    @classmethod
    def of_nullable(cls, value: T | None) -> Self:
        """Return a container holding ``value``, or the empty one if it is None."""
        return cls.empty() if value is None else cls.of(value)

    @classmethod
    def empty(cls) -> Self:
        """Return the shared empty instance."""
        cls._require_concrete()
        return cls._EMPTY  # type: ignore[return-value]

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def if_present(self, action: Callable[[T], Any]) -> None:
        """Run ``action`` with the value, if present."""
        if self._value is not None:
            action(self._value)

    def if_present_or_else(
        self, action: Callable[[T], Any], empty_action: Callable[[], Any]
    ) -> None:
        """Run ``action`` with the value if present, otherwise ``empty_action``."""
        if self._value is not None:
            action(self._value)
        else:
            empty_action()

    def filter(self, predicate: Callable[[T], bool]) -> Self:
        """Keep the value only if it matches ``predicate``."""
        if self._value is None:
            return self
        return self if predicate(self._value) else self.empty()

    def map(self, mapper: Callable[[T], U]) -> AbstractOptional[U]:
        """Apply ``mapper`` to the value, if present.

        Raises:
            MapperContractError: if ``mapper`` returns None.
        """
        if self._value is None:
            return self.empty()
        result = mapper(self._value)
        if result is None:
            raise MapperContractError(f"{self._NAME}.map(): mapper returned None")
        return self._make(result)

    def flat_map(
        self, mapper: Callable[[T], AbstractOptional[U]]
    ) -> AbstractOptional[U]:
        """Return the container produced by ``mapper``, if a value is present.

        The result is not wrapped again. ``mapper`` must return a container of
        the same type as this one.
        """
        if self._value is None:
            return self.empty()
        return self._checked(mapper(self._value), "flat_map")

    def or_(self, supplier: Callable[[], AbstractOptional[T]]) -> Self:
        """Return this container if a value is present, else the supplied one."""
        if self._value is not None:
            return self
        return self._checked(supplier(), "or_")

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self._value if self._value is not None else supplier()

    def or_else_throw(
        self, exception_supplier: Callable[[], BaseException] | None = None
    ) -> T:
        """Return the value, or raise if it is absent.

        Raises:
            NoValuePresentError: if empty and no ``exception_supplier`` is given.
        """
        if self._value is not None:
            return self._value
        if exception_supplier is None:
            raise NoValuePresentError()
        raise exception_supplier()

    def _checked(self, result: Any, operation: str) -> Any:
        if not isinstance(result, type(self)):
            raise MapperContractError(
                f"{self._NAME}.{operation}(): expected {self._NAME}, "
                f"got {type(result).__name__}"
            )
        return result

    def __iter__(self) -> Iterator[T]:
        if self._value is not None:
            yield self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self._NAME} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self._NAME} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).of_nullable, (self._value,))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        other_value = other._value  # type: ignore[attr-defined]
        if self._value is None or other_value is None:
            return self._value is other_value
        return bool(self._value == other_value)

    def __hash__(self) -> int:
        return 0 if self._value is None else hash(self._value)

    def __str__(self) -> str:
        if self._value is None:
            return f"{self._NAME}.empty"
        return f"{self._NAME}[{self._value}]"

    def __repr__(self) -> str:
        if self._value is None:
            return f"{self._NAME}.empty()"
        return f"{self._NAME}.of({self._value!r})"


class Optional(AbstractOptional[R]):
    """A container which may hold a right-hand (success) value.

    It reads like ``java.util.Optional`` with two differences: ``map`` raises
    if the mapper returns None, and there is no ``get``; use
    ``or_else_throw()`` instead. Present values convert to a Right-Either
    with ``or_else_left`` and ``flat_map_left``.
    """

    __slots__ = ()

    _NAME = "Optional"

    def or_else_left(self, supplier: Callable[[], L]) -> Either[L, R]:
        """Return Right(value) if present, otherwise Left(supplier())."""
        from eitherkit.core.either import Either

        return self.flat_map_left(lambda: Either.left(supplier()))

    def flat_map_left(self, supplier: Callable[[], Either[L, R]]) -> Either[L, R]:
        """Return Right(value) if present, otherwise the Either from ``supplier``."""
        from eitherkit.core.either import Either

        if self._value is not None:
            return Either.right(self._value)
        result = supplier()
        if not isinstance(result, Either):
            raise MapperContractError(
                f"Optional.flat_map_left(): expected Either, got {type(result).__name__}"
            )
        return result


class LeftOptional(AbstractOptional[L]):
    """A container which may hold a left-hand (failure) value.

    Mirror image of ``Optional``: a present value converts to a Left-Either
    and absence converts to a Right-Either.
    """

    __slots__ = ()

    _NAME = "LeftOptional"

    def or_else_right(self, supplier: Callable[[], R]) -> Either[L, R]:
        """Return Left(value) if present, otherwise Right(supplier())."""
        from eitherkit.core.either import Either

        return self.flat_map_right(lambda: Either.right(supplier()))

    def flat_map_right(self, supplier: Callable[[], Either[L, R]]) -> Either[L, R]:
        """Return Left(value) if present, otherwise the Either from ``supplier``."""
        from eitherkit.core.either import Either

        if self._value is not None:
            return Either.left(self._value)
        result = supplier()
        if not isinstance(result, Either):
            raise MapperContractError(
                f"LeftOptional.flat_map_right(): expected Either, got {type(result).__name__}"
            )
        return result


Optional._EMPTY = Optional._make(None)
LeftOptional._EMPTY = LeftOptional._make(None)


__all__ = [
    "AbstractOptional",
    "LeftOptional",
    "Optional",
]
