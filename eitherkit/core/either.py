"""
Either type for values that are one of two alternatives.

An Either is either a Left holding a left-hand value or a Right holding a
right-hand value, never both and never neither. By convention a Right holds
the result of a successful computation and a Left holds some kind of failure
object.

Neither side may hold None. Instances are immutable, and the only two
variants are Left and Right; the hierarchy cannot be extended.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, final

from eitherkit.core.option import AbstractOptional, LeftOptional, Optional
from eitherkit.errors import MapperContractError, require_non_none

if TYPE_CHECKING:
    from eitherkit.core.collectors import Collector

L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
U = TypeVar("U")


def _ignore(_value: Any) -> None:
    pass


def _mapped(result: U | None, operation: str) -> U:
    if result is None:
        raise MapperContractError(f"Either.{operation}(): mapper returned None")
    return result


def _narrow(result: Any, operation: str) -> Either[Any, Any]:
    if not isinstance(result, Either):
        raise MapperContractError(
            f"Either.{operation}(): expected Either, got {type(result).__name__}"
        )
    return result


def _test(result: Any, operation: str) -> AbstractOptional[Any]:
    if not isinstance(result, AbstractOptional):
        raise MapperContractError(
            f"Either.{operation}(): predicate must return an optional, "
            f"got {type(result).__name__}"
        )
    return result


class Either(Generic[L, R], ABC):
    """Abstract base class for Left and Right."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"{cls.__name__}: Either has exactly two variants")

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        """Return a Left holding ``value``, which must not be None."""
        return Left(value)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        """Return a Right holding ``value``, which must not be None."""
        return Right(value)

    @staticmethod
    def to_valid_list() -> Collector[Either[L, R], Any, Either[L, list[R]]]:
        """Same as ``eitherkit.core.collectors.to_valid_list``."""
        from eitherkit.core.collectors import to_valid_list

        return to_valid_list()

    @staticmethod
    def to_valid_list_all() -> Collector[Either[L, R], Any, Either[list[L], list[R]]]:
        """Same as ``eitherkit.core.collectors.to_valid_list_all``."""
        from eitherkit.core.collectors import to_valid_list_all

        return to_valid_list_all()

    @abstractmethod
    def is_left(self) -> bool:
        """Check if this is a Left."""

    def is_right(self) -> bool:
        """Check if this is a Right."""
        return not self.is_left()

    @abstractmethod
    def get_left(self) -> LeftOptional[L]:
        """Return the left-hand value, or an empty LeftOptional for a Right."""

    @abstractmethod
    def get_right(self) -> Optional[R]:
        """Return the right-hand value, or an empty Optional for a Left."""

    @abstractmethod
    def map(self, mapper: Callable[[R], R2]) -> Either[L, R2]:
        """Map ``mapper`` over a Right value, preserving a Left."""

    @abstractmethod
    def flat_map(self, mapper: Callable[[R], Either[L, R2]]) -> Either[L, R2]:
        """Replace a Right with the Either returned by ``mapper``."""

    @abstractmethod
    def filter(
        self, predicate: Callable[[R], AbstractOptional[L]]
    ) -> Either[L, R]:
        """Turn a Right into a Left if ``predicate`` returns a present value.

        ``predicate`` returns an optional container: empty keeps the Right,
        a present value ``x`` yields ``Left(x)``. A Left is returned as is.
        """

    @abstractmethod
    def map_left(self, mapper: Callable[[L], L2]) -> Either[L2, R]:
        """Map ``mapper`` over a Left value, preserving a Right."""

    @abstractmethod
    def flat_map_left(self, mapper: Callable[[L], Either[L2, R]]) -> Either[L2, R]:
        """Replace a Left with the Either returned by ``mapper``."""

    @abstractmethod
    def filter_left(
        self, predicate: Callable[[L], AbstractOptional[R]]
    ) -> Either[L, R]:
        """Turn a Left into a Right if ``predicate`` returns a present value."""

    @abstractmethod
    def fold(
        self,
        left_mapper: Callable[[L], U],
        right_mapper: Callable[[R], U],
    ) -> U:
        """Apply ``left_mapper`` to a Left value or ``right_mapper`` to a Right value."""

    @abstractmethod
    def if_left_or_else(
        self,
        left_action: Callable[[L], Any],
        right_action: Callable[[R], Any],
    ) -> None:
        """Run ``left_action`` for a Left, otherwise ``right_action``."""

    @abstractmethod
    def or_else_throw(self, exception_factory: Callable[[L], BaseException]) -> R:
        """Return the Right value, or raise ``exception_factory(left_value)``."""

    def accept(
        self,
        left_action: Callable[[L], Any],
        right_action: Callable[[R], Any],
    ) -> None:
        self.if_left_or_else(left_action, right_action)

    def accept_left(self, left_action: Callable[[L], Any]) -> None:
        self.if_left_or_else(left_action, _ignore)

    def accept_right(self, right_action: Callable[[R], Any]) -> None:
        self.if_left_or_else(_ignore, right_action)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


@final
class Left(Either[L, R]):
    """Left side of Either, by convention a failure."""

    __slots__ = ("_value",)

    _value: L

    def __init__(self, value: L) -> None:
        object.__setattr__(
            self, "_value", require_non_none(value, "Left value must not be None")
        )

    def is_left(self) -> bool:
        return True

    def get_left(self) -> LeftOptional[L]:
        return LeftOptional.of(self._value)

    def get_right(self) -> Optional[R]:
        return Optional.empty()

    def map(self, mapper: Callable[[R], R2]) -> Either[L, R2]:
        return self  # type: ignore[return-value]

    def flat_map(self, mapper: Callable[[R], Either[L, R2]]) -> Either[L, R2]:
        return self  # type: ignore[return-value]

    def filter(
        self, predicate: Callable[[R], AbstractOptional[L]]
    ) -> Either[L, R]:
        return self

    def map_left(self, mapper: Callable[[L], L2]) -> Either[L2, R]:
        return Left(_mapped(mapper(self._value), "map_left"))

    def flat_map_left(self, mapper: Callable[[L], Either[L2, R]]) -> Either[L2, R]:
        return _narrow(mapper(self._value), "flat_map_left")

    def filter_left(
        self, predicate: Callable[[L], AbstractOptional[R]]
    ) -> Either[L, R]:
        test = _test(predicate(self._value), "filter_left")
        if test.is_empty():
            return self
        return Right(test.or_else_throw())

    def fold(
        self,
        left_mapper: Callable[[L], U],
        right_mapper: Callable[[R], U],
    ) -> U:
        return left_mapper(self._value)

    def if_left_or_else(
        self,
        left_action: Callable[[L], Any],
        right_action: Callable[[R], Any],
    ) -> None:
        left_action(self._value)

    def or_else_throw(
        self, exception_factory: Callable[[L], BaseException]
    ) -> NoReturn:
        raise exception_factory(self._value)

    def __reduce__(self) -> tuple[Any, ...]:
        return (Left, (self._value,))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Left):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return f"Left[{self._value}]"

    def __repr__(self) -> str:
        return f"Left({self._value!r})"


@final
class Right(Either[L, R]):
    """Right side of Either, by convention a success."""

    __slots__ = ("_value",)

    _value: R

    def __init__(self, value: R) -> None:
        object.__setattr__(
            self, "_value", require_non_none(value, "Right value must not be None")
        )

    def is_left(self) -> bool:
        return False

    def get_left(self) -> LeftOptional[L]:
        return LeftOptional.empty()

    def get_right(self) -> Optional[R]:
        return Optional.of(self._value)

    def map(self, mapper: Callable[[R], R2]) -> Either[L, R2]:
        return Right(_mapped(mapper(self._value), "map"))

    def flat_map(self, mapper: Callable[[R], Either[L, R2]]) -> Either[L, R2]:
        return _narrow(mapper(self._value), "flat_map")

    def filter(
        self, predicate: Callable[[R], AbstractOptional[L]]
    ) -> Either[L, R]:
        test = _test(predicate(self._value), "filter")
        if test.is_empty():
            return self
        return Left(test.or_else_throw())

    def map_left(self, mapper: Callable[[L], L2]) -> Either[L2, R]:
        return self  # type: ignore[return-value]

    def flat_map_left(self, mapper: Callable[[L], Either[L2, R]]) -> Either[L2, R]:
        return self  # type: ignore[return-value]

    def filter_left(
        self, predicate: Callable[[L], AbstractOptional[R]]
    ) -> Either[L, R]:
        return self

    def fold(
        self,
        left_mapper: Callable[[L], U],
        right_mapper: Callable[[R], U],
    ) -> U:
        return right_mapper(self._value)

    def if_left_or_else(
        self,
        left_action: Callable[[L], Any],
        right_action: Callable[[R], Any],
    ) -> None:
        right_action(self._value)

    def or_else_throw(self, exception_factory: Callable[[L], BaseException]) -> R:
        return self._value

    def __reduce__(self) -> tuple[Any, ...]:
        return (Right, (self._value,))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Right):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return f"Right[{self._value}]"

    def __repr__(self) -> str:
        return f"Right({self._value!r})"


# Utility functions for creating Either instances
def left(value: L) -> Either[L, Any]:
    """Create a Left Either."""
    return Left(value)


def right(value: R) -> Either[Any, R]:
    """Create a Right Either."""
    return Right(value)


__all__ = [
    "Either",
    "Left",
    "Right",
    "left",
    "right",
]
