"""
Conversions between eitherkit containers and the ``returns`` library.

``Either`` maps onto ``returns.result.Result`` (Left is Failure, Right is
Success) and ``Optional`` maps onto ``returns.maybe.Maybe``.
"""

from typing import Any, TypeVar

from returns.maybe import Maybe
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from eitherkit.core.either import Either
from eitherkit.core.option import Optional

L = TypeVar("L")
R = TypeVar("R")


def to_result(either: Either[L, R]) -> Result[R, L]:
    """Convert Right(r) to Success(r) and Left(l) to Failure(l)."""
    return either.fold(Failure, Success)


def from_result(result: Result[R, L]) -> Either[L, R]:
    """Convert Success(r) to Right(r) and Failure(l) to Left(l).

    Raises:
        InvalidArgumentError: if the wrapped value is None.
    """
    if is_successful(result):
        return Either.right(result.unwrap())
    return Either.left(result.failure())


def to_maybe(optional: Optional[R]) -> Maybe[R]:
    """Convert a present Optional to Some and an empty one to Nothing."""
    return Maybe.from_optional(optional.or_else(None))


def from_maybe(maybe: Maybe[Any]) -> Optional[Any]:
    """Convert Some(v) to Optional.of(v) and Nothing to Optional.empty().

    ``Some(None)`` has no counterpart and becomes empty.
    """
    return Optional.of_nullable(maybe.value_or(None))


__all__ = [
    "from_maybe",
    "from_result",
    "to_maybe",
    "to_result",
]
