"""
Collectors that reduce a sequence of Either values into one aggregate Either.

A collector follows the four-step reduction protocol: a supplier creates an
empty accumulator, the accumulator consumes elements, partial accumulators
built from consecutive slices of the input may be combined, and a finisher
turns the final accumulator into the result.

Encounter order is preserved as long as partial accumulators are combined in
the original left-to-right order of their slices. Combining them out of
order is the caller's mistake and breaks the ordering guarantee.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from itertools import islice
from typing import Any, Generic, TypeVar

from eitherkit.core.either import Either
from eitherkit.core.option import Optional
from eitherkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")
L = TypeVar("L")


def _trace(message: str, *args: Any) -> None:
    from eitherkit.config import get_config

    if get_config().trace_collectors:
        logger.debug(message, *args)


def _require_either(element: Any) -> Either[Any, Any]:
    if not isinstance(element, Either):
        raise InvalidArgumentError(
            f"Expected an Either element, got {type(element).__name__}"
        )
    return element


class Collector(Generic[T, A, R]):
    """A reduction described by supplier, accumulator, combiner and finisher.

    The combiner must be associative: for partial accumulators built from
    consecutive slices ``a``, ``b`` and ``c``, combining ``(a, b)`` first
    or ``(b, c)`` first must finish to the same result.
    """

    def __init__(
        self,
        supplier: Callable[[], A],
        accumulator: Callable[[A, T], None],
        combiner: Callable[[A, A], A],
        finisher: Callable[[A], R],
    ) -> None:
        self.supplier = supplier
        self.accumulator = accumulator
        self.combiner = combiner
        self.finisher = finisher

    def accumulate_all(self, items: Iterable[T]) -> A:
        """Feed every item into a fresh accumulator and return it unfinished."""
        acc = self.supplier()
        for item in items:
            self.accumulator(acc, item)
        return acc

    def collect(self, items: Iterable[T]) -> R:
        """Run a sequential reduction over ``items``."""
        return self.finisher(self.accumulate_all(items))


class ValidatingAccumulator(Generic[L, R]):
    """Accumulator that keeps every Right value or only the first Left value."""

    __slots__ = ("left", "right")

    def __init__(self) -> None:
        self.left: L | None = None
        self.right: list[R] = []

    def accumulate(self, either: Either[L, R]) -> None:
        if self.left is not None:
            return
        _require_either(either).if_left_or_else(self._set_left, self.right.append)

    def _set_left(self, value: L) -> None:
        self.left = value

    def combine(self, other: ValidatingAccumulator[L, R]) -> ValidatingAccumulator[L, R]:
        """Merge ``other``, which holds the elements following this one.

        A Left recorded here comes from an earlier position than any Left in
        ``other``, so it wins.
        """
        _trace("Combining first-failure accumulators: %r + %r", self, other)
        if self.left is not None:
            return self
        if other.left is not None:
            return other
        self.right.extend(other.right)
        return self

    def finish(self) -> Either[L, list[R]]:
        """Return the result. It does not share lists with the accumulator."""
        result: Either[L, list[R]]
        if self.left is not None:
            result = Either.left(self.left)
        else:
            result = Either.right(list(self.right))
        _trace("Finished first-failure accumulator: %s", result)
        return result

    def __repr__(self) -> str:
        return f"ValidatingAccumulator(left={self.left!r}, right={self.right!r})"


class ValidatingAccumulatorAll(Generic[L, R]):
    """Accumulator that keeps every Left value, or every Right if there is no Left."""

    __slots__ = ("left", "right")

    def __init__(self) -> None:
        self.left: list[L] = []
        self.right: list[R] = []

    def accumulate(self, either: Either[L, R]) -> None:
        either = _require_either(either)
        if self.left:
            either.accept_left(self.left.append)
        else:
            either.if_left_or_else(self.left.append, self.right.append)

    def combine(
        self, other: ValidatingAccumulatorAll[L, R]
    ) -> ValidatingAccumulatorAll[L, R]:
        """Merge ``other``, which holds the elements following this one.

        Left values are concatenated in order. Once either side holds a Left,
        the Right values are no longer relevant.
        """
        _trace("Combining all-failures accumulators: %r + %r", self, other)
        if self.left:
            self.left.extend(other.left)
            return self
        if other.left:
            return other
        self.right.extend(other.right)
        return self

    def finish(self) -> Either[list[L], list[R]]:
        """Return the result. It does not share lists with the accumulator."""
        result: Either[list[L], list[R]]
        if self.left:
            result = Either.left(list(self.left))
        else:
            result = Either.right(list(self.right))
        _trace("Finished all-failures accumulator: %s", result)
        return result

    def __repr__(self) -> str:
        return f"ValidatingAccumulatorAll(left={self.left!r}, right={self.right!r})"


def to_valid_list() -> Collector[
    Either[L, R], ValidatingAccumulator[L, R], Either[L, list[R]]
]:
    """Collect into Right(all values in order), or Left(the first left value).

    Once a Left has been seen, the remaining elements are not inspected.
    """
    return Collector(
        ValidatingAccumulator,
        ValidatingAccumulator.accumulate,
        ValidatingAccumulator.combine,
        ValidatingAccumulator.finish,
    )


def to_valid_list_all() -> Collector[
    Either[L, R], ValidatingAccumulatorAll[L, R], Either[list[L], list[R]]
]:
    """Collect into Right(all values in order), or Left(all left values in order)."""
    return Collector(
        ValidatingAccumulatorAll,
        ValidatingAccumulatorAll.accumulate,
        ValidatingAccumulatorAll.combine,
        ValidatingAccumulatorAll.finish,
    )


def _combine_lists(first: list[T], second: list[T]) -> list[T]:
    first.extend(second)
    return first


def optional_list(values: Sequence[T]) -> Optional[list[T]]:
    """Return empty if ``values`` is empty, otherwise Optional.of(list(values)).

    The result can be returned from an ``Either.filter`` or
    ``Either.filter_left`` predicate.
    """
    if not values:
        return Optional.empty()
    return Optional.of(list(values))


def to_optional_list() -> Collector[T, list[T], Optional[list[T]]]:
    """Collect into a list, wrapped as by ``optional_list``."""
    return Collector(list, list.append, _combine_lists, optional_list)


def collect(items: Iterable[T], collector: Collector[T, Any, R]) -> R:
    """Reduce ``items`` sequentially with ``collector``."""
    return collector.collect(items)


def collect_partitioned(
    items: Iterable[T], collector: Collector[T, Any, R], partition_size: int
) -> R:
    """Reduce ``items`` slice by slice, then combine the partial results.

    Each run of ``partition_size`` consecutive items gets its own accumulator,
    as a parallel reducer would do. The partial accumulators are combined
    left to right, so the result always equals ``collect(items, collector)``.
    """
    if partition_size < 1:
        raise InvalidArgumentError(
            f"partition_size must be at least 1, got {partition_size}"
        )
    iterator = iter(items)
    partials = []
    while chunk := list(islice(iterator, partition_size)):
        partials.append(collector.accumulate_all(chunk))
    _trace("Combining %d partial accumulators", len(partials))
    if not partials:
        return collector.finisher(collector.supplier())
    merged = partials[0]
    for partial in partials[1:]:
        merged = collector.combiner(merged, partial)
    return collector.finisher(merged)


__all__ = [
    "Collector",
    "ValidatingAccumulator",
    "ValidatingAccumulatorAll",
    "collect",
    "collect_partitioned",
    "optional_list",
    "to_optional_list",
    "to_valid_list",
    "to_valid_list_all",
]
