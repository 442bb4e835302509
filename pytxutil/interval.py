"""Time intervals, used as the validity range of a transaction."""

from dataclasses import dataclass
from typing import ClassVar, Union

from pytxutil.types import typechecked

__all__ = [
    "NegativeInfinity",
    "Finite",
    "PositiveInfinity",
    "IntervalBoundType",
    "IntervalBound",
    "Interval",
    "ValidityRange",
    "everything",
    "after",
    "entirely_after",
    "before",
    "entirely_before",
    "between",
    "entirely_between",
]


@dataclass(frozen=True)
class NegativeInfinity:
    CONSTR_ID: ClassVar[int] = 0


@dataclass(frozen=True)
class Finite:
    CONSTR_ID: ClassVar[int] = 1

    value: int


@dataclass(frozen=True)
class PositiveInfinity:
    CONSTR_ID: ClassVar[int] = 2


IntervalBoundType = Union[NegativeInfinity, Finite, PositiveInfinity]


@dataclass(frozen=True)
class IntervalBound:
    CONSTR_ID: ClassVar[int] = 0

    bound_type: IntervalBoundType

    is_inclusive: bool


@dataclass(frozen=True)
class Interval:
    """An interval of POSIX times in milliseconds."""

    CONSTR_ID: ClassVar[int] = 0

    lower_bound: IntervalBound

    upper_bound: IntervalBound


ValidityRange = Interval


def everything() -> Interval:
    """The interval that contains every point in time."""
    return Interval(
        IntervalBound(NegativeInfinity(), True),
        IntervalBound(PositiveInfinity(), True),
    )


@typechecked
def after(lower_bound: int) -> Interval:
    """From ``lower_bound`` (included) onwards."""
    return Interval(
        IntervalBound(Finite(lower_bound), True),
        IntervalBound(PositiveInfinity(), True),
    )


@typechecked
def entirely_after(lower_bound: int) -> Interval:
    """Strictly after ``lower_bound``."""
    return Interval(
        IntervalBound(Finite(lower_bound), False),
        IntervalBound(PositiveInfinity(), True),
    )


@typechecked
def before(upper_bound: int) -> Interval:
    """Up to ``upper_bound`` (included)."""
    return Interval(
        IntervalBound(NegativeInfinity(), True),
        IntervalBound(Finite(upper_bound), True),
    )


@typechecked
def entirely_before(upper_bound: int) -> Interval:
    """Strictly before ``upper_bound``."""
    return Interval(
        IntervalBound(NegativeInfinity(), True),
        IntervalBound(Finite(upper_bound), False),
    )


@typechecked
def between(lower_bound: int, upper_bound: int) -> Interval:
    return Interval(
        IntervalBound(Finite(lower_bound), True),
        IntervalBound(Finite(upper_bound), True),
    )


@typechecked
def entirely_between(lower_bound: int, upper_bound: int) -> Interval:
    return Interval(
        IntervalBound(Finite(lower_bound), False),
        IntervalBound(Finite(upper_bound), False),
    )
