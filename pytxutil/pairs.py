"""Association sequences kept sorted under a caller-supplied key order.

Withdrawals, redeemers and votes of a transaction are such sequences. Their order
is neither insertion order nor hash order: it is whatever total order the caller
passes in. Every keyed operation takes that comparator explicitly, and all
operations on one sequence must use the same comparator, otherwise the sequence
is no longer guaranteed to be sorted. The container does not check this.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from fractions import Fraction
from functools import cmp_to_key
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from frozenlist import FrozenList

from pytxutil.exception import InvalidArgumentException, MalformedSequenceException
from pytxutil.hash import ConstrainedBytes
from pytxutil.types import typechecked, validate_pairs_by_default

__all__ = [
    "Ordering",
    "Comparator",
    "Pairs",
    "set_pairs",
    "insert_or_replace",
    "insert_with",
    "get",
    "has_key",
    "delete",
    "keys",
    "values",
    "is_sorted",
    "validate_order",
    "compare_int",
    "compare_bytes",
    "compare_data",
]

K = TypeVar("K")
V = TypeVar("V")


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


Comparator = Callable[[Any, Any], Union[Ordering, int]]
"""Returns an :class:`Ordering`, or a negative, zero or positive int like a ``cmp``
function."""


def _as_pair(item: Any) -> Tuple[Any, Any]:
    if not isinstance(item, (tuple, list)) or len(item) != 2:
        raise InvalidArgumentException(f"Expected a (key, value) pair, got {item!r}.")
    return tuple(item)


def _order(result: Any) -> Ordering:
    """Read a comparator result, which is an :class:`Ordering` or a ``cmp``-style
    integer."""
    if isinstance(result, Ordering):
        return result
    if isinstance(result, int) and not isinstance(result, bool):
        return _from_python(result)
    raise TypeError(
        f"A comparator must return an Ordering or an int, got {type(result)}."
    )


class Pairs(Generic[K, V]):
    """An immutable sequence of ``(key, value)`` pairs.

    Constructing a :class:`Pairs` directly takes the items as given, without
    checking order or uniqueness. Use :func:`set_pairs` to ask for validation.
    """

    __slots__ = "_items"

    def __init__(
        self,
        items: Optional[Union[Mapping[K, V], Iterable[Tuple[K, V]]]] = None,
    ):
        if isinstance(items, Mapping):
            items = items.items()
        frozen = FrozenList(_as_pair(item) for item in (items or ()))
        frozen.freeze()
        self._items = frozen

    @classmethod
    def _from_list(cls, items: List[Tuple[K, V]]) -> Pairs[K, V]:
        pairs = cls.__new__(cls)
        frozen = FrozenList(items)
        frozen.freeze()
        pairs._items = frozen
        return pairs

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Tuple[K, V]:
        return self._items[index]

    def __eq__(self, other):
        if isinstance(other, Pairs):
            return list(self._items) == list(other._items)
        if isinstance(other, list):
            return list(self._items) == other
        return False

    def __hash__(self):
        return hash(self._items)

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self._items)})"


def _search(seq: Pairs[K, V], key: K, compare: Comparator) -> Tuple[int, bool]:
    """Binary search for ``key``. Returns its position, or the position where it
    belongs, and whether it was found."""
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        order = _order(compare(seq[mid][0], key))
        if order == Ordering.LESS:
            lo = mid + 1
        elif order == Ordering.GREATER:
            hi = mid
        else:
            return mid, True
    return lo, False


@typechecked
def set_pairs(
    items: Union[Pairs, Iterable[Tuple[Any, Any]]],
    validate: Optional[bool] = None,
    compare: Optional[Comparator] = None,
) -> Pairs:
    """Wholesale replacement of a sequence from pre-built pairs.

    By default the items are taken as they are: sorting and de-duplicating is the
    caller's job. With ``validate=True``, or with ``PYTXUTIL_VALIDATE_PAIRS`` set,
    the items are checked against ``compare`` first.

    Raises:
        MalformedSequenceException: Validation was requested and the keys are not
            strictly ascending under ``compare``.
        ValueError: Validation was requested without a comparator.
    """
    seq = items if isinstance(items, Pairs) else Pairs(items)
    if validate is None:
        validate = validate_pairs_by_default()
    if validate:
        if compare is None:
            raise ValueError("A comparator is required to validate pairs.")
        validate_order(seq, compare)
    return seq


@typechecked
def insert_or_replace(seq: Pairs, key: Any, value: Any, compare: Comparator) -> Pairs:
    """Upsert ``(key, value)``.

    An existing equal key keeps its position and gets ``value``; otherwise the pair
    is inserted where it keeps ``seq`` sorted under ``compare``. Never fails.
    """
    index, found = _search(seq, key, compare)
    items = list(seq)
    if found:
        items[index] = (items[index][0], value)
    else:
        items.insert(index, (key, value))
    return Pairs._from_list(items)


@typechecked
def insert_with(
    seq: Pairs,
    key: Any,
    value: Any,
    compare: Comparator,
    combine: Callable[[Any, Any, Any], Optional[Any]],
) -> Pairs:
    """Like :func:`insert_or_replace`, but on collision store
    ``combine(key, old, new)``. A ``None`` result removes the entry."""
    index, found = _search(seq, key, compare)
    items = list(seq)
    if not found:
        items.insert(index, (key, value))
        return Pairs._from_list(items)
    combined = combine(key, items[index][1], value)
    if combined is None:
        del items[index]
    else:
        items[index] = (items[index][0], combined)
    return Pairs._from_list(items)


def get(seq: Pairs, key: Any, compare: Comparator, default: Any = None) -> Any:
    index, found = _search(seq, key, compare)
    return seq[index][1] if found else default


def has_key(seq: Pairs, key: Any, compare: Comparator) -> bool:
    return _search(seq, key, compare)[1]


def delete(seq: Pairs, key: Any, compare: Comparator) -> Pairs:
    index, found = _search(seq, key, compare)
    if not found:
        return seq
    items = list(seq)
    del items[index]
    return Pairs._from_list(items)


def keys(seq: Pairs) -> List[Any]:
    return [k for k, _ in seq]


def values(seq: Pairs) -> List[Any]:
    return [v for _, v in seq]


def is_sorted(seq: Pairs, compare: Comparator) -> bool:
    """Whether keys are strictly ascending, i.e. sorted and unique."""
    return all(
        _order(compare(seq[i][0], seq[i + 1][0])) == Ordering.LESS
        for i in range(len(seq) - 1)
    )


def validate_order(seq: Pairs, compare: Comparator) -> Pairs:
    """Raise :class:`MalformedSequenceException` unless keys are strictly ascending."""
    for i in range(len(seq) - 1):
        order = _order(compare(seq[i][0], seq[i + 1][0]))
        if order == Ordering.EQUAL:
            raise MalformedSequenceException(
                f"Duplicate key {seq[i][0]} at positions {i} and {i + 1}."
            )
        if order == Ordering.GREATER:
            raise MalformedSequenceException(
                f"Key {seq[i + 1][0]} at position {i + 1} is out of order."
            )
    return seq


def _from_python(order: int) -> Ordering:
    if order < 0:
        return Ordering.LESS
    if order > 0:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_int(left: int, right: int) -> Ordering:
    return _from_python((left > right) - (left < right))


def compare_bytes(
    left: Union[bytes, ConstrainedBytes], right: Union[bytes, ConstrainedBytes]
) -> Ordering:
    left, right = bytes(left), bytes(right)
    return _from_python((left > right) - (left < right))


# Rank of non-constructor data kinds, constructors rank below all of them.
_MAP, _LIST, _INT, _BYTES = 1, 2, 3, 4


def _shape(obj: Any) -> Tuple[int, Any, List[Any]]:
    """Break ``obj`` into (kind rank, scalar, children) for :func:`compare_data`."""
    if obj is None:
        return 0, -1, []
    if isinstance(obj, bool):
        return 0, int(obj), []
    if isinstance(obj, Enum):
        return 0, obj.value, []
    if hasattr(obj, "CONSTR_ID") and dataclasses.is_dataclass(obj):
        return (
            0,
            obj.CONSTR_ID,
            [getattr(obj, f.name) for f in dataclasses.fields(obj)],
        )
    if isinstance(obj, int):
        return _INT, obj, []
    if isinstance(obj, (bytes, ConstrainedBytes)):
        return _BYTES, bytes(obj), []
    if isinstance(obj, str):
        return _BYTES, obj.encode("utf-8"), []
    if isinstance(obj, Fraction):
        return _LIST, None, [obj.numerator, obj.denominator]
    if isinstance(obj, Pairs):
        return _MAP, None, [x for pair in obj for x in pair]
    if isinstance(obj, dict):
        return _MAP, None, [x for pair in _sorted_items(obj) for x in pair]
    if hasattr(obj, "to_dict"):
        return _shape(obj.to_dict())
    if isinstance(obj, (list, tuple, FrozenList)):
        return _LIST, None, list(obj)
    raise TypeError(f"Cannot order object of type {type(obj)}: {obj}")


def _sorted_items(mapping: dict) -> List[Tuple[Any, Any]]:
    return sorted(
        mapping.items(),
        key=cmp_to_key(lambda a, b: compare_data(a[0], b[0]).value),
    )


def compare_data(left: Any, right: Any) -> Ordering:
    """A structural total order over ledger records.

    Records and variants order by constructor index, then field by field from left
    to right. Among other data, constructors < maps < lists < integers < bytes;
    lists and maps compare element-wise, a shorter prefix first. ``None`` orders
    before any present value.
    """
    left_rank, left_scalar, left_children = _shape(left)
    right_rank, right_scalar, right_children = _shape(right)
    if left_rank != right_rank:
        return compare_int(left_rank, right_rank)
    if left_scalar != right_scalar:
        return _from_python(
            (left_scalar > right_scalar) - (left_scalar < right_scalar)
        )
    for left_child, right_child in zip(left_children, right_children):
        order = compare_data(left_child, right_child)
        if order != Ordering.EQUAL:
            return order
    return compare_int(len(left_children), len(right_children))
