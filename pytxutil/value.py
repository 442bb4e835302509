"""Multi-asset values and the arithmetic over them."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pytxutil.hash import ConstrainedBytes
from pytxutil.types import typechecked

__all__ = [
    "ADA_POLICY_ID",
    "ADA_ASSET_NAME",
    "AssetKey",
    "Lovelace",
    "Value",
    "zero",
    "from_asset",
    "from_asset_list",
    "from_lovelace",
    "merge",
    "add",
    "negate",
    "without_lovelace",
    "lovelace_of",
    "quantity_of",
    "tokens",
    "policies",
    "flatten",
    "is_zero",
]

ADA_POLICY_ID = b""
"""Policy under which the native currency is accounted."""

ADA_ASSET_NAME = b""

Lovelace = int

AssetKey = Union[bytes, str, ConstrainedBytes]
"""Policy ids and asset names. Strings are taken as UTF-8 text."""

_Assets = Dict[bytes, Dict[bytes, int]]


def _key(key: AssetKey) -> bytes:
    if isinstance(key, ConstrainedBytes):
        return key.payload
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


class Value:
    """An immutable bundle of asset quantities, keyed by policy id then asset name.

    No entry with a zero quantity and no empty policy is ever stored, so two values
    holding the same amounts compare equal no matter how they were built.

    Args:
        assets: A nested mapping ``{policy_id: {asset_name: quantity}}``.
    """

    __slots__ = "_assets"

    def __init__(
        self, assets: Optional[Mapping[AssetKey, Mapping[AssetKey, int]]] = None
    ):
        # Keys that encode to the same bytes add up before zeros are dropped.
        totals: _Assets = {}
        for policy, names in (assets or {}).items():
            current = totals.setdefault(_key(policy), {})
            for name, quantity in names.items():
                current[_key(name)] = current.get(_key(name), 0) + quantity
        normalized: _Assets = {}
        for policy, names in totals.items():
            kept = {name: q for name, q in names.items() if q != 0}
            if kept:
                normalized[policy] = kept
        self._assets = normalized

    @classmethod
    def _from_normalized(cls, assets: _Assets) -> Value:
        # Inner maps may be shared with other values; none of them is ever mutated.
        value = cls.__new__(cls)
        value._assets = assets
        return value

    def to_dict(self) -> Dict[bytes, Dict[bytes, int]]:
        return {p: dict(names) for p, names in self._assets.items()}

    def __eq__(self, other):
        if not isinstance(other, Value):
            return False
        return self._assets == other._assets

    def __hash__(self):
        return hash(
            frozenset(
                (p, frozenset(names.items())) for p, names in self._assets.items()
            )
        )

    def __bool__(self):
        return bool(self._assets)

    def __add__(self, other: Value) -> Value:
        return merge(self, other)

    def __sub__(self, other: Value) -> Value:
        return merge(self, negate(other))

    def __neg__(self) -> Value:
        return negate(self)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.to_dict()})"


def zero() -> Value:
    """The empty value, identity element of :func:`merge`."""
    return Value()


@typechecked
def from_asset(policy_id: AssetKey, asset_name: AssetKey, quantity: int) -> Value:
    """A value holding a single asset.

    A negative quantity describes a burn, a zero quantity yields :func:`zero`.
    """
    return Value({policy_id: {asset_name: quantity}})


@typechecked
def from_asset_list(
    xs: Iterable[Tuple[AssetKey, Iterable[Tuple[AssetKey, int]]]]
) -> Value:
    """Build a value from ``[(policy_id, [(asset_name, quantity), ...]), ...]``.

    Repeated (policy, asset name) pairs accumulate.
    """
    result = zero()
    for policy_id, names in xs:
        for asset_name, quantity in names:
            result = add(result, policy_id, asset_name, quantity)
    return result


@typechecked
def from_lovelace(quantity: Lovelace) -> Value:
    """A value holding only native currency."""
    return Value({ADA_POLICY_ID: {ADA_ASSET_NAME: quantity}})


def _combine(left: _Assets, right: _Assets) -> _Assets:
    result = dict(left)
    for policy, names in right.items():
        current = result.get(policy)
        if current is None:
            result[policy] = names
            continue
        combined = dict(current)
        for name, quantity in names.items():
            total = combined.get(name, 0) + quantity
            if total == 0:
                combined.pop(name, None)
            else:
                combined[name] = total
        if combined:
            result[policy] = combined
        else:
            del result[policy]
    return result


@typechecked
def merge(left: Value, right: Value) -> Value:
    """Sum two values asset by asset.

    Total, commutative and associative. Quantities that cancel out are dropped
    together with any policy left without assets.
    """
    if not right:
        return left
    if not left:
        return right
    return Value._from_normalized(_combine(left._assets, right._assets))


@typechecked
def add(
    value: Value, policy_id: AssetKey, asset_name: AssetKey, quantity: int
) -> Value:
    """Add ``quantity`` of a single asset to ``value``."""
    return merge(value, from_asset(policy_id, asset_name, quantity))


def negate(value: Value) -> Value:
    return Value._from_normalized(
        {p: {n: -q for n, q in names.items()} for p, names in value._assets.items()}
    )


def without_lovelace(value: Value) -> Value:
    assets = dict(value._assets)
    assets.pop(ADA_POLICY_ID, None)
    return Value._from_normalized(assets)


def lovelace_of(value: Value) -> Lovelace:
    return value._assets.get(ADA_POLICY_ID, {}).get(ADA_ASSET_NAME, 0)


def quantity_of(value: Value, policy_id: AssetKey, asset_name: AssetKey) -> int:
    return value._assets.get(_key(policy_id), {}).get(_key(asset_name), 0)


def tokens(value: Value, policy_id: AssetKey) -> Dict[bytes, int]:
    """All assets of one policy, as a fresh ``{asset_name: quantity}`` dict."""
    return dict(value._assets.get(_key(policy_id), {}))


def policies(value: Value) -> List[bytes]:
    """Policy ids present in ``value``, in ascending byte order."""
    return sorted(value._assets)


def flatten(
    value: Value,
    criteria: Optional[Callable[[bytes, bytes, int], bool]] = None,
) -> List[Tuple[bytes, bytes, int]]:
    """List ``(policy_id, asset_name, quantity)`` triples in ascending key order.

    Args:
        value: The value to flatten.
        criteria: Optional filter taking (policy_id, asset_name, quantity). Triples for
            which it returns False are skipped.
    """
    return [
        (p, n, value._assets[p][n])
        for p in sorted(value._assets)
        for n in sorted(value._assets[p])
        if criteria is None or criteria(p, n, value._assets[p][n])
    ]


def is_zero(value: Value) -> bool:
    return not value
