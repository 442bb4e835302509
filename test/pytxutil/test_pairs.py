import pytest

from pytxutil.address import ScriptCredential, VerificationKeyCredential
from pytxutil.exception import InvalidArgumentException, MalformedSequenceException
from pytxutil.governance import Vote
from pytxutil.pairs import (
    Ordering,
    Pairs,
    compare_bytes,
    compare_data,
    compare_int,
    delete,
    get,
    has_key,
    insert_or_replace,
    insert_with,
    is_sorted,
    keys,
    set_pairs,
    validate_order,
    values,
)
from pytxutil.value import from_asset
from test.pytxutil.util import script_hash, vkh


def reverse_int(left, right):
    return compare_int(right, left)


def build(ks, compare=compare_int):
    seq = Pairs()
    for k in ks:
        seq = insert_or_replace(seq, k, str(k), compare)
    return seq


def test_insert_keeps_order():
    seq = build([5, 1, 3, 4, 2])
    assert keys(seq) == [1, 2, 3, 4, 5]
    assert values(seq) == ["1", "2", "3", "4", "5"]
    assert is_sorted(seq, compare_int)


def test_insert_under_caller_order():
    seq = build([5, 1, 3, 4, 2], reverse_int)
    assert keys(seq) == [5, 4, 3, 2, 1]
    assert is_sorted(seq, reverse_int)


def test_replace_existing_key():
    seq = build([1, 2, 3])
    first = insert_or_replace(seq, 2, "v1", compare_int)
    second = insert_or_replace(first, 2, "v2", compare_int)
    assert len(second) == len(first) == 3
    assert list(second) == [(1, "1"), (2, "v2"), (3, "3")]


def test_insert_does_not_change_argument():
    seq = build([1, 3])
    insert_or_replace(seq, 2, "2", compare_int)
    insert_or_replace(seq, 3, "x", compare_int)
    assert list(seq) == [(1, "1"), (3, "3")]


@pytest.mark.parametrize("key", [0, 1, 2, 3, 4, 5, 6])
def test_insert_preserves_sortedness(key):
    seq = build([1, 3, 5])
    result = insert_or_replace(seq, key, "new", compare_int)
    assert is_sorted(result, compare_int)
    assert get(result, key, compare_int) == "new"


def test_insert_with_combines():
    seq = build([1, 2])
    result = insert_with(seq, 2, "b", compare_int, lambda k, old, new: old + new)
    assert get(result, 2, compare_int) == "2b"
    result = insert_with(result, 3, "c", compare_int, lambda k, old, new: old + new)
    assert keys(result) == [1, 2, 3]


def test_insert_with_removes_on_none():
    seq = build([1, 2])
    result = insert_with(seq, 1, "x", compare_int, lambda k, old, new: None)
    assert keys(result) == [2]


def test_get_has_key_delete():
    seq = build([1, 2, 3])
    assert get(seq, 4, compare_int) is None
    assert get(seq, 4, compare_int, default="d") == "d"
    assert has_key(seq, 3, compare_int)
    assert not has_key(seq, 7, compare_int)
    assert keys(delete(seq, 2, compare_int)) == [1, 3]
    assert delete(seq, 7, compare_int) is seq


def test_set_pairs_accepts_anything_by_default():
    seq = set_pairs([(3, "a"), (1, "b"), (3, "c")])
    assert list(seq) == [(3, "a"), (1, "b"), (3, "c")]
    assert not is_sorted(seq, compare_int)


def test_set_pairs_validation():
    assert set_pairs([(1, "a"), (2, "b")], validate=True, compare=compare_int) == [
        (1, "a"),
        (2, "b"),
    ]
    with pytest.raises(MalformedSequenceException, match="Duplicate key"):
        set_pairs([(1, "a"), (1, "b")], validate=True, compare=compare_int)
    with pytest.raises(MalformedSequenceException, match="out of order"):
        set_pairs([(2, "a"), (1, "b")], validate=True, compare=compare_int)
    with pytest.raises(ValueError, match="comparator"):
        set_pairs([(2, "a"), (1, "b")], validate=True)


def test_set_pairs_validation_from_env(monkeypatch):
    monkeypatch.setenv("PYTXUTIL_VALIDATE_PAIRS", "true")
    with pytest.raises(MalformedSequenceException):
        set_pairs([(2, "a"), (1, "b")], compare=compare_int)
    assert len(set_pairs([(2, "a"), (1, "b")], validate=False)) == 2


def test_validate_order():
    seq = build([1, 2])
    assert validate_order(seq, compare_int) is seq
    with pytest.raises(MalformedSequenceException):
        validate_order(seq, reverse_int)


def test_pairs_equality():
    assert Pairs([(1, "a")]) == Pairs([(1, "a")])
    assert Pairs([(1, "a")]) == [(1, "a")]
    assert Pairs([(1, "a")]) != Pairs([(1, "b")])
    assert hash(Pairs([(1, "a")])) == hash(Pairs([(1, "a")]))


def test_compare_bytes():
    assert compare_bytes(b"a", b"b") == Ordering.LESS
    assert compare_bytes(vkh(2), vkh(1)) == Ordering.GREATER
    assert compare_bytes(b"", b"") == Ordering.EQUAL


def test_compare_data_constructor_first():
    key = VerificationKeyCredential(vkh(9))
    script = ScriptCredential(script_hash(1))
    assert compare_data(key, script) == Ordering.LESS
    assert compare_data(script, key) == Ordering.GREATER


def test_compare_data_fields():
    assert (
        compare_data(
            VerificationKeyCredential(vkh(1)), VerificationKeyCredential(vkh(2))
        )
        == Ordering.LESS
    )
    assert (
        compare_data(
            VerificationKeyCredential(vkh(1)), VerificationKeyCredential(vkh(1))
        )
        == Ordering.EQUAL
    )


def test_compare_data_kinds():
    assert compare_data(Vote.YES, 0) == Ordering.LESS
    assert compare_data(0, b"") == Ordering.LESS
    assert compare_data([1, 2], [1, 2, 0]) == Ordering.LESS
    assert compare_data({b"a": 1}, [1]) == Ordering.LESS
    assert compare_data(None, Vote.NO) == Ordering.LESS
    one, two = from_asset("P", "A", 1), from_asset("P", "A", 2)
    assert compare_data(one, two) == Ordering.LESS


def test_compare_data_unsupported():
    with pytest.raises(TypeError):
        compare_data(object(), object())


def cmp_int(left, right):
    return (left > right) - (left < right)


def test_insert_with_int_comparator():
    seq = Pairs([(1, "a"), (3, "c")])
    result = insert_or_replace(seq, 2, "b", cmp_int)
    assert list(result) == [(1, "a"), (2, "b"), (3, "c")]
    result = insert_or_replace(result, 3, "d", lambda a, b: 10 * cmp_int(a, b))
    assert list(result) == [(1, "a"), (2, "b"), (3, "d")]
    assert get(result, 2, cmp_int) == "b"
    assert is_sorted(result, cmp_int)
    with pytest.raises(MalformedSequenceException):
        validate_order(Pairs([(2, "b"), (1, "a")]), cmp_int)


@pytest.mark.parametrize("result", [None, True, "less", 0.5])
def test_comparator_result_type(result):
    with pytest.raises(TypeError, match="comparator"):
        insert_or_replace(Pairs([(1, "a")]), 2, "b", lambda a, b: result)


def test_pairs_from_mapping():
    assert list(Pairs({b"ab": 1, b"cd": 2})) == [(b"ab", 1), (b"cd", 2)]
    assert list(set_pairs({3: "c"})) == [(3, "c")]


@pytest.mark.parametrize("item", [b"ab", (1,), (1, 2, 3), 7])
def test_pairs_rejects_non_pairs(item):
    with pytest.raises(InvalidArgumentException):
        Pairs([item])
