import pytest
import typeguard

from pytxutil.types import typechecked, validate_pairs_by_default


def test_types(monkeypatch):
    monkeypatch.setenv("PYTXUTIL_NO_TYPE_CHECK", "true")

    assert typeguard.typechecked != typechecked

    @typechecked
    def func1(x: int):
        return x

    @typechecked()
    def func2(x: int):
        return x

    assert func1("not checked") == "not checked"
    assert func2("not checked") == "not checked"


def test_type_check_enabled():
    @typechecked
    def func(x: int) -> int:
        return x

    assert func(1) == 1
    with pytest.raises(typeguard.TypeCheckError):
        func("1")


def test_validate_pairs_by_default(monkeypatch):
    monkeypatch.setenv("PYTXUTIL_VALIDATE_PAIRS", "true")
    assert validate_pairs_by_default()
    monkeypatch.setenv("PYTXUTIL_VALIDATE_PAIRS", "0")
    assert not validate_pairs_by_default()
    monkeypatch.delenv("PYTXUTIL_VALIDATE_PAIRS")
    assert not validate_pairs_by_default()
