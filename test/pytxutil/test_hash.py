import pytest

from pytxutil.hash import (
    DatumHash,
    ScriptHash,
    TransactionId,
    VerificationKeyHash,
)
from test.pytxutil.util import TX_ID_HEX, VKH_HEX


def test_from_primitive():
    tx_id = TransactionId.from_primitive(TX_ID_HEX)
    assert tx_id.payload == bytes.fromhex(TX_ID_HEX)
    assert TransactionId.from_primitive(bytes.fromhex(TX_ID_HEX)) == tx_id
    assert str(tx_id) == TX_ID_HEX
    assert repr(tx_id) == f"TransactionId(hex='{TX_ID_HEX}')"


@pytest.mark.parametrize(
    "cls, size",
    [(VerificationKeyHash, 28), (ScriptHash, 28), (TransactionId, 32), (DatumHash, 32)],
)
def test_size_constraint(cls, size):
    assert len(bytes(cls(b"1" * size))) == size
    with pytest.raises(AssertionError):
        cls(b"1" * (size - 1))
    with pytest.raises(AssertionError):
        cls(b"1" * (size + 1))


def test_equality():
    vkh = VerificationKeyHash.from_primitive(VKH_HEX)
    assert vkh == VerificationKeyHash(bytes.fromhex(VKH_HEX))
    assert vkh != bytes.fromhex(VKH_HEX)
    assert hash(vkh) == hash(bytes.fromhex(VKH_HEX))
