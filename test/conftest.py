import os
from unittest import mock

import pytest

from pytxutil.address import Address, from_verification_key
from pytxutil.hash import TransactionId, VerificationKeyHash
from pytxutil.transaction import OutputReference, Transaction, placeholder
from test.pytxutil.util import TX_ID_HEX, VKH_HEX


@pytest.fixture
def tx() -> Transaction:
    return placeholder()


@pytest.fixture
def address() -> Address:
    return from_verification_key(VerificationKeyHash.from_primitive(VKH_HEX))


@pytest.fixture
def output_reference() -> OutputReference:
    return OutputReference(TransactionId.from_primitive(TX_ID_HEX), 0)


@pytest.fixture(scope="session", autouse=True)
def mock_setting_env_vars():
    with mock.patch.dict(
        os.environ,
        {"PYTXUTIL_NO_TYPE_CHECK": "false", "PYTXUTIL_VALIDATE_PAIRS": "false"},
    ):
        yield
