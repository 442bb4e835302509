import logging

import pytest

from pytxutil import contextbuilder
from pytxutil.exception import InvalidArgumentException
from pytxutil.interval import everything
from pytxutil.logging import log_state, logger
from pytxutil.transaction import OutputReference
from pytxutil.txbuilder import new_tx_input, set_fee
from test.pytxutil.util import key_address, tx_id


def test_log_state_debug(caplog, tx):
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        set_fee(tx, 123)
    assert "Function: set_fee, state:" in caplog.text
    assert "fee=123" in caplog.text


def test_log_state_quiet_above_debug(caplog, tx):
    with caplog.at_level(logging.INFO, logger=logger.name):
        set_fee(tx, 123)
    assert caplog.text == ""


def test_log_state_on_error(caplog):
    with caplog.at_level(logging.WARNING, logger=logger.name):
        with pytest.raises(InvalidArgumentException):
            new_tx_input(OutputReference(tx_id(1), -1), key_address(1))
    assert "Function: new_tx_input, arguments:" in caplog.text


def test_log_state_keeps_metadata():
    @log_state
    def build(x):
        """Build something."""
        return x

    assert build.__name__ == "build"
    assert build.__doc__ == "Build something."
    assert build(3) == 3


def test_context_builder_logs_once(caplog):
    ctx = contextbuilder.build_txn_context(everything())
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        contextbuilder.set_fee(ctx, 123)
    states = [r for r in caplog.records if "state:" in r.getMessage()]
    assert len(states) == 1
    assert "Function: set_fee, state:" in states[0].getMessage()
    assert "ScriptContext(" in states[0].getMessage()
