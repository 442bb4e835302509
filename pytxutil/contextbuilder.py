"""Builders for a whole :class:`~pytxutil.script_context.ScriptContext`.

These work one level up from :mod:`pytxutil.txbuilder`: they take and return a
script context, update its transaction through the transaction builders, and set
the purpose the script is evaluated for. Example::

    ctx = build_txn_context(after(now))
    ctx = add_tx_input(ctx, tx_in)
    ctx = add_signatory(ctx, owner)
    ctx = spend(ctx, tx_in.output_reference)
"""

from dataclasses import replace
from typing import Any, Callable, Mapping, Optional

from pytxutil import txbuilder
from pytxutil.address import Address, Credential
from pytxutil.certificate import Certificate
from pytxutil.governance import GovernanceAction, ProposalProcedure, Voter
from pytxutil.hash import DatumHash, PolicyId, TransactionId, VerificationKeyHash
from pytxutil.interval import ValidityRange
from pytxutil.logging import log_state
from pytxutil.pairs import Comparator, compare_data
from pytxutil.script_context import (
    Minting,
    Proposing,
    Publishing,
    ScriptContext,
    Spending,
    Voting,
    Withdrawing,
)
from pytxutil.transaction import (
    Datum,
    Input,
    Output,
    OutputReference,
    Redeemer,
    ScriptPurpose,
    Transaction,
    placeholder,
)
from pytxutil.txbuilder import (
    PairsLike,
    add_asset_to_tx_output,
    attach_ref_script_to_tx_input,
    attach_ref_script_to_tx_output,
    with_asset_of_tx_input,
)
from pytxutil.types import typechecked
from pytxutil.value import Value, from_lovelace

__all__ = [
    "build_txn_context",
    "set_id",
    "set_fee",
    "set_validity_range",
    "set_datums",
    "set_withdrawals",
    "insert_withdrawal",
    "set_redeemers",
    "insert_redeemer",
    "spend",
    "mint_assets",
    "withdraw_stake_rewards",
    "publish_stake",
    "vote_governance",
    "propose_governance",
    "add_signatory",
    "add_tx_ref_input",
    "add_tx_input",
    "add_tx_output",
    "add_certificate",
    "add_mint",
    "add_datum",
    "add_vote",
    "add_proposal_procedure",
    "set_current_treasury_amount",
    "unset_current_treasury_amount",
    "set_treasury_donation",
    "unset_treasury_donation",
    "new_tx_input",
    "with_asset_of_tx_input",
    "attach_ref_script_to_tx_input",
    "new_tx_output",
    "add_asset_to_tx_output",
    "attach_ref_script_to_tx_output",
]


def _update(
    context: ScriptContext, func: Callable[..., Transaction], *args, **kwargs
) -> ScriptContext:
    # The record is logged once, by the context-level builder.
    func = getattr(func, "__wrapped__", func)
    return replace(context, transaction=func(context.transaction, *args, **kwargs))


@log_state
@typechecked
def build_txn_context(validity_range: ValidityRange) -> ScriptContext:
    """The starting point of every script context fixture.

    Holds a placeholder transaction valid over ``validity_range`` and no purpose.
    """
    return ScriptContext(txbuilder.set_validity_range(placeholder(), validity_range))


@log_state
@typechecked
def set_id(context: ScriptContext, id: TransactionId) -> ScriptContext:
    """**OPTIONAL**: Set ``ScriptContext.transaction.id``"""
    return _update(context, txbuilder.set_id, id)


@log_state
@typechecked
def set_fee(context: ScriptContext, fee: int) -> ScriptContext:
    return _update(context, txbuilder.set_fee, fee)


@log_state
@typechecked
def set_validity_range(
    context: ScriptContext, validity_range: ValidityRange
) -> ScriptContext:
    return _update(context, txbuilder.set_validity_range, validity_range)


@log_state
@typechecked
def set_datums(
    context: ScriptContext, datums: Mapping[DatumHash, Any]
) -> ScriptContext:
    return _update(context, txbuilder.set_datums, datums)


@log_state
@typechecked
def set_withdrawals(
    context: ScriptContext,
    withdrawals: PairsLike,
    validate: Optional[bool] = None,
    compare: Comparator = compare_data,
) -> ScriptContext:
    return _update(context, txbuilder.set_withdrawals, withdrawals, validate, compare)


@log_state
@typechecked
def insert_withdrawal(
    context: ScriptContext,
    withdrawal_key: Credential,
    withdrawal_value: int,
    withdrawal_compare: Comparator,
) -> ScriptContext:
    """Upsert a withdrawal, keeping withdrawals sorted by ``withdrawal_compare``."""
    return _update(
        context,
        txbuilder.add_withdrawal,
        withdrawal_key,
        withdrawal_value,
        withdrawal_compare,
    )


@log_state
@typechecked
def set_redeemers(
    context: ScriptContext,
    redeemers: PairsLike,
    validate: Optional[bool] = None,
    compare: Comparator = compare_data,
) -> ScriptContext:
    return _update(context, txbuilder.set_redeemers, redeemers, validate, compare)


@log_state
@typechecked
def insert_redeemer(
    context: ScriptContext,
    redeemer_key: ScriptPurpose,
    redeemer_value: Redeemer,
    redeemer_compare: Comparator,
) -> ScriptContext:
    """Upsert a redeemer, keeping redeemers sorted by ``redeemer_compare``."""
    return _update(
        context,
        txbuilder.add_redeemer,
        redeemer_key,
        redeemer_value,
        redeemer_compare,
    )


# Script purpose. Each setter replaces whatever purpose was set before.


@log_state
@typechecked
def spend(context: ScriptContext, o_ref: OutputReference) -> ScriptContext:
    """Set the Spending purpose for the output at ``o_ref``."""
    return replace(context, purpose=Spending(o_ref))


@log_state
@typechecked
def mint_assets(
    context: ScriptContext, policy_id: PolicyId, assets: Value
) -> ScriptContext:
    """Set the Minting purpose for ``policy_id`` and replace
    ``ScriptContext.transaction.mint`` with ``assets``."""
    tx = replace(context.transaction, mint=assets)
    return replace(context, transaction=tx, purpose=Minting(policy_id))


@log_state
@typechecked
def withdraw_stake_rewards(
    context: ScriptContext, credential: Credential
) -> ScriptContext:
    return replace(context, purpose=Withdrawing(credential))


@log_state
@typechecked
def publish_stake(
    context: ScriptContext, certificate: Certificate, at: int
) -> ScriptContext:
    """Set the Publishing purpose for ``certificate``, found at index ``at``."""
    return replace(context, purpose=Publishing(at, certificate))


@log_state
@typechecked
def vote_governance(context: ScriptContext, voter: Voter) -> ScriptContext:
    return replace(context, purpose=Voting(voter))


@log_state
@typechecked
def propose_governance(
    context: ScriptContext, proposal_procedure: ProposalProcedure, at: int
) -> ScriptContext:
    return replace(context, purpose=Proposing(at, proposal_procedure))


# Transaction content


@log_state
@typechecked
def add_signatory(
    context: ScriptContext, signatory: VerificationKeyHash
) -> ScriptContext:
    return _update(context, txbuilder.add_signatory, signatory)


@log_state
@typechecked
def add_tx_ref_input(context: ScriptContext, tx_ref_in: Input) -> ScriptContext:
    return _update(context, txbuilder.add_tx_ref_input, tx_ref_in)


@log_state
@typechecked
def add_tx_input(context: ScriptContext, tx_in: Input) -> ScriptContext:
    return _update(context, txbuilder.add_tx_input, tx_in)


@log_state
@typechecked
def add_tx_output(context: ScriptContext, tx_out: Output) -> ScriptContext:
    return _update(context, txbuilder.add_tx_output, tx_out)


@log_state
@typechecked
def add_certificate(
    context: ScriptContext, certificate: Certificate
) -> ScriptContext:
    return _update(context, txbuilder.add_certificate, certificate)


@log_state
@typechecked
def add_mint(context: ScriptContext, asset: Value) -> ScriptContext:
    """Merge ``asset`` into the minted value, unlike :func:`mint_assets`."""
    return _update(context, txbuilder.add_mint, asset)


@log_state
@typechecked
def add_datum(
    context: ScriptContext, datum_key: DatumHash, datum_value: Any
) -> ScriptContext:
    return _update(context, txbuilder.add_datum, datum_key, datum_value)


@log_state
@typechecked
def add_vote(
    context: ScriptContext,
    vote_key: Voter,
    vote_value: PairsLike,
    compare: Comparator = compare_data,
) -> ScriptContext:
    return _update(context, txbuilder.add_vote, vote_key, vote_value, compare)


@log_state
@typechecked
def add_proposal_procedure(
    context: ScriptContext,
    deposit: int,
    return_address: Credential,
    governance_action: GovernanceAction,
) -> ScriptContext:
    return _update(
        context,
        txbuilder.add_proposal_procedure,
        deposit,
        return_address,
        governance_action,
    )


@log_state
@typechecked
def set_current_treasury_amount(context: ScriptContext, amount: int) -> ScriptContext:
    return _update(context, txbuilder.set_current_treasury_amount, amount)


@log_state
@typechecked
def unset_current_treasury_amount(context: ScriptContext) -> ScriptContext:
    return _update(context, txbuilder.unset_current_treasury_amount)


@log_state
@typechecked
def set_treasury_donation(context: ScriptContext, donation: int) -> ScriptContext:
    return _update(context, txbuilder.set_treasury_donation, donation)


@log_state
@typechecked
def unset_treasury_donation(context: ScriptContext) -> ScriptContext:
    return _update(context, txbuilder.unset_treasury_donation)


# Endpoints


@log_state
@typechecked
def new_tx_input(
    tx_hash: TransactionId, address: Address, lovelace: int, datum: Datum
) -> Input:
    """Construct a transaction input spending output 0 of ``tx_hash``."""
    return Input(
        OutputReference(tx_hash, 0),
        Output(address, from_lovelace(lovelace), datum),
    )


@log_state
@typechecked
def new_tx_output(address: Address, lovelace: int, datum: Datum) -> Output:
    """Construct a transaction output."""
    return Output(address, from_lovelace(lovelace), datum)
