"""Pure functions that build a transaction field by field.

Every function takes the record to update as its first argument and returns a new
record; the argument is left untouched. Fixtures are built by threading a value
through a chain of calls::

    tx_in = with_asset_of_tx_input(
        new_tx_input(output_reference, address), from_lovelace(2_000_000)
    )
    tx = add_signatory(add_tx_input(placeholder(), tx_in), signer)
"""

from dataclasses import replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from pytxutil.address import Address, Credential
from pytxutil.certificate import Certificate
from pytxutil.exception import InvalidArgumentException
from pytxutil.governance import GovernanceAction, ProposalProcedure, Voter
from pytxutil.hash import DatumHash, ScriptHash, TransactionId, VerificationKeyHash
from pytxutil.interval import ValidityRange
from pytxutil.logging import log_state
from pytxutil.pairs import Comparator, Pairs, compare_data, insert_or_replace, set_pairs
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
from pytxutil.types import typechecked
from pytxutil.value import Value, merge

__all__ = [
    "placeholder",
    "set_id",
    "set_validity_range",
    "set_fee",
    "set_datums",
    "set_withdrawals",
    "set_redeemers",
    "set_votes",
    "add_tx_input",
    "add_tx_ref_input",
    "add_tx_output",
    "add_certificate",
    "add_signatory",
    "add_proposal_procedure",
    "add_mint",
    "add_datum",
    "add_redeemer",
    "add_vote",
    "add_withdrawal",
    "set_current_treasury_amount",
    "unset_current_treasury_amount",
    "set_treasury_donation",
    "unset_treasury_donation",
    "new_tx_input",
    "with_asset_of_tx_input",
    "set_datum_of_tx_input",
    "attach_ref_script_to_tx_input",
    "remove_ref_script_from_tx_input",
    "new_tx_output",
    "add_asset_to_tx_output",
    "set_datum_of_tx_output",
    "attach_ref_script_to_tx_output",
    "remove_ref_script_from_tx_output",
]

PairsLike = Union[Pairs, Iterable[Tuple[Any, Any]]]


# Field replacement


@log_state
@typechecked
def set_id(tx: Transaction, id: TransactionId) -> Transaction:
    """Set ``Transaction.id``. The placeholder id is 32 zero bytes."""
    return replace(tx, id=id)


@log_state
@typechecked
def set_validity_range(tx: Transaction, validity_range: ValidityRange) -> Transaction:
    return replace(tx, validity_range=validity_range)


@log_state
@typechecked
def set_fee(tx: Transaction, fee: int) -> Transaction:
    return replace(tx, fee=fee)


@log_state
@typechecked
def set_datums(tx: Transaction, datums: Mapping[DatumHash, Any]) -> Transaction:
    """Replace ``Transaction.datums`` with a read-only copy of ``datums``."""
    return replace(tx, datums=MappingProxyType(dict(datums)))


@log_state
@typechecked
def set_withdrawals(
    tx: Transaction,
    withdrawals: PairsLike,
    validate: Optional[bool] = None,
    compare: Comparator = compare_data,
) -> Transaction:
    """Replace ``Transaction.withdrawals`` wholesale.

    The pairs are taken as given unless validation is asked for, see
    :func:`pytxutil.pairs.set_pairs`.
    """
    return replace(tx, withdrawals=set_pairs(withdrawals, validate, compare))


@log_state
@typechecked
def set_redeemers(
    tx: Transaction,
    redeemers: PairsLike,
    validate: Optional[bool] = None,
    compare: Comparator = compare_data,
) -> Transaction:
    """Replace ``Transaction.redeemers`` wholesale, see :func:`set_withdrawals`."""
    return replace(tx, redeemers=set_pairs(redeemers, validate, compare))


@log_state
@typechecked
def set_votes(
    tx: Transaction,
    votes: PairsLike,
    validate: Optional[bool] = None,
    compare: Comparator = compare_data,
) -> Transaction:
    return replace(tx, votes=set_pairs(votes, validate, compare))


# Appends. New elements go to the end, nothing is de-duplicated.


@log_state
@typechecked
def add_tx_input(tx: Transaction, tx_in: Input) -> Transaction:
    """Append ``tx_in`` to ``Transaction.inputs``."""
    return replace(tx, inputs=tx.inputs + (tx_in,))


@log_state
@typechecked
def add_tx_ref_input(tx: Transaction, tx_ref_in: Input) -> Transaction:
    """Append ``tx_ref_in`` to ``Transaction.reference_inputs``."""
    return replace(tx, reference_inputs=tx.reference_inputs + (tx_ref_in,))


@log_state
@typechecked
def add_tx_output(tx: Transaction, tx_out: Output) -> Transaction:
    """Append ``tx_out`` to ``Transaction.outputs``."""
    return replace(tx, outputs=tx.outputs + (tx_out,))


@log_state
@typechecked
def add_certificate(tx: Transaction, certificate: Certificate) -> Transaction:
    return replace(tx, certificates=tx.certificates + (certificate,))


@log_state
@typechecked
def add_signatory(tx: Transaction, signatory: VerificationKeyHash) -> Transaction:
    return replace(tx, extra_signatories=tx.extra_signatories + (signatory,))


@log_state
@typechecked
def add_proposal_procedure(
    tx: Transaction,
    deposit: int,
    return_address: Credential,
    governance_action: GovernanceAction,
) -> Transaction:
    """Append a new proposal procedure to ``Transaction.proposal_procedures``."""
    procedure = ProposalProcedure(deposit, return_address, governance_action)
    return replace(tx, proposal_procedures=tx.proposal_procedures + (procedure,))


# Accumulation


@log_state
@typechecked
def add_mint(tx: Transaction, asset: Value) -> Transaction:
    """Merge ``asset`` into ``Transaction.mint``. Burns are negative quantities."""
    return replace(tx, mint=merge(tx.mint, asset))


# Upserts


@log_state
@typechecked
def add_datum(tx: Transaction, datum_key: DatumHash, datum_value: Any) -> Transaction:
    """Insert a datum into ``Transaction.datums``, overriding an existing key."""
    datums = dict(tx.datums)
    datums[datum_key] = datum_value
    return replace(tx, datums=MappingProxyType(datums))


@log_state
@typechecked
def add_redeemer(
    tx: Transaction,
    redeemer_key: ScriptPurpose,
    redeemer_value: Redeemer,
    compare: Comparator = compare_data,
) -> Transaction:
    """Upsert a redeemer into ``Transaction.redeemers``.

    If the key already exists its value is replaced, otherwise the pair is inserted
    in ``compare`` order.
    """
    return replace(
        tx,
        redeemers=insert_or_replace(
            tx.redeemers, redeemer_key, redeemer_value, compare
        ),
    )


@log_state
@typechecked
def add_vote(
    tx: Transaction,
    vote_key: Voter,
    vote_value: PairsLike,
    compare: Comparator = compare_data,
) -> Transaction:
    """Upsert the votes of ``vote_key`` into ``Transaction.votes``.

    Args:
        tx: Transaction to update.
        vote_key: The voter.
        vote_value: Pairs of (GovernanceActionId, Vote) cast by the voter.
        compare: Order of voters.
    """
    votes = vote_value if isinstance(vote_value, Pairs) else Pairs(vote_value)
    return replace(tx, votes=insert_or_replace(tx.votes, vote_key, votes, compare))


@log_state
@typechecked
def add_withdrawal(
    tx: Transaction,
    withdrawal_key: Credential,
    withdrawal_value: int,
    compare: Comparator = compare_data,
) -> Transaction:
    """Upsert a reward withdrawal into ``Transaction.withdrawals``."""
    return replace(
        tx,
        withdrawals=insert_or_replace(
            tx.withdrawals, withdrawal_key, withdrawal_value, compare
        ),
    )


# Optional fields


@log_state
@typechecked
def set_current_treasury_amount(tx: Transaction, amount: int) -> Transaction:
    return replace(tx, current_treasury_amount=amount)


@log_state
@typechecked
def unset_current_treasury_amount(tx: Transaction) -> Transaction:
    """Make ``Transaction.current_treasury_amount`` absent again."""
    return replace(tx, current_treasury_amount=None)


@log_state
@typechecked
def set_treasury_donation(tx: Transaction, donation: int) -> Transaction:
    return replace(tx, treasury_donation=donation)


@log_state
@typechecked
def unset_treasury_donation(tx: Transaction) -> Transaction:
    return replace(tx, treasury_donation=None)


# Inputs


@log_state
@typechecked
def new_tx_input(output_reference: OutputReference, address: Address) -> Input:
    """Initialize a transaction input with zero assets value, no datum, and no
    reference script.

    Raises:
        InvalidArgumentException: When the output index is negative.
    """
    if output_reference.index < 0:
        raise InvalidArgumentException(
            f"Output index must not be negative, got {output_reference.index}."
        )
    return Input(output_reference, Output(address))


@log_state
@typechecked
def with_asset_of_tx_input(input: Input, asset: Value) -> Input:
    """Add asset(s) to a transaction input. Repeated calls accumulate."""
    return replace(
        input, output=replace(input.output, value=merge(input.output.value, asset))
    )


@log_state
@typechecked
def set_datum_of_tx_input(input: Input, datum: Datum) -> Input:
    return replace(input, output=replace(input.output, datum=datum))


@log_state
@typechecked
def attach_ref_script_to_tx_input(input: Input, ref_script: ScriptHash) -> Input:
    return replace(input, output=replace(input.output, reference_script=ref_script))


@log_state
@typechecked
def remove_ref_script_from_tx_input(input: Input) -> Input:
    return replace(input, output=replace(input.output, reference_script=None))


# Outputs


@log_state
@typechecked
def new_tx_output(address: Address) -> Output:
    """Initialize a transaction output with zero assets value, no datum, and no
    reference script."""
    return Output(address)


@log_state
@typechecked
def add_asset_to_tx_output(output: Output, asset: Value) -> Output:
    """Add asset(s) to a transaction output. Repeated calls accumulate."""
    return replace(output, value=merge(output.value, asset))


@log_state
@typechecked
def set_datum_of_tx_output(output: Output, datum: Datum) -> Output:
    return replace(output, datum=datum)


@log_state
@typechecked
def attach_ref_script_to_tx_output(output: Output, ref_script: ScriptHash) -> Output:
    return replace(output, reference_script=ref_script)


@log_state
@typechecked
def remove_ref_script_from_tx_output(output: Output) -> Output:
    return replace(output, reference_script=None)
