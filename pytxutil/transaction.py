"""Definitions of transaction-related data types."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, List, Mapping, Optional, Tuple, Union

from pytxutil.address import Address, Credential, ScriptCredential
from pytxutil.certificate import Certificate
from pytxutil.governance import ProposalProcedure, Voter
from pytxutil.hash import (
    TRANSACTION_HASH_SIZE,
    DatumHash,
    PolicyId,
    ScriptHash,
    TransactionId,
    VerificationKeyHash,
)
from pytxutil.interval import ValidityRange, everything
from pytxutil.pairs import Pairs
from pytxutil.value import Value, zero

__all__ = [
    "OutputReference",
    "NoDatum",
    "HashedDatum",
    "InlineDatum",
    "Datum",
    "Output",
    "Input",
    "Redeemer",
    "MintPurpose",
    "SpendPurpose",
    "WithdrawPurpose",
    "PublishPurpose",
    "VotePurpose",
    "ProposePurpose",
    "ScriptPurpose",
    "Transaction",
    "placeholder",
    "find_input",
    "find_script_outputs",
]

Redeemer = Any
"""Arbitrary data handed to a script alongside the context."""


@dataclass(frozen=True)
class OutputReference:
    """Points at an output of a previous transaction."""

    CONSTR_ID: ClassVar[int] = 0

    transaction_id: TransactionId

    index: int


@dataclass(frozen=True)
class NoDatum:
    CONSTR_ID: ClassVar[int] = 0


@dataclass(frozen=True)
class HashedDatum:
    """Only the hash of the datum is stored in the output."""

    CONSTR_ID: ClassVar[int] = 1

    hash: DatumHash


@dataclass(frozen=True)
class InlineDatum:
    CONSTR_ID: ClassVar[int] = 2

    data: Any


Datum = Union[NoDatum, HashedDatum, InlineDatum]


@dataclass(frozen=True)
class Output:
    CONSTR_ID: ClassVar[int] = 0

    address: Address

    value: Value = field(default_factory=zero)

    datum: Datum = field(default_factory=NoDatum)

    reference_script: Optional[ScriptHash] = None


@dataclass(frozen=True)
class Input:
    CONSTR_ID: ClassVar[int] = 0

    output_reference: OutputReference

    output: Output


@dataclass(frozen=True)
class MintPurpose:
    CONSTR_ID: ClassVar[int] = 0

    policy_id: PolicyId


@dataclass(frozen=True)
class SpendPurpose:
    CONSTR_ID: ClassVar[int] = 1

    output_reference: OutputReference


@dataclass(frozen=True)
class WithdrawPurpose:
    CONSTR_ID: ClassVar[int] = 2

    credential: Credential


@dataclass(frozen=True)
class PublishPurpose:
    CONSTR_ID: ClassVar[int] = 3

    at: int

    certificate: Certificate


@dataclass(frozen=True)
class VotePurpose:
    CONSTR_ID: ClassVar[int] = 4

    voter: Voter


@dataclass(frozen=True)
class ProposePurpose:
    CONSTR_ID: ClassVar[int] = 5

    at: int

    proposal_procedure: ProposalProcedure


ScriptPurpose = Union[
    MintPurpose,
    SpendPurpose,
    WithdrawPurpose,
    PublishPurpose,
    VotePurpose,
    ProposePurpose,
]
"""Why a script runs. Keys of :attr:`Transaction.redeemers`."""


@dataclass(frozen=True)
class Transaction:
    """A transaction as seen by a script.

    Every field has the value of :func:`placeholder` by default. Optional fields are
    ``None`` when absent, which is not the same thing as zero.

    Transactions compare by value but are not hashable, ``datums`` is a mapping.
    """

    CONSTR_ID: ClassVar[int] = 0

    __hash__ = None  # type: ignore

    inputs: Tuple[Input, ...] = ()

    reference_inputs: Tuple[Input, ...] = ()

    outputs: Tuple[Output, ...] = ()

    fee: int = 0

    mint: Value = field(default_factory=zero)

    certificates: Tuple[Certificate, ...] = ()

    withdrawals: Pairs = field(default_factory=Pairs)
    """Pairs of (Credential, lovelace)."""

    validity_range: ValidityRange = field(default_factory=everything)

    extra_signatories: Tuple[VerificationKeyHash, ...] = ()

    redeemers: Pairs = field(default_factory=Pairs)
    """Pairs of (ScriptPurpose, Redeemer)."""

    datums: Mapping[DatumHash, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    id: TransactionId = field(
        default_factory=lambda: TransactionId(bytes(TRANSACTION_HASH_SIZE))
    )

    votes: Pairs = field(default_factory=Pairs)
    """Pairs of (Voter, Pairs of (GovernanceActionId, Vote))."""

    proposal_procedures: Tuple[ProposalProcedure, ...] = ()

    current_treasury_amount: Optional[int] = None

    treasury_donation: Optional[int] = None


def placeholder() -> Transaction:
    """The canonical empty transaction every fixture starts from."""
    return Transaction()


def find_input(
    inputs: Tuple[Input, ...], output_reference: OutputReference
) -> Optional[Input]:
    """Find the input spending ``output_reference``, if any."""
    for i in inputs:
        if i.output_reference == output_reference:
            return i
    return None


def find_script_outputs(
    outputs: Tuple[Output, ...], script_hash: ScriptHash
) -> List[Output]:
    """All outputs locked by the script with hash ``script_hash``."""
    return [
        o
        for o in outputs
        if o.address.payment_credential == ScriptCredential(script_hash)
    ]
