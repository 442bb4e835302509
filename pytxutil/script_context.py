"""The context a validator is evaluated in."""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from pytxutil.address import Credential
from pytxutil.certificate import Certificate
from pytxutil.governance import ProposalProcedure, Voter
from pytxutil.hash import PolicyId
from pytxutil.transaction import OutputReference, Transaction

__all__ = [
    "Minting",
    "Spending",
    "Withdrawing",
    "Publishing",
    "Voting",
    "Proposing",
    "ScriptInfo",
    "ScriptContext",
]


@dataclass(frozen=True)
class Minting:
    CONSTR_ID: ClassVar[int] = 0

    policy_id: PolicyId


@dataclass(frozen=True)
class Spending:
    CONSTR_ID: ClassVar[int] = 1

    output_reference: OutputReference


@dataclass(frozen=True)
class Withdrawing:
    CONSTR_ID: ClassVar[int] = 2

    credential: Credential


@dataclass(frozen=True)
class Publishing:
    CONSTR_ID: ClassVar[int] = 3

    at: int

    certificate: Certificate


@dataclass(frozen=True)
class Voting:
    CONSTR_ID: ClassVar[int] = 4

    voter: Voter


@dataclass(frozen=True)
class Proposing:
    CONSTR_ID: ClassVar[int] = 5

    at: int

    proposal_procedure: ProposalProcedure


ScriptInfo = Union[Minting, Spending, Withdrawing, Publishing, Voting, Proposing]
"""The purpose a script is being run for, with the arguments relevant to it."""


@dataclass(frozen=True)
class ScriptContext:
    """A transaction together with the purpose of the script being evaluated.

    ``purpose`` is ``None`` until one of the purpose setters is applied. Like
    :class:`~pytxutil.transaction.Transaction`, a context is not hashable.
    """

    CONSTR_ID: ClassVar[int] = 0

    __hash__ = None  # type: ignore

    transaction: Transaction = field(default_factory=Transaction)

    purpose: Optional[ScriptInfo] = None
