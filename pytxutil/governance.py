"""Governance votes, proposals and actions."""

from dataclasses import dataclass, field
from enum import Enum, unique
from fractions import Fraction
from typing import Any, ClassVar, Optional, Tuple, Union

from pytxutil.address import Credential
from pytxutil.exception import InvalidArgumentException
from pytxutil.hash import ScriptHash, TransactionId, VerificationKeyHash
from pytxutil.pairs import Pairs

__all__ = [
    "Vote",
    "ConstitutionalCommitteeMember",
    "DelegateRepresentativeVoter",
    "StakePool",
    "Voter",
    "GovernanceActionId",
    "ProtocolVersion",
    "Constitution",
    "ProtocolParameters",
    "HardFork",
    "TreasuryWithdrawal",
    "NoConfidence",
    "ConstitutionalCommittee",
    "NewConstitution",
    "NicePoll",
    "GovernanceAction",
    "ProposalProcedure",
]


@unique
class Vote(Enum):
    """Represents possible voting choices in the governance system."""

    NO = 0
    YES = 1
    ABSTAIN = 2


@dataclass(frozen=True)
class ConstitutionalCommitteeMember:
    CONSTR_ID: ClassVar[int] = 0

    credential: Credential


@dataclass(frozen=True)
class DelegateRepresentativeVoter:
    CONSTR_ID: ClassVar[int] = 1

    credential: Credential


@dataclass(frozen=True)
class StakePool:
    CONSTR_ID: ClassVar[int] = 2

    stake_pool: VerificationKeyHash


Voter = Union[ConstitutionalCommitteeMember, DelegateRepresentativeVoter, StakePool]


@dataclass(frozen=True)
class GovernanceActionId:
    """Represents a unique identifier for a governance action.

    This identifier consists of a transaction ID and the index of the proposal
    procedure within that transaction.
    """

    CONSTR_ID: ClassVar[int] = 0

    transaction: TransactionId
    """The transaction ID where this governance action was submitted"""

    proposal_procedure: int
    """The index of this governance action within the transaction (0-65535)"""

    def __post_init__(self):
        if not 0 <= self.proposal_procedure <= 65535:  # uint .size 2
            raise InvalidArgumentException(
                "proposal_procedure must be between 0 and 65535"
            )


@dataclass(frozen=True)
class ProtocolVersion:
    CONSTR_ID: ClassVar[int] = 0

    major: int

    minor: int


@dataclass(frozen=True)
class Constitution:
    CONSTR_ID: ClassVar[int] = 0

    guardrails: Optional[ScriptHash] = None


@dataclass(frozen=True)
class ProtocolParameters:
    CONSTR_ID: ClassVar[int] = 0

    ancestor: Optional[GovernanceActionId]

    new_parameters: Any
    """Protocol parameter update, as opaque data."""

    guardrails: Optional[ScriptHash] = None


@dataclass(frozen=True)
class HardFork:
    CONSTR_ID: ClassVar[int] = 1

    ancestor: Optional[GovernanceActionId]

    new_version: ProtocolVersion


@dataclass(frozen=True)
class TreasuryWithdrawal:
    CONSTR_ID: ClassVar[int] = 2

    beneficiaries: Pairs
    """Pairs of (Credential, lovelace)."""

    guardrails: Optional[ScriptHash] = None


@dataclass(frozen=True)
class NoConfidence:
    CONSTR_ID: ClassVar[int] = 3

    ancestor: Optional[GovernanceActionId]


@dataclass(frozen=True)
class ConstitutionalCommittee:
    CONSTR_ID: ClassVar[int] = 4

    ancestor: Optional[GovernanceActionId]

    evicted_members: Tuple[Credential, ...] = ()

    added_members: Pairs = field(default_factory=Pairs)
    """Pairs of (Credential, epoch at which the mandate ends)."""

    quorum: Fraction = Fraction(2, 3)


@dataclass(frozen=True)
class NewConstitution:
    CONSTR_ID: ClassVar[int] = 5

    ancestor: Optional[GovernanceActionId]

    constitution: Constitution


@dataclass(frozen=True)
class NicePoll:
    CONSTR_ID: ClassVar[int] = 6


GovernanceAction = Union[
    ProtocolParameters,
    HardFork,
    TreasuryWithdrawal,
    NoConfidence,
    ConstitutionalCommittee,
    NewConstitution,
    NicePoll,
]


@dataclass(frozen=True)
class ProposalProcedure:
    CONSTR_ID: ClassVar[int] = 0

    deposit: int

    return_address: Credential

    governance_action: GovernanceAction
