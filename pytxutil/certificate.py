"""Conway-era certificates, as seen by a script."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from pytxutil.address import Credential
from pytxutil.hash import VerificationKeyHash

__all__ = [
    "StakePoolId",
    "Registered",
    "AlwaysAbstain",
    "AlwaysNoConfidence",
    "DelegateRepresentative",
    "DelegateBlockProduction",
    "DelegateVote",
    "DelegateBoth",
    "Delegate",
    "RegisterCredential",
    "UnregisterCredential",
    "DelegateCredential",
    "RegisterAndDelegateCredential",
    "RegisterDelegateRepresentative",
    "UpdateDelegateRepresentative",
    "UnregisterDelegateRepresentative",
    "RegisterStakePool",
    "RetireStakePool",
    "AuthorizeConstitutionalCommitteeProxy",
    "RetireFromConstitutionalCommittee",
    "Certificate",
]

StakePoolId = VerificationKeyHash


@dataclass(frozen=True)
class Registered:
    """A registered delegate representative, identified by its credential."""

    CONSTR_ID: ClassVar[int] = 0

    credential: Credential


@dataclass(frozen=True)
class AlwaysAbstain:
    CONSTR_ID: ClassVar[int] = 1


@dataclass(frozen=True)
class AlwaysNoConfidence:
    CONSTR_ID: ClassVar[int] = 2


DelegateRepresentative = Union[Registered, AlwaysAbstain, AlwaysNoConfidence]


@dataclass(frozen=True)
class DelegateBlockProduction:
    CONSTR_ID: ClassVar[int] = 0

    stake_pool: StakePoolId


@dataclass(frozen=True)
class DelegateVote:
    CONSTR_ID: ClassVar[int] = 1

    delegate_representative: DelegateRepresentative


@dataclass(frozen=True)
class DelegateBoth:
    CONSTR_ID: ClassVar[int] = 2

    stake_pool: StakePoolId

    delegate_representative: DelegateRepresentative


Delegate = Union[DelegateBlockProduction, DelegateVote, DelegateBoth]


@dataclass(frozen=True)
class RegisterCredential:
    """Register a stake credential. Legacy certificates carry no deposit."""

    CONSTR_ID: ClassVar[int] = 0

    credential: Credential

    deposit: Optional[int] = None


@dataclass(frozen=True)
class UnregisterCredential:
    CONSTR_ID: ClassVar[int] = 1

    credential: Credential

    refund: Optional[int] = None


@dataclass(frozen=True)
class DelegateCredential:
    CONSTR_ID: ClassVar[int] = 2

    credential: Credential

    delegate: Delegate


@dataclass(frozen=True)
class RegisterAndDelegateCredential:
    CONSTR_ID: ClassVar[int] = 3

    credential: Credential

    delegate: Delegate

    deposit: int


@dataclass(frozen=True)
class RegisterDelegateRepresentative:
    CONSTR_ID: ClassVar[int] = 4

    delegate_representative: Credential

    deposit: int


@dataclass(frozen=True)
class UpdateDelegateRepresentative:
    CONSTR_ID: ClassVar[int] = 5

    delegate_representative: Credential


@dataclass(frozen=True)
class UnregisterDelegateRepresentative:
    CONSTR_ID: ClassVar[int] = 6

    delegate_representative: Credential

    refund: int


@dataclass(frozen=True)
class RegisterStakePool:
    CONSTR_ID: ClassVar[int] = 7

    stake_pool: StakePoolId

    vrf: VerificationKeyHash


@dataclass(frozen=True)
class RetireStakePool:
    CONSTR_ID: ClassVar[int] = 8

    stake_pool: StakePoolId

    at_epoch: int


@dataclass(frozen=True)
class AuthorizeConstitutionalCommitteeProxy:
    """A cold committee credential delegates its votes to a hot credential."""

    CONSTR_ID: ClassVar[int] = 9

    constitutional_committee_member: Credential

    proxy: Credential


@dataclass(frozen=True)
class RetireFromConstitutionalCommittee:
    CONSTR_ID: ClassVar[int] = 10

    constitutional_committee_member: Credential


Certificate = Union[
    RegisterCredential,
    UnregisterCredential,
    DelegateCredential,
    RegisterAndDelegateCredential,
    RegisterDelegateRepresentative,
    UpdateDelegateRepresentative,
    UnregisterDelegateRepresentative,
    RegisterStakePool,
    RetireStakePool,
    AuthorizeConstitutionalCommitteeProxy,
    RetireFromConstitutionalCommittee,
]
