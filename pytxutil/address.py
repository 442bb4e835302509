"""Addresses and the credentials they are made of.

Only the structure an on-chain validator sees is modelled here: a payment
credential and an optional stake credential. Network tags and bech32/byron
encodings are out of reach of scripts and are not represented.
"""

from dataclasses import dataclass, replace
from typing import ClassVar, Optional, Union

from pytxutil.hash import ScriptHash, VerificationKeyHash
from pytxutil.types import typechecked

__all__ = [
    "VerificationKeyCredential",
    "ScriptCredential",
    "Credential",
    "PaymentCredential",
    "InlineStakeCredential",
    "PointerStakeCredential",
    "StakeCredential",
    "Address",
    "from_verification_key",
    "from_script",
    "with_delegation_key",
    "with_delegation_script",
]


@dataclass(frozen=True)
class VerificationKeyCredential:
    """A credential unlocked by a signature of the matching signing key."""

    CONSTR_ID: ClassVar[int] = 0

    hash: VerificationKeyHash


@dataclass(frozen=True)
class ScriptCredential:
    """A credential unlocked by running the script with the given hash."""

    CONSTR_ID: ClassVar[int] = 1

    hash: ScriptHash


Credential = Union[VerificationKeyCredential, ScriptCredential]

PaymentCredential = Credential


@dataclass(frozen=True)
class InlineStakeCredential:
    CONSTR_ID: ClassVar[int] = 0

    credential: Credential


@dataclass(frozen=True)
class PointerStakeCredential:
    """Points at the stake registration certificate of an earlier transaction."""

    CONSTR_ID: ClassVar[int] = 1

    slot_number: int
    """Slot in which the staking certificate was posted."""

    transaction_index: int
    """The transaction index (within that slot)."""

    certificate_index: int
    """The index of the certificate within the transaction."""


StakeCredential = Union[InlineStakeCredential, PointerStakeCredential]


@dataclass(frozen=True)
class Address:
    CONSTR_ID: ClassVar[int] = 0

    payment_credential: Credential

    stake_credential: Optional[StakeCredential] = None

    @classmethod
    def from_verification_key(cls, vkh: VerificationKeyHash) -> "Address":
        return cls(VerificationKeyCredential(vkh))

    @classmethod
    def from_script(cls, script_hash: ScriptHash) -> "Address":
        return cls(ScriptCredential(script_hash))


@typechecked
def from_verification_key(vkh: VerificationKeyHash) -> Address:
    """An enterprise address locked by a verification key, with no stake part."""
    return Address.from_verification_key(vkh)


@typechecked
def from_script(script_hash: ScriptHash) -> Address:
    """An enterprise address locked by a script, with no stake part."""
    return Address.from_script(script_hash)


@typechecked
def with_delegation_key(address: Address, vkh: VerificationKeyHash) -> Address:
    """Set the stake part of ``address`` to a verification key credential."""
    return replace(
        address, stake_credential=InlineStakeCredential(VerificationKeyCredential(vkh))
    )


@typechecked
def with_delegation_script(address: Address, script_hash: ScriptHash) -> Address:
    """Set the stake part of ``address`` to a script credential."""
    return replace(
        address, stake_credential=InlineStakeCredential(ScriptCredential(script_hash))
    )
