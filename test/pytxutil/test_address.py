from pytxutil.address import (
    Address,
    InlineStakeCredential,
    PointerStakeCredential,
    ScriptCredential,
    VerificationKeyCredential,
    from_script,
    from_verification_key,
    with_delegation_key,
    with_delegation_script,
)
from pytxutil.transaction import Output, find_script_outputs
from test.pytxutil.util import script_hash, vkh


def test_from_verification_key():
    address = from_verification_key(vkh(1))
    assert address.payment_credential == VerificationKeyCredential(vkh(1))
    assert address.stake_credential is None
    assert address == Address.from_verification_key(vkh(1))


def test_from_script():
    address = from_script(script_hash(1))
    assert address.payment_credential == ScriptCredential(script_hash(1))
    assert address == Address.from_script(script_hash(1))


def test_with_delegation():
    address = from_script(script_hash(1))
    keyed = with_delegation_key(address, vkh(2))
    assert keyed.stake_credential == InlineStakeCredential(
        VerificationKeyCredential(vkh(2))
    )
    scripted = with_delegation_script(keyed, script_hash(3))
    assert scripted.stake_credential == InlineStakeCredential(
        ScriptCredential(script_hash(3))
    )
    assert address.stake_credential is None


def test_pointer_stake_credential():
    address = Address(
        VerificationKeyCredential(vkh(1)), PointerStakeCredential(1, 2, 3)
    )
    assert address.stake_credential.certificate_index == 3


def test_find_script_outputs():
    locked = Output(from_script(script_hash(1)))
    staked = Output(with_delegation_key(from_script(script_hash(1)), vkh(1)))
    other = Output(from_verification_key(vkh(1)))
    outputs = (locked, other, staked)
    assert find_script_outputs(outputs, script_hash(1)) == [locked, staked]
    assert find_script_outputs(outputs, script_hash(2)) == []
