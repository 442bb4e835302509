from pytxutil.address import Address, from_script, from_verification_key
from pytxutil.hash import ScriptHash, TransactionId, VerificationKeyHash
from pytxutil.transaction import OutputReference

TX_ID_HEX = "0000000000000000000000000000000000000000000000000000000000000064"

VKH_HEX = "00000000000000000000000000000000000000000000000000000056"


def vkh(n: int) -> VerificationKeyHash:
    return VerificationKeyHash(bytes([n]) * 28)


def script_hash(n: int) -> ScriptHash:
    return ScriptHash(bytes([n]) * 28)


def tx_id(n: int) -> TransactionId:
    return TransactionId(bytes([n]) * 32)


def key_address(n: int) -> Address:
    return from_verification_key(vkh(n))


def script_address(n: int) -> Address:
    return from_script(script_hash(n))


def output_reference(n: int, index: int = 0) -> OutputReference:
    return OutputReference(tx_id(n), index)
