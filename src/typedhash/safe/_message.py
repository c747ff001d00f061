"""
Safe{Wallet} message wrapping.

A Safe signs an off-chain message by signing a second EIP-712 document,
``SafeMessage(bytes message)`` under an ``EIP712Domain(uint256 chainId,address
verifyingContract)`` domain, whose payload is the original digest. The schema
is fixed by the Safe contracts, so nothing here is configurable.
"""

from __future__ import annotations

from ..document import TypedDataDocument, TypedDataField
from ..eip712 import EIP712_DOMAIN, TypedDataHashes
from ..errors import MalformedInputError
from ..hashes import keccak256

SAFE_MESSAGE_TYPE = "SafeMessage"

SAFE_MESSAGE_TYPES: dict[str, list[TypedDataField]] = {
    EIP712_DOMAIN: [
        TypedDataField("chainId", "uint256"),
        TypedDataField("verifyingContract", "address"),
    ],
    SAFE_MESSAGE_TYPE: [TypedDataField("message", "bytes")],
}

_EIP191_PREFIX = b"\x19Ethereum Signed Message:\n"


def _digest_bytes(raw_digest: bytes | str) -> bytes:
    if isinstance(raw_digest, str):
        if raw_digest[:2].lower() != "0x":
            raise MalformedInputError(f"Digest must be 0x-prefixed hex, got {raw_digest!r}")
        try:
            raw_digest = bytes.fromhex(raw_digest[2:])
        except ValueError:
            raise MalformedInputError(f"Digest is not valid hex: {raw_digest!r}") from None
    raw = bytes(raw_digest)
    if len(raw) != 32:
        raise MalformedInputError(f"Digest must be 32 bytes, got {len(raw)}")
    return raw


def wrap_as_safe_message(
    raw_digest: bytes | str,
    chain_id: int,
    verifying_contract: str,
) -> TypedDataDocument:
    """
    Typed-data document that a Safe at ``verifying_contract`` signs for ``raw_digest``.

    Args:
        raw_digest: 32-byte digest (bytes or 0x hex) being wrapped.
        chain_id: Chain the Safe is deployed on.
        verifying_contract: Safe address.

    Returns:
        The SafeMessage document; hash it with ``.hashes()``.
    """
    raw = _digest_bytes(raw_digest)
    return TypedDataDocument(
        domain={"chainId": chain_id, "verifyingContract": verifying_contract},
        types={name: list(fields) for name, fields in SAFE_MESSAGE_TYPES.items()},
        primary_type=SAFE_MESSAGE_TYPE,
        message={"message": "0x" + raw.hex()},
    )


def safe_message_hashes(
    raw_digest: bytes | str,
    chain_id: int,
    verifying_contract: str,
) -> TypedDataHashes:
    """Wrap ``raw_digest`` as a SafeMessage and hash the result."""
    return wrap_as_safe_message(raw_digest, chain_id, verifying_contract).hashes()


def normalize_message(message: str) -> str:
    """Line endings as Safe clients hash them (CRLF -> LF)."""
    return message.replace("\r\n", "\n")


def eip191_hash_message(message: str | bytes) -> bytes:
    """
    EIP-191 personal message hash:
    keccak256("\\x19Ethereum Signed Message:\\n" || len(message) || message).
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return keccak256(_EIP191_PREFIX + str(len(data)).encode("ascii") + data)


__all__: tuple[str, ...] = (
    "SAFE_MESSAGE_TYPE",
    "SAFE_MESSAGE_TYPES",
    "eip191_hash_message",
    "normalize_message",
    "safe_message_hashes",
    "wrap_as_safe_message",
)
