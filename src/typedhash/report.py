"""
Named digest output.

One call computes every digest a document (or Safe transaction) has; the CLI
then picks which of them to print.
"""

from __future__ import annotations

from collections.abc import Mapping

from .document import TypedDataDocument
from .eip712 import TypedDataHashes
from .errors import MalformedInputError
from .safe import (
    DEFAULT_SAFE_VERSION,
    SafeTransaction,
    eip191_hash_message,
    normalize_message,
    safe_message_hashes,
    safe_tx_hashes,
)

EIP712_HASH = "eip712Hash"


def to_hex(digest: bytes) -> str:
    """``0x``-prefixed lowercase hex, 66 characters for a 32-byte digest."""
    return "0x" + digest.hex()


def _named(hashes: TypedDataHashes, prefix: str = "") -> dict[str, str]:
    def key(name: str) -> str:
        return prefix + name[0].upper() + name[1:] if prefix else name

    out = {
        key("eip712Hash"): to_hex(hashes.eip712_hash),
        key("domainSeparator"): to_hex(hashes.domain_separator),
        key("domainHash"): to_hex(hashes.domain_separator),
    }
    if hashes.message_hash is not None:
        out[key("messageHash")] = to_hex(hashes.message_hash)
    return out


def compute_digests(
    document: TypedDataDocument,
    safe_address: str | None = None,
    safe_chain_id: int | None = None,
) -> dict[str, str]:
    """
    All digests of ``document`` as hex strings.

    With ``safe_address`` the EIP-712 digest is also wrapped as a SafeMessage
    for that Safe and its digests are added under ``safe*`` keys. The Safe's
    chain defaults to the document domain's ``chainId``.
    """
    hashes = document.hashes()
    digests = _named(hashes)
    if safe_address is not None:
        chain_id = safe_chain_id if safe_chain_id is not None else document.domain.get("chainId")
        if chain_id is None:
            raise MalformedInputError(
                "A chain id is required to wrap a Safe message: the domain has no chainId"
            )
        safe = safe_message_hashes(hashes.eip712_hash, chain_id, safe_address)
        digests.update(_named(safe, prefix="safe"))
    return digests


def compute_message_digests(
    message: str,
    safe_address: str,
    chain_id: int,
) -> dict[str, str]:
    """EIP-191 hash of a plain-text message and its Safe-wrapped digests."""
    raw = eip191_hash_message(normalize_message(message))
    digests = {"rawMessageHash": to_hex(raw)}
    digests.update(_named(safe_message_hashes(raw, chain_id, safe_address), prefix="safe"))
    return digests


def compute_tx_digests(
    tx: SafeTransaction,
    safe_address: str,
    chain_id: int,
    safe_version: str = DEFAULT_SAFE_VERSION,
) -> dict[str, str]:
    """Domain, message and transaction hashes of a Safe transaction."""
    hashes = safe_tx_hashes(tx, chain_id, safe_address, safe_version)
    return {
        "domainHash": to_hex(hashes.domain_separator),
        "messageHash": to_hex(hashes.message_hash),
        "safeTxHash": to_hex(hashes.eip712_hash),
    }


def select_digests(digests: Mapping[str, str], full: bool) -> dict[str, str]:
    """Everything when ``full``, otherwise only the EIP-712 digest when present."""
    if full or EIP712_HASH not in digests:
        return dict(digests)
    return {EIP712_HASH: digests[EIP712_HASH]}


__all__: tuple[str, ...] = (
    "EIP712_HASH",
    "compute_digests",
    "compute_message_digests",
    "compute_tx_digests",
    "select_digests",
    "to_hex",
)
