"""
Safe{Wallet} transaction hashing.

Owners of a Safe sign the EIP-712 ``SafeTx`` struct of a transaction under
the Safe's own domain. The struct and domain layouts depend on the Safe
contract version: before 1.0.0 the ``baseGas`` field was called ``dataGas``,
and before 1.3.0 the domain carried no ``chainId``.
"""

from __future__ import annotations

import re

import msgspec

from ..document import TypedDataDocument, TypedDataField
from ..eip712 import EIP712_DOMAIN, TypedDataHashes
from ..errors import MalformedInputError

SAFE_TX_TYPE = "SafeTx"
DEFAULT_SAFE_VERSION = "1.3.0"
ZERO_ADDRESS = "0x" + "00" * 20

CALL = 0
DELEGATE_CALL = 1

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$", re.ASCII)


class SafeTransaction(msgspec.Struct, frozen=True, rename="camel"):
    """The signed fields of a Safe transaction (everything but the signatures)."""

    to: str
    nonce: int
    value: int = 0
    data: str = "0x"
    operation: int = CALL
    safe_tx_gas: int = 0
    base_gas: int = 0
    gas_price: int = 0
    gas_token: str = ZERO_ADDRESS
    refund_receiver: str = ZERO_ADDRESS


def parse_safe_version(version: str) -> tuple[int, int, int]:
    """``"1.3.0"`` -> ``(1, 3, 0)``."""
    m = _VERSION_RE.match(version.strip()) if isinstance(version, str) else None
    if m is None:
        raise MalformedInputError(f"Invalid Safe version {version!r}, expected MAJOR.MINOR.PATCH")
    major, minor, patch = (int(part) for part in m.groups())
    return major, minor, patch


def safe_tx_types(safe_version: str = DEFAULT_SAFE_VERSION) -> dict[str, list[TypedDataField]]:
    """``EIP712Domain`` and ``SafeTx`` definitions for a Safe contract version."""
    version = parse_safe_version(safe_version)
    domain = [TypedDataField("verifyingContract", "address")]
    if version >= (1, 3, 0):
        domain.insert(0, TypedDataField("chainId", "uint256"))
    base_gas = "baseGas" if version >= (1, 0, 0) else "dataGas"
    return {
        EIP712_DOMAIN: domain,
        SAFE_TX_TYPE: [
            TypedDataField("to", "address"),
            TypedDataField("value", "uint256"),
            TypedDataField("data", "bytes"),
            TypedDataField("operation", "uint8"),
            TypedDataField("safeTxGas", "uint256"),
            TypedDataField(base_gas, "uint256"),
            TypedDataField("gasPrice", "uint256"),
            TypedDataField("gasToken", "address"),
            TypedDataField("refundReceiver", "address"),
            TypedDataField("nonce", "uint256"),
        ],
    }


def safe_tx_document(
    tx: SafeTransaction,
    chain_id: int,
    safe_address: str,
    safe_version: str = DEFAULT_SAFE_VERSION,
) -> TypedDataDocument:
    """
    Typed-data document the owners of ``safe_address`` sign for ``tx``.

    Args:
        tx: Transaction to hash.
        chain_id: Chain the Safe is deployed on. Not part of the domain for
            Safe versions below 1.3.0.
        safe_address: Safe address (the domain's verifying contract).
        safe_version: Safe contract version, ``MAJOR.MINOR.PATCH``.

    Returns:
        The SafeTx document; hash it with ``.hashes()``.
    """
    if tx.operation not in (CALL, DELEGATE_CALL):
        raise MalformedInputError(
            f"Safe operation must be {CALL} (call) or {DELEGATE_CALL} (delegatecall), "
            f"got {tx.operation}"
        )
    version = parse_safe_version(safe_version)
    domain: dict[str, object] = {"verifyingContract": safe_address}
    if version >= (1, 3, 0):
        domain["chainId"] = chain_id
    message = msgspec.to_builtins(tx)
    if version < (1, 0, 0):
        message["dataGas"] = message.pop("baseGas")
    types = safe_tx_types(safe_version)
    return TypedDataDocument(
        domain=domain,
        types=types,
        primary_type=SAFE_TX_TYPE,
        message=message,
    )


def safe_tx_hashes(
    tx: SafeTransaction,
    chain_id: int,
    safe_address: str,
    safe_version: str = DEFAULT_SAFE_VERSION,
) -> TypedDataHashes:
    """Hash ``tx`` for a Safe; ``eip712_hash`` is the Safe transaction hash."""
    return safe_tx_document(tx, chain_id, safe_address, safe_version).hashes()


__all__: tuple[str, ...] = (
    "CALL",
    "DEFAULT_SAFE_VERSION",
    "DELEGATE_CALL",
    "SAFE_TX_TYPE",
    "ZERO_ADDRESS",
    "SafeTransaction",
    "parse_safe_version",
    "safe_tx_document",
    "safe_tx_hashes",
    "safe_tx_types",
)
