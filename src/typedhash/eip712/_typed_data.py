"""
EIP-712 typed-data digest: keccak256(0x19 0x01 || domainSeparator || hashStruct(message)).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import msgspec

from ..hashes import keccak256
from ._domain import EIP712_DOMAIN, domain_separator
from ._hasher import hash_struct
from ._types import TypeRegistry

logger = logging.getLogger(__name__)

EIP712_PREFIX = b"\x19\x01"


class TypedDataHashes(msgspec.Struct, frozen=True):
    """
    Digests of one typed-data document.

    ``message_hash`` is None when the primary type is EIP712Domain itself, in
    which case the digest covers the domain separator only.
    """

    domain_separator: bytes
    message_hash: bytes | None
    eip712_hash: bytes


def typed_data_hashes(
    domain: Mapping[str, object],
    types: TypeRegistry | Mapping,
    primary_type: str,
    message: Mapping[str, object],
) -> TypedDataHashes:
    """Compute the domain separator, message hash and final signing digest."""
    domain_sep = domain_separator(domain)
    if primary_type == EIP712_DOMAIN:
        message_hash = None
        digest = keccak256(EIP712_PREFIX + domain_sep)
    else:
        message_hash = hash_struct(TypeRegistry.of(types), primary_type, message)
        digest = keccak256(EIP712_PREFIX + domain_sep + message_hash)
    logger.debug(
        "%s: domain separator 0x%s, digest 0x%s",
        primary_type,
        domain_sep.hex(),
        digest.hex(),
    )
    return TypedDataHashes(domain_sep, message_hash, digest)


def hash_typed_data(
    domain: Mapping[str, object],
    types: TypeRegistry | Mapping,
    primary_type: str,
    message: Mapping[str, object],
) -> bytes:
    """
    EIP-712 hash to sign.

    Args:
        domain: Domain values (name, version, chainId, verifyingContract, salt).
        types: Struct definitions, e.g. ``{"Mail": [{"name": "contents", "type": "string"}]}``.
        primary_type: Type of ``message``.
        message: Field values of the primary type.

    Returns:
        32-byte digest.
    """
    return typed_data_hashes(domain, types, primary_type, message).eip712_hash


__all__: tuple[str, ...] = (
    "EIP712_PREFIX",
    "TypedDataHashes",
    "hash_typed_data",
    "typed_data_hashes",
)
