"""
EIP712Domain separator.

Only the recognized domain fields actually present take part in the domain
type, always in the order below.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..errors import EmptyDomainError, MalformedInputError
from ._hasher import hash_struct
from ._types import TypeRegistry

logger = logging.getLogger(__name__)

EIP712_DOMAIN = "EIP712Domain"

DOMAIN_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "string"),
    ("version", "string"),
    ("chainId", "uint256"),
    ("verifyingContract", "address"),
    ("salt", "bytes32"),
)


def domain_type(domain: Mapping[str, object]) -> list[dict[str, str]]:
    """Field list of the effective EIP712Domain type for ``domain``."""
    if not isinstance(domain, Mapping):
        raise MalformedInputError(f"Domain must be an object, got {type(domain).__name__}")
    known = {name for name, _ in DOMAIN_FIELDS}
    ignored = sorted(k for k in domain if k not in known)
    if ignored:
        logger.warning("Ignoring unrecognized domain fields: %s", ", ".join(ignored))
    fields = [
        {"name": name, "type": type_}
        for name, type_ in DOMAIN_FIELDS
        if domain.get(name) is not None
    ]
    if not fields:
        raise EmptyDomainError("Domain has none of: " + ", ".join(n for n, _ in DOMAIN_FIELDS))
    return fields


def domain_separator(domain: Mapping[str, object]) -> bytes:
    """
    hashStruct of ``domain`` as an EIP712Domain built from its present fields.

    Raises:
        EmptyDomainError: no recognized field is present.
    """
    registry = TypeRegistry({EIP712_DOMAIN: domain_type(domain)})
    return hash_struct(registry, EIP712_DOMAIN, domain)


__all__: tuple[str, ...] = (
    "DOMAIN_FIELDS",
    "EIP712_DOMAIN",
    "domain_separator",
    "domain_type",
)
