"""EIP-712 typed structured data: type resolution, encoding and hashing."""

from ._domain import DOMAIN_FIELDS, EIP712_DOMAIN, domain_separator, domain_type
from ._encoder import encode_data, encode_value
from ._hasher import hash_struct
from ._resolver import canonical_signature, dependency_graph
from ._typed_data import (
    EIP712_PREFIX,
    TypedDataHashes,
    hash_typed_data,
    typed_data_hashes,
)
from ._types import FieldType, TypeRegistry, parse_field_type

__all__: tuple[str, ...] = (
    "DOMAIN_FIELDS",
    "EIP712_DOMAIN",
    "EIP712_PREFIX",
    "FieldType",
    "TypeRegistry",
    "TypedDataHashes",
    "canonical_signature",
    "dependency_graph",
    "domain_separator",
    "domain_type",
    "encode_data",
    "encode_value",
    "hash_struct",
    "hash_typed_data",
    "parse_field_type",
    "typed_data_hashes",
)
