"""
EIP-712 typed structured data hashing: domain separator, struct hash and the
final signing digest, plus Safe{Wallet} message and transaction hashing. Pure Python; no
eth_account dependency.
"""

from .__about__ import __version__
from .document import (
    TypedDataDocument,
    TypedDataField,
    convert_document,
    decode_document,
)
from .eip712 import (
    TypedDataHashes,
    TypeRegistry,
    canonical_signature,
    domain_separator,
    encode_data,
    hash_struct,
    hash_typed_data,
    typed_data_hashes,
)
from .errors import (
    DependencyCycleError,
    EmptyDomainError,
    MalformedInputError,
    MissingFieldError,
    NumericRangeError,
    TypedDataError,
    TypeMismatchError,
    UnknownTypeError,
)
from .hashes import keccak256
from .report import compute_digests, compute_message_digests, compute_tx_digests
from .safe import (
    SafeTransaction,
    eip191_hash_message,
    safe_message_hashes,
    safe_tx_hashes,
    wrap_as_safe_message,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "keccak256",
    # EIP-712
    "TypeRegistry",
    "TypedDataHashes",
    "canonical_signature",
    "domain_separator",
    "encode_data",
    "hash_struct",
    "hash_typed_data",
    "typed_data_hashes",
    # Documents and output
    "TypedDataDocument",
    "TypedDataField",
    "compute_digests",
    "compute_message_digests",
    "compute_tx_digests",
    "convert_document",
    "decode_document",
    # Safe{Wallet}
    "SafeTransaction",
    "eip191_hash_message",
    "safe_message_hashes",
    "safe_tx_hashes",
    "wrap_as_safe_message",
    # Errors
    "DependencyCycleError",
    "EmptyDomainError",
    "MalformedInputError",
    "MissingFieldError",
    "NumericRangeError",
    "TypeMismatchError",
    "TypedDataError",
    "UnknownTypeError",
)
