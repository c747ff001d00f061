"""Safe{Wallet} message and transaction hashing, EIP-191 message hashing and chain names."""

from ._chains import SAFE_SUPPORTED_CHAINS, chain_id_of, supported_chain_names
from ._message import (
    SAFE_MESSAGE_TYPE,
    SAFE_MESSAGE_TYPES,
    eip191_hash_message,
    normalize_message,
    safe_message_hashes,
    wrap_as_safe_message,
)
from ._tx import (
    DEFAULT_SAFE_VERSION,
    SAFE_TX_TYPE,
    ZERO_ADDRESS,
    SafeTransaction,
    parse_safe_version,
    safe_tx_document,
    safe_tx_hashes,
    safe_tx_types,
)

__all__: tuple[str, ...] = (
    "DEFAULT_SAFE_VERSION",
    "SAFE_MESSAGE_TYPE",
    "SAFE_MESSAGE_TYPES",
    "SAFE_SUPPORTED_CHAINS",
    "SAFE_TX_TYPE",
    "ZERO_ADDRESS",
    "SafeTransaction",
    "chain_id_of",
    "eip191_hash_message",
    "normalize_message",
    "parse_safe_version",
    "safe_message_hashes",
    "safe_tx_document",
    "safe_tx_hashes",
    "safe_tx_types",
    "supported_chain_names",
    "wrap_as_safe_message",
)
