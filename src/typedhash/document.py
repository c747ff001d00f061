"""
Typed-data document: the JSON shape accepted by eth_signTypedData_v4.

Decoding goes through msgspec so the document's structure (required keys,
field list shape) is checked before any hashing; field values stay untyped
and are validated by the encoder against their declared types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import msgspec

from .eip712 import TypedDataHashes, typed_data_hashes
from .errors import MalformedInputError


class TypedDataField(msgspec.Struct, frozen=True):
    """One ``{"name": ..., "type": ...}`` entry of a struct definition."""

    name: str
    type: str


class TypedDataDocument(msgspec.Struct, frozen=True, rename="camel"):
    """
    A complete typed-data document.

    Attributes:
        domain: EIP712Domain values.
        types: Struct definitions by type name.
        primary_type: Type of ``message`` (``primaryType`` on the wire).
        message: Field values of the primary type.
    """

    domain: dict[str, Any]
    types: dict[str, list[TypedDataField]]
    primary_type: str
    message: dict[str, Any] = msgspec.field(default_factory=dict)

    def hashes(self) -> TypedDataHashes:
        """Domain separator, message hash and EIP-712 digest of this document."""
        return typed_data_hashes(self.domain, self.types, self.primary_type, self.message)


_decoder = msgspec.json.Decoder(TypedDataDocument)
_encoder = msgspec.json.Encoder()


def decode_document(data: bytes | str) -> TypedDataDocument:
    """Decode a JSON typed-data document."""
    try:
        return _decoder.decode(data)
    except msgspec.ValidationError as e:
        raise MalformedInputError(f"Invalid typed data document: {e}") from e
    except msgspec.DecodeError as e:
        raise MalformedInputError(f"Malformed JSON: {e}") from e


def convert_document(obj: Mapping[str, Any]) -> TypedDataDocument:
    """Build a document from an already-parsed mapping."""
    try:
        return msgspec.convert(obj, TypedDataDocument)
    except msgspec.ValidationError as e:
        raise MalformedInputError(f"Invalid typed data document: {e}") from e


def encode_document(doc: TypedDataDocument) -> bytes:
    """JSON bytes of ``doc`` with its camelCase wire names."""
    return _encoder.encode(doc)


def encode_digests(digests: Mapping[str, str]) -> bytes:
    """JSON object of named hex digests."""
    return _encoder.encode(dict(digests))


__all__: tuple[str, ...] = (
    "TypedDataDocument",
    "TypedDataField",
    "convert_document",
    "decode_document",
    "encode_digests",
    "encode_document",
)
