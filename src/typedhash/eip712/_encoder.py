"""
EIP-712 encodeData: one 32-byte word per field, by declared field type.

Loosely-typed input values (JSON numbers, hex strings, nested dicts/lists) are
validated against the declared FieldType here, at the point they are turned
into bytes, so a bad value surfaces as a typed error naming its field path.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from ..errors import MissingFieldError, NumericRangeError, TypeMismatchError
from ..hashes import keccak256
from ._types import (
    ADDRESS,
    ARRAY,
    BOOL,
    BYTES,
    FIXED_BYTES,
    INT,
    STRING,
    STRUCT,
    UINT,
    FieldType,
)

_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]+$")


def _parse_integer(value: object, path: str, ftype: FieldType) -> int:
    # bool is an int subclass; never accept it as a number
    if isinstance(value, bool):
        raise TypeMismatchError(path, ftype.render(), "expected a number, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise TypeMismatchError(path, ftype.render(), f"{value!r} is not an integer")
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        body = s[1:] if s[:1] in ("-", "+") else s
        if body.isascii():
            if body[:2].lower() == "0x" and _HEX_DIGITS_RE.match(body[2:]):
                return int(s, 16)
            if body.isdigit():
                return int(s, 10)
        raise TypeMismatchError(path, ftype.render(), f"{value!r} is not a number")
    raise TypeMismatchError(
        path, ftype.render(), f"expected a number, got {type(value).__name__}"
    )


def _parse_hex_bytes(value: object, path: str, ftype: FieldType) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str) and value[:2].lower() == "0x":
        try:
            return bytes.fromhex(value[2:])
        except ValueError:
            pass
        raise TypeMismatchError(path, ftype.render(), f"{value!r} is not valid hex")
    raise TypeMismatchError(
        path, ftype.render(), f"expected 0x-prefixed hex, got {type(value).__name__}"
    )


def _encode_integer(value: object, path: str, ftype: FieldType) -> bytes:
    n = _parse_integer(value, path, ftype)
    if ftype.kind == UINT:
        lo, hi = 0, (1 << ftype.size) - 1
    else:
        lo, hi = -(1 << (ftype.size - 1)), (1 << (ftype.size - 1)) - 1
    if not lo <= n <= hi:
        raise NumericRangeError(path, ftype.render(), n)
    return n.to_bytes(32, "big", signed=ftype.kind == INT)


def _encode_address(value: object, path: str, ftype: FieldType) -> bytes:
    raw = _parse_hex_bytes(value, path, ftype)
    if len(raw) != 20:
        raise TypeMismatchError(path, ftype.render(), f"expected 20 bytes, got {len(raw)}")
    return raw.rjust(32, b"\x00")


def _encode_bool(value: object, path: str, ftype: FieldType) -> bytes:
    if not isinstance(value, bool):
        raise TypeMismatchError(
            path, ftype.render(), f"expected a boolean, got {type(value).__name__}"
        )
    return (1 if value else 0).to_bytes(32, "big")


def _encode_fixed_bytes(value: object, path: str, ftype: FieldType) -> bytes:
    raw = _parse_hex_bytes(value, path, ftype)
    if len(raw) != ftype.size:
        raise TypeMismatchError(
            path, ftype.render(), f"expected {ftype.size} bytes, got {len(raw)}"
        )
    return raw.ljust(32, b"\x00")


def _encode_string(value: object, path: str, ftype: FieldType) -> bytes:
    if not isinstance(value, str):
        raise TypeMismatchError(
            path, ftype.render(), f"expected a string, got {type(value).__name__}"
        )
    return keccak256(value.encode("utf-8"))


def _encode_array(registry, value: object, path: str, ftype: FieldType) -> bytes:
    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(
            path, ftype.render(), f"expected an array, got {type(value).__name__}"
        )
    if ftype.length is not None and len(value) != ftype.length:
        raise TypeMismatchError(
            path, ftype.render(), f"expected {ftype.length} elements, got {len(value)}"
        )
    words = [
        encode_value(registry, ftype.element, item, f"{path}[{i}]")
        for i, item in enumerate(value)
    ]
    return keccak256(b"".join(words))


def encode_value(registry, ftype: FieldType, value: object, path: str) -> bytes:
    """Encode a single value of type ``ftype`` into one 32-byte word."""
    kind = ftype.kind
    if kind in (UINT, INT):
        return _encode_integer(value, path, ftype)
    if kind == ADDRESS:
        return _encode_address(value, path, ftype)
    if kind == BOOL:
        return _encode_bool(value, path, ftype)
    if kind == FIXED_BYTES:
        return _encode_fixed_bytes(value, path, ftype)
    if kind == BYTES:
        return keccak256(_parse_hex_bytes(value, path, ftype))
    if kind == STRING:
        return _encode_string(value, path, ftype)
    if kind == STRUCT:
        if not isinstance(value, Mapping):
            raise TypeMismatchError(
                path, ftype.name, f"expected an object, got {type(value).__name__}"
            )
        from ._hasher import hash_struct

        return hash_struct(registry, ftype.name, value, path=path)
    if kind == ARRAY:
        return _encode_array(registry, value, path, ftype)
    raise TypeMismatchError(path, ftype.render(), "unsupported type")


def encode_data(
    registry,
    type_name: str,
    data: Mapping[str, object],
    path: str | None = None,
) -> bytes:
    """
    Concatenated 32-byte encodings of the fields of ``type_name`` in declared
    order (the type hash is not included).

    A field whose value is absent or None raises MissingFieldError; keys not
    declared by the type are ignored.
    """
    if not isinstance(data, Mapping):
        raise TypeMismatchError(
            path or type_name, type_name, f"expected an object, got {type(data).__name__}"
        )
    base = path or type_name
    out = bytearray()
    for name, ftype in registry.fields(type_name):
        value = data.get(name)
        field_path = f"{base}.{name}"
        if value is None:
            raise MissingFieldError(field_path)
        out += encode_value(registry, ftype, value, field_path)
    return bytes(out)


__all__: tuple[str, ...] = ("encode_data", "encode_value")
