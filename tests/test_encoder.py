"""Value encoding (encodeData) per field type."""

from __future__ import annotations

from typing import Any

import pytest
from conftest import MAIL_ENCODED_DATA

from typedhash import (
    MissingFieldError,
    NumericRangeError,
    TypeMismatchError,
    TypeRegistry,
    encode_data,
    hash_struct,
    keccak256,
)
from typedhash.eip712 import encode_value, parse_field_type

EMPTY = TypeRegistry({})


def enc(type_str: str, value: object) -> bytes:
    return encode_value(EMPTY, parse_field_type(type_str), value, "T.f")


def word(n: int) -> bytes:
    return n.to_bytes(32, "big")


def test_mail_encoded_data(mail: dict[str, Any]) -> None:
    data = encode_data(TypeRegistry(mail["types"]), "Mail", mail["message"])
    assert data.hex() == MAIL_ENCODED_DATA


def test_encode_data_is_one_word_per_field() -> None:
    registry = TypeRegistry(
        {"T": [{"name": "a", "type": "uint8"}, {"name": "b", "type": "bool"}, {"name": "c", "type": "string"}]}
    )
    assert len(encode_data(registry, "T", {"a": 1, "b": True, "c": "x"})) == 96


@pytest.mark.parametrize("value", [42, "42", "0x2a", "0X2A", 42.0, " 42 "])
def test_uint_accepts_numbers_decimal_and_hex(value: object) -> None:
    assert enc("uint256", value) == word(42)


def test_uint_bounds() -> None:
    assert enc("uint8", 255) == word(255)
    assert enc("uint256", 2**256 - 1) == b"\xff" * 32
    with pytest.raises(NumericRangeError):
        enc("uint8", 300)
    with pytest.raises(NumericRangeError):
        enc("uint256", 2**256)
    with pytest.raises(NumericRangeError):
        enc("uint64", -1)


def test_int_twos_complement() -> None:
    assert enc("int8", -1) == b"\xff" * 32
    assert enc("int256", "-2") == b"\xff" * 31 + b"\xfe"
    assert enc("int16", "-0x10") == (-16).to_bytes(32, "big", signed=True)
    assert enc("int8", 127) == word(127)
    with pytest.raises(NumericRangeError):
        enc("int8", 128)
    with pytest.raises(NumericRangeError):
        enc("int8", -129)


@pytest.mark.parametrize(
    "value",
    [
        "abc",
        "",
        "0x",
        "0xzz",
        "1.5",
        1.5,
        True,
        [1],
        {"a": 1},
        "1_000",
        "0x_ff",
        "\u0664\u0662",
        "0x\u0664\u0662",
    ],
)
def test_integer_rejects_non_numbers(value: object) -> None:
    with pytest.raises(TypeMismatchError):
        enc("uint256", value)


def test_bool() -> None:
    assert enc("bool", True) == word(1)
    assert enc("bool", False) == word(0)
    with pytest.raises(TypeMismatchError):
        enc("bool", "true")
    with pytest.raises(TypeMismatchError):
        enc("bool", 1)


def test_address_left_padded() -> None:
    addr = "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"
    assert enc("address", addr) == bytes(12) + bytes.fromhex(addr[2:])
    assert enc("address", bytes(range(20))) == bytes(12) + bytes(range(20))


@pytest.mark.parametrize("value", ["0x1234", "CD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826", 5, "0x" + "gg" * 20])
def test_address_rejects_bad_values(value: object) -> None:
    with pytest.raises(TypeMismatchError):
        enc("address", value)


def test_fixed_bytes_right_padded() -> None:
    assert enc("bytes4", "0xdeadbeef") == bytes.fromhex("deadbeef") + bytes(28)
    assert enc("bytes32", b"\x01" * 32) == b"\x01" * 32
    with pytest.raises(TypeMismatchError, match="expected 4 bytes"):
        enc("bytes4", "0xdead")
    with pytest.raises(TypeMismatchError):
        enc("bytes4", "0xdeadbeef00")


def test_dynamic_bytes_and_string_are_hashed() -> None:
    assert enc("bytes", "0x") == keccak256(b"")
    assert enc("bytes", "0x0102") == keccak256(b"\x01\x02")
    assert enc("bytes", b"\x01\x02") == keccak256(b"\x01\x02")
    assert enc("string", "Hello, Bob!") == keccak256(b"Hello, Bob!")
    assert enc("string", "hé") == keccak256("hé".encode("utf-8"))
    with pytest.raises(TypeMismatchError):
        enc("string", 5)
    with pytest.raises(TypeMismatchError):
        enc("bytes", "hello")


def test_empty_array_hashes_empty_input() -> None:
    assert enc("uint256[]", []) == keccak256(b"")
    assert enc("string[]", []) == keccak256(b"")


def test_array_is_hash_of_element_words() -> None:
    assert enc("uint8[]", [1, 2]) == keccak256(word(1) + word(2))
    assert enc("string[]", ["a"]) == keccak256(keccak256(b"a"))


def test_array_length_changes_encoding() -> None:
    encodings = {enc("uint256[]", [7] * n) for n in range(4)}
    assert len(encodings) == 4


def test_nested_arrays() -> None:
    inner_a = keccak256(word(1) + word(2))
    inner_b = keccak256(word(3))
    assert enc("uint8[][]", [[1, 2], [3]]) == keccak256(inner_a + inner_b)


def test_fixed_length_array_requires_exact_length() -> None:
    assert enc("bool[2]", [True, False]) == keccak256(word(1) + word(0))
    with pytest.raises(TypeMismatchError, match="expected 2 elements"):
        enc("bool[2]", [True])


def test_array_rejects_non_sequences() -> None:
    with pytest.raises(TypeMismatchError):
        enc("uint8[]", 5)
    with pytest.raises(TypeMismatchError):
        enc("uint8[]", "12")


def test_array_of_structs_uses_struct_hashes(mail: dict[str, Any]) -> None:
    types = dict(mail["types"])
    types["Group"] = [{"name": "members", "type": "Person[]"}]
    registry = TypeRegistry(types)
    people = [mail["message"]["from"], mail["message"]["to"]]
    expected = keccak256(b"".join(hash_struct(registry, "Person", p) for p in people))
    assert encode_data(registry, "Group", {"members": people}) == expected


def test_missing_field_reports_path(mail: dict[str, Any]) -> None:
    del mail["message"]["to"]["wallet"]
    with pytest.raises(MissingFieldError, match="Mail.to.wallet"):
        encode_data(TypeRegistry(mail["types"]), "Mail", mail["message"])


def test_null_value_is_missing(mail: dict[str, Any]) -> None:
    mail["message"]["contents"] = None
    with pytest.raises(MissingFieldError):
        encode_data(TypeRegistry(mail["types"]), "Mail", mail["message"])


def test_struct_field_requires_object(mail: dict[str, Any]) -> None:
    mail["message"]["from"] = ["Cow"]
    with pytest.raises(TypeMismatchError, match="Mail.from"):
        encode_data(TypeRegistry(mail["types"]), "Mail", mail["message"])


def test_error_path_includes_array_index() -> None:
    registry = TypeRegistry({"T": [{"name": "xs", "type": "uint8[]"}]})
    with pytest.raises(NumericRangeError, match=r"T\.xs\[1\]"):
        encode_data(registry, "T", {"xs": [1, 300]})


def test_extra_message_keys_are_ignored(mail: dict[str, Any]) -> None:
    registry = TypeRegistry(mail["types"])
    baseline = encode_data(registry, "Mail", mail["message"])
    mail["message"]["unexpected"] = "ignored"
    assert encode_data(registry, "Mail", mail["message"]) == baseline
