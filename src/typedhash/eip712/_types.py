"""
EIP-712 field types and the per-document type registry.

Field type strings from the input ("uint256", "Person[]", "bytes32[2][]") are
parsed once into FieldType values; encoding and signature rendering work on
those instead of re-splitting strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

import msgspec

from ..errors import MalformedInputError, UnknownTypeError
from ..hashes import keccak256
from ._resolver import canonical_signature

UINT = "uint"
INT = "int"
ADDRESS = "address"
BOOL = "bool"
FIXED_BYTES = "fixed-bytes"
BYTES = "bytes"
STRING = "string"
STRUCT = "struct"
ARRAY = "array"

_INTEGER_RE = re.compile(r"^(u?int)(\d*)$", re.ASCII)
_FIXED_BYTES_RE = re.compile(r"^bytes(\d+)$", re.ASCII)
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

MAX_ARRAY_DEPTH = 32


class FieldType(msgspec.Struct, frozen=True):
    """
    A parsed EIP-712 field type.

    ``size`` is the bit width for uint/int and the byte length for fixed bytes.
    ``name`` is set for struct references, ``element``/``length`` for arrays
    (``length`` is None for dynamic arrays).
    """

    kind: str
    size: int = 0
    name: str = ""
    element: FieldType | None = None
    length: int | None = None

    def render(self) -> str:
        """Canonical type string as it appears in a type signature."""
        if self.kind in (UINT, INT):
            return f"{self.kind}{self.size}"
        if self.kind == FIXED_BYTES:
            return f"bytes{self.size}"
        if self.kind == STRUCT:
            return self.name
        if self.kind == ARRAY:
            dim = "" if self.length is None else str(self.length)
            return f"{self.element.render()}[{dim}]"
        return self.kind

    def struct_name(self) -> str | None:
        """Name of the struct this type references, looking through arrays."""
        t = self
        while t.kind == ARRAY:
            t = t.element
        return t.name if t.kind == STRUCT else None


def parse_field_type(type_str: str) -> FieldType:
    """Parse a field type string. Struct names are not checked here."""
    if not isinstance(type_str, str):
        raise MalformedInputError(f"Field type must be a string, got {type_str!r}")
    s = type_str.strip()
    # outermost dimension first
    dims: list[int | None] = []
    while s.endswith("]"):
        if len(dims) == MAX_ARRAY_DEPTH:
            raise MalformedInputError(
                f"Array type nests deeper than {MAX_ARRAY_DEPTH} levels: {type_str[:40]!r}"
            )
        open_at = s.rfind("[")
        if open_at <= 0:
            raise MalformedInputError(f"Invalid array type {type_str!r}")
        dim = s[open_at + 1 : -1].strip()
        length = None
        if dim:
            if not (dim.isascii() and dim.isdigit()) or int(dim) == 0:
                raise MalformedInputError(f"Invalid array length in {type_str!r}")
            length = int(dim)
        dims.append(length)
        s = s[:open_at].strip()

    ftype = _parse_base_type(s, type_str)
    for length in reversed(dims):
        ftype = FieldType(ARRAY, element=ftype, length=length)
    return ftype


def _parse_base_type(s: str, type_str: str) -> FieldType:
    m = _INTEGER_RE.match(s)
    if m:
        bits = int(m.group(2)) if m.group(2) else 256
        if bits % 8 or not 8 <= bits <= 256:
            raise MalformedInputError(f"Invalid integer width in {type_str!r}")
        return FieldType(m.group(1), size=bits)
    m = _FIXED_BYTES_RE.match(s)
    if m:
        n = int(m.group(1))
        if not 1 <= n <= 32:
            raise MalformedInputError(f"Invalid fixed bytes length in {type_str!r}")
        return FieldType(FIXED_BYTES, size=n)
    if s in (ADDRESS, BOOL, BYTES, STRING):
        return FieldType(s)
    if not _IDENTIFIER_RE.match(s):
        raise MalformedInputError(f"Invalid type name {type_str!r}")
    return FieldType(STRUCT, name=s)


Field = tuple[str, FieldType]


def _field_entry(type_name: str, entry: Any) -> tuple[str, str]:
    if isinstance(entry, Mapping):
        name, type_ = entry.get("name"), entry.get("type")
    else:
        name, type_ = getattr(entry, "name", None), getattr(entry, "type", None)
    if not isinstance(name, str) or not name or not isinstance(type_, str):
        raise MalformedInputError(
            f"Invalid field definition {entry!r} in type {type_name!r}"
        )
    return name, type_


def _parse_definition(type_name: str, entries: Iterable[Any]) -> tuple[Field, ...]:
    if isinstance(entries, (str, bytes, Mapping)):
        raise MalformedInputError(f"Type {type_name!r} must be a list of fields")
    fields: list[Field] = []
    seen: set[str] = set()
    for entry in entries:
        name, type_ = _field_entry(type_name, entry)
        if name in seen:
            raise MalformedInputError(f"Duplicate field {name!r} in type {type_name!r}")
        seen.add(name)
        fields.append((name, parse_field_type(type_)))
    return tuple(fields)


class TypeRegistry:
    """
    Struct type definitions for one hashing operation.

    Accepts a mapping of type name to field list (``{"name": ..., "type": ...}``
    dicts or objects with ``name``/``type`` attributes), or an iterable of
    ``(type name, field list)`` pairs. In the pair form a name may repeat only
    with an identical definition.

    Canonical signatures and type hashes are cached per registry; the registry
    is never mutated after construction.
    """

    def __init__(self, types: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> None:
        items = types.items() if isinstance(types, Mapping) else types
        definitions: dict[str, tuple[Field, ...]] = {}
        for type_name, entries in items:
            if not isinstance(type_name, str) or not _IDENTIFIER_RE.match(type_name):
                raise MalformedInputError(f"Invalid type name {type_name!r}")
            fields = _parse_definition(type_name, entries)
            if type_name in definitions and definitions[type_name] != fields:
                raise MalformedInputError(f"Conflicting definitions for type {type_name!r}")
            definitions[type_name] = fields
        self._definitions = definitions
        self._signatures: dict[str, str] = {}
        self._type_hashes: dict[str, bytes] = {}

    @classmethod
    def of(cls, types: TypeRegistry | Mapping[str, Any]) -> TypeRegistry:
        """Return ``types`` itself if it already is a registry, else build one."""
        return types if isinstance(types, cls) else cls(types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._definitions

    def __iter__(self):
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def fields(self, type_name: str, referenced_by: str | None = None) -> tuple[Field, ...]:
        """Ordered ``(field name, FieldType)`` pairs of a struct type."""
        try:
            return self._definitions[type_name]
        except KeyError:
            raise UnknownTypeError(type_name, referenced_by) from None

    def encode_type(self, type_name: str) -> str:
        """Canonical type signature of ``type_name`` (cached)."""
        sig = self._signatures.get(type_name)
        if sig is None:
            sig = self._signatures[type_name] = canonical_signature(self, type_name)
        return sig

    def type_hash(self, type_name: str) -> bytes:
        """keccak256 of the canonical type signature (cached)."""
        th = self._type_hashes.get(type_name)
        if th is None:
            th = self._type_hashes[type_name] = keccak256(
                self.encode_type(type_name).encode("utf-8")
            )
        return th


__all__: tuple[str, ...] = (
    "ADDRESS",
    "ARRAY",
    "BOOL",
    "BYTES",
    "FIXED_BYTES",
    "INT",
    "STRING",
    "STRUCT",
    "UINT",
    "FieldType",
    "TypeRegistry",
    "parse_field_type",
)
