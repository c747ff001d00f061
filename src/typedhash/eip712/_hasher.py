"""EIP-712 hashStruct."""

from __future__ import annotations

from collections.abc import Mapping

from ..hashes import keccak256
from ._encoder import encode_data
from ._types import TypeRegistry


def hash_struct(
    types: TypeRegistry | Mapping,
    type_name: str,
    data: Mapping[str, object],
    path: str | None = None,
) -> bytes:
    """
    keccak256(typeHash(type_name) || encodeData(type_name, data)).

    Args:
        types: TypeRegistry, or a mapping of type name to field list.
        type_name: Struct type to hash ``data`` as.
        data: Field values.
        path: Field path of ``data`` inside an enclosing struct, for errors.

    Returns:
        32-byte struct hash.
    """
    registry = TypeRegistry.of(types)
    # type_hash resolves the whole dependency graph first, so unknown types and
    # cycles are reported before any value is encoded
    type_hash = registry.type_hash(type_name)
    return keccak256(type_hash + encode_data(registry, type_name, data, path=path))


__all__: tuple[str, ...] = ("hash_struct",)
