"""Hash functions: Keccak-256."""

from .keccak import KECCAK256_EMPTY, keccak256

__all__: tuple[str, ...] = ("KECCAK256_EMPTY", "keccak256")
