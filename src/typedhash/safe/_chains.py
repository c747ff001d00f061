"""Chains with a Safe{Wallet} deployment, by name."""

from __future__ import annotations

SAFE_SUPPORTED_CHAINS: tuple[tuple[int, str], ...] = (
    (42161, "arbitrum"),
    (1313161554, "aurora"),
    (43114, "avalanche"),
    (8453, "base"),
    (81457, "blast"),
    (56, "bsc"),
    (42220, "celo"),
    (1, "ethereum"),
    (100, "gnosis"),
    (59144, "linea"),
    (5000, "mantle"),
    (10, "optimism"),
    (137, "polygon"),
    (534352, "scroll"),
    (11155111, "sepolia"),
    (480, "worldchain"),
    (196, "xlayer"),
    (324, "zksync"),
    (84532, "base-sepolia"),
    (10200, "gnosis-chiado"),
    (1101, "polygon-zkevm"),
    (43111, "hemi"),
)

_CHAIN_IDS = {name: chain_id for chain_id, name in SAFE_SUPPORTED_CHAINS}


def supported_chain_names() -> list[str]:
    return [name for _, name in SAFE_SUPPORTED_CHAINS]


def chain_id_of(chain_name: str) -> int:
    """Chain id for a supported chain name; ValueError if unknown."""
    try:
        return _CHAIN_IDS[chain_name]
    except KeyError:
        raise ValueError(f"unsupported safe chain - {chain_name}") from None


__all__: tuple[str, ...] = (
    "SAFE_SUPPORTED_CHAINS",
    "chain_id_of",
    "supported_chain_names",
)
