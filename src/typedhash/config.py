"""Configuration management using msgspec Struct."""

from __future__ import annotations

import argparse
import os
import re
from pathlib import Path

import msgspec

from .errors import MalformedInputError
from .safe import (
    DEFAULT_SAFE_VERSION,
    ZERO_ADDRESS,
    SafeTransaction,
    chain_id_of,
    parse_safe_version,
    supported_chain_names,
)

MODES = ("typed", "message", "tx")
OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class Config(msgspec.Struct, frozen=True):
    """Command configuration using msgspec Struct."""

    # Input: a typed-data JSON document, or message text in message mode.
    # None reads stdin.
    input_file: Path | None = None
    mode: str = "typed"

    # Output
    full: bool = False
    output_format: str = "text"

    # Safe wrapping
    safe_address: str | None = None
    chain: str | None = None
    chain_id: int | None = None

    # Safe transaction (tx mode)
    to: str | None = None
    nonce: int | None = None
    value: int = 0
    data: str = "0x"
    operation: int = 0
    safe_tx_gas: int = 0
    base_gas: int = 0
    gas_price: int = 0
    gas_token: str = ZERO_ADDRESS
    refund_receiver: str = ZERO_ADDRESS
    safe_version: str = DEFAULT_SAFE_VERSION

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode}")

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format}"
            )

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level}")

        if self.chain is not None and self.chain_id is not None:
            raise ValueError("--chain and --chain-id are mutually exclusive")

        if self.chain is not None and self.chain not in supported_chain_names():
            raise ValueError(f"chain {self.chain!r} is not supported")

        if self.chain_id is not None and self.chain_id < 1:
            raise ValueError(f"chain_id must be positive, got {self.chain_id}")

        if self.safe_address is not None and not _ADDRESS_RE.match(self.safe_address):
            raise ValueError(f"safe_address is not a valid address: {self.safe_address}")

        for name in ("to", "gas_token", "refund_receiver"):
            address = getattr(self, name)
            if address is not None and not _ADDRESS_RE.match(address):
                raise ValueError(f"{name} is not a valid address: {address}")

        if self.operation not in (0, 1):
            raise ValueError(
                f"operation must be 0 (call) or 1 (delegatecall), got {self.operation}"
            )

        for name in ("nonce", "value", "safe_tx_gas", "base_gas", "gas_price"):
            amount = getattr(self, name)
            if amount is not None and amount < 0:
                raise ValueError(f"{name} must not be negative, got {amount}")

        try:
            version = parse_safe_version(self.safe_version)
        except MalformedInputError as e:
            raise ValueError(str(e)) from None
        if version < (0, 1, 0):
            raise ValueError(f"Safe version {self.safe_version} is not supported")

        if self.mode in ("message", "tx"):
            if self.safe_address is None:
                raise ValueError(f"--safe-address is required in {self.mode} mode")
            if self.chain is None and self.chain_id is None:
                raise ValueError(f"--chain or --chain-id is required in {self.mode} mode")

        if self.mode == "tx":
            if self.to is None:
                raise ValueError("--to is required in tx mode")
            if self.nonce is None:
                raise ValueError("--nonce is required in tx mode")

        if self.input_file is not None and not self.input_file.is_file():
            raise ValueError(f"input_file not found: {self.input_file}")

    @property
    def normalized_log_level(self) -> str:
        """Return normalized uppercase log level."""
        return self.log_level.upper()

    @property
    def safe_chain_id(self) -> int | None:
        """Chain id selected by --chain or --chain-id, if any."""
        if self.chain is not None:
            return chain_id_of(self.chain)
        return self.chain_id

    @property
    def show_all(self) -> bool:
        """Whether every digest is printed rather than the EIP-712 hash alone."""
        return self.full or self.safe_address is not None or self.mode != "typed"

    def safe_transaction(self) -> SafeTransaction:
        """The Safe transaction described by the tx mode options."""
        return SafeTransaction(
            to=self.to,
            nonce=self.nonce,
            value=self.value,
            data=self.data,
            operation=self.operation,
            safe_tx_gas=self.safe_tx_gas,
            base_gas=self.base_gas,
            gas_price=self.gas_price,
            gas_token=self.gas_token,
            refund_receiver=self.refund_receiver,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typedhash",
        description="typedhash - EIP-712 typed data and Safe{Wallet} message and transaction hashes",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        default=None,
        help="Typed data JSON (or message text with --message); stdin when omitted",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--message",
        action="store_true",
        default=False,
        help="Treat the input as a plain-text message to sign through a Safe",
    )
    mode.add_argument(
        "--tx",
        action="store_true",
        default=False,
        help="Hash the Safe transaction given by the transaction options (no input is read)",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        default=False,
        help="Print domain and message hashes alongside the EIP-712 hash",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=os.getenv("TYPEDHASH_OUTPUT_FORMAT", "text"),
        help="Output format",
    )
    parser.add_argument(
        "-s",
        "--safe-address",
        default=None,
        help="Safe address: wraps typed data as a SafeMessage, required for --message and --tx",
    )
    chain = parser.add_mutually_exclusive_group()
    chain.add_argument(
        "-c",
        "--chain",
        default=None,
        help=f"Safe chain name ({', '.join(supported_chain_names())})",
    )
    chain.add_argument(
        "--chain-id",
        type=int,
        default=None,
        help="Safe chain id (defaults to the typed data domain's chainId)",
    )
    tx = parser.add_argument_group("Safe transaction (--tx)")
    tx.add_argument("-t", "--to", default=None, help="Address the Safe calls")
    tx.add_argument("-n", "--nonce", type=int, default=None, help="Safe nonce of the transaction")
    tx.add_argument("--value", type=int, default=0, help="Value sent, in wei")
    tx.add_argument("-d", "--data", default="0x", help="Calldata as 0x hex")
    tx.add_argument(
        "--operation", type=int, choices=(0, 1), default=0, help="0 call, 1 delegatecall"
    )
    tx.add_argument("--safe-tx-gas", type=int, default=0, help="safeTxGas")
    tx.add_argument("--base-gas", type=int, default=0, help="baseGas (dataGas before Safe 1.0.0)")
    tx.add_argument("--gas-price", type=int, default=0, help="gasPrice")
    tx.add_argument("--gas-token", default=ZERO_ADDRESS, help="gasToken")
    tx.add_argument("--refund-receiver", default=ZERO_ADDRESS, help="refundReceiver")
    tx.add_argument(
        "-u",
        "--safe-version",
        default=DEFAULT_SAFE_VERSION,
        help="Safe contract version, selects the SafeTx and domain layout",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("TYPEDHASH_LOG_LEVEL", "WARNING").upper(),
        help="Logging level",
    )
    return parser


def get_config(argv: list[str] | None = None) -> Config:
    """Parse command line arguments and return configuration."""
    args = build_parser().parse_args(argv)

    config_dict: dict[str, object] = {
        "input_file": args.input_file,
        "mode": "message" if args.message else "tx" if args.tx else "typed",
        "full": args.full,
        "output_format": args.output_format,
        "safe_address": args.safe_address,
        "chain": args.chain,
        "chain_id": args.chain_id,
        "to": args.to,
        "nonce": args.nonce,
        "value": args.value,
        "data": args.data,
        "operation": args.operation,
        "safe_tx_gas": args.safe_tx_gas,
        "base_gas": args.base_gas,
        "gas_price": args.gas_price,
        "gas_token": args.gas_token,
        "refund_receiver": args.refund_receiver,
        "safe_version": args.safe_version,
        "log_level": args.log_level,
    }

    try:
        config = msgspec.convert(config_dict, Config)
    except msgspec.ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}") from e

    return config


__all__: tuple[str, ...] = ("Config", "build_parser", "get_config")
