"""CLI entry point for typedhash."""

from __future__ import annotations

import logging
import sys

from .config import Config, get_config
from .document import decode_document, encode_digests
from .errors import TypedDataError
from .report import (
    compute_digests,
    compute_message_digests,
    compute_tx_digests,
    select_digests,
)

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _read_input(config: Config) -> bytes:
    if config.input_file is not None:
        return config.input_file.read_bytes()
    return sys.stdin.buffer.read()


def run(config: Config) -> dict[str, str]:
    """Compute the digests selected by ``config``."""
    if config.mode == "tx":
        digests = compute_tx_digests(
            config.safe_transaction(),
            config.safe_address,
            config.safe_chain_id,
            config.safe_version,
        )
        return select_digests(digests, config.show_all)

    data = _read_input(config)
    if config.mode == "message":
        digests = compute_message_digests(
            data.decode("utf-8"), config.safe_address, config.safe_chain_id
        )
    else:
        document = decode_document(data)
        digests = compute_digests(document, config.safe_address, config.safe_chain_id)
    return select_digests(digests, config.show_all)


def render(digests: dict[str, str], config: Config) -> str:
    if config.output_format == "json":
        return encode_digests(digests).decode("utf-8")
    if not config.show_all:
        return "\n".join(digests.values())
    return "\n".join(f"{name + ':':<24} {value}" for name, value in digests.items())


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    try:
        config = get_config(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.normalized_log_level)

    try:
        digests = run(config)
    except (TypedDataError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)

    print(render(digests, config))


if __name__ == "__main__":
    main()
