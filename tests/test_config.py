"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import SAFE_ADDRESS

from typedhash.config import Config, get_config


class TestConfigValidation:
    """Tests for Config field validation."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.mode == "typed"
        assert config.output_format == "text"
        assert config.input_file is None
        assert config.normalized_log_level == "WARNING"
        assert config.show_all is False

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValueError, match="mode must be one of"):
            Config(mode="transaction")

    def test_invalid_output_format(self) -> None:
        with pytest.raises(ValueError, match="output_format must be one of"):
            Config(output_format="yaml")

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            Config(log_level="LOUD")

    def test_log_level_is_normalized(self) -> None:
        assert Config(log_level="debug").normalized_log_level == "DEBUG"

    def test_chain_and_chain_id_exclusive(self) -> None:
        with pytest.raises(ValueError, match="mutually exclusive"):
            Config(chain="ethereum", chain_id=1)

    def test_unsupported_chain(self) -> None:
        with pytest.raises(ValueError, match="is not supported"):
            Config(chain="dogechain")

    def test_chain_id_positive(self) -> None:
        with pytest.raises(ValueError, match="chain_id must be positive"):
            Config(chain_id=0)

    def test_safe_chain_id(self) -> None:
        assert Config(chain="sepolia").safe_chain_id == 11155111
        assert Config(chain_id=10).safe_chain_id == 10
        assert Config().safe_chain_id is None

    def test_invalid_safe_address(self) -> None:
        with pytest.raises(ValueError, match="safe_address is not a valid address"):
            Config(safe_address="0x1234")

    def test_safe_address_implies_full_output(self) -> None:
        assert Config(safe_address=SAFE_ADDRESS).show_all is True

    def test_message_mode_requires_safe_and_chain(self) -> None:
        with pytest.raises(ValueError, match="--safe-address is required"):
            Config(mode="message", chain="ethereum")
        with pytest.raises(ValueError, match="--chain or --chain-id is required"):
            Config(mode="message", safe_address=SAFE_ADDRESS)

    def test_tx_mode_requires_transaction_fields(self) -> None:
        with pytest.raises(ValueError, match="--to is required"):
            Config(mode="tx", safe_address=SAFE_ADDRESS, chain="ethereum", nonce=1)
        with pytest.raises(ValueError, match="--nonce is required"):
            Config(mode="tx", safe_address=SAFE_ADDRESS, chain="ethereum", to=SAFE_ADDRESS)
        with pytest.raises(ValueError, match="--safe-address is required in tx mode"):
            Config(mode="tx", chain="ethereum", to=SAFE_ADDRESS, nonce=1)

    def test_tx_fields_are_validated(self) -> None:
        with pytest.raises(ValueError, match="to is not a valid address"):
            Config(to="0x1234")
        with pytest.raises(ValueError, match="gas_token is not a valid address"):
            Config(gas_token="nope")
        with pytest.raises(ValueError, match="operation must be 0"):
            Config(operation=2)
        with pytest.raises(ValueError, match="nonce must not be negative"):
            Config(nonce=-1)
        with pytest.raises(ValueError, match="Invalid Safe version"):
            Config(safe_version="1.3")
        with pytest.raises(ValueError, match="is not supported"):
            Config(safe_version="0.0.9")

    def test_input_file_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="input_file not found"):
            Config(input_file=tmp_path / "missing.json")

    def test_input_file_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "typed.json"
        path.write_text("{}")
        assert Config(input_file=path).input_file == path


class TestGetConfig:
    """Tests for command line parsing."""

    def test_parse_all_options(self, tmp_path: Path) -> None:
        path = tmp_path / "typed.json"
        path.write_text("{}")
        config = get_config(
            [
                "--input-file",
                str(path),
                "--full",
                "--format",
                "json",
                "--safe-address",
                SAFE_ADDRESS,
                "--chain",
                "base",
                "--log-level",
                "debug",
            ]
        )
        assert config.input_file == path
        assert config.full is True
        assert config.output_format == "json"
        assert config.safe_address == SAFE_ADDRESS
        assert config.safe_chain_id == 8453
        assert config.normalized_log_level == "DEBUG"

    def test_message_mode(self) -> None:
        config = get_config(["--message", "-s", SAFE_ADDRESS, "--chain-id", "100"])
        assert config.mode == "message"
        assert config.safe_chain_id == 100

    def test_tx_mode(self) -> None:
        config = get_config(
            [
                "--tx",
                "-s",
                SAFE_ADDRESS,
                "-c",
                "sepolia",
                "--to",
                "0x" + "11" * 20,
                "--nonce",
                "6",
                "--data",
                "0x095ea7b3",
                "--safe-version",
                "1.1.1",
            ]
        )
        assert config.mode == "tx"
        assert config.show_all is True
        tx = config.safe_transaction()
        assert tx.to == "0x" + "11" * 20
        assert tx.nonce == 6
        assert tx.data == "0x095ea7b3"
        assert tx.operation == 0
        assert config.safe_version == "1.1.1"

    def test_message_and_tx_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            get_config(["--message", "--tx"])

    def test_validation_errors_become_value_errors(self) -> None:
        with pytest.raises(ValueError, match="Configuration validation error"):
            get_config(["--message"])

    def test_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPEDHASH_LOG_LEVEL", "info")
        monkeypatch.setenv("TYPEDHASH_OUTPUT_FORMAT", "json")
        config = get_config([])
        assert config.normalized_log_level == "INFO"
        assert config.output_format == "json"

    def test_chain_options_conflict(self) -> None:
        with pytest.raises(SystemExit):
            get_config(["--chain", "ethereum", "--chain-id", "1"])
