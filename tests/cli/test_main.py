# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Dodo Payments CLI entry point."""

import json
import logging
import sys
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import httpx
import pytest
import respx

from dodopayments.cli.main import main

BASE = "https://live.dodopayments.com"

# ###############
# Helpers
# ###############


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DODO_PAYMENTS_API_KEY", "DODO_PAYMENTS_BASE_URL", "DODO_PAYMENTS_LOG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sdk_logger() -> Iterator[logging.Logger]:
    """Restore the SDK logger after a command configured it."""
    logger = logging.getLogger("dodopayments")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["dodopayments", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0
    assert "decode" in capsys.readouterr().out


# -------- decode tests --------


def test_decode_prints_wire_form(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """decode reads a file, coerces it and prints it back normalized."""
    payload = tmp_path / "refund.json"
    payload.write_text(
        json.dumps(
            {
                "business_id": "bus_1",
                "created_at": "2024-06-01T10:00:00+00:00",
                "is_partial": False,
                "payment_id": "pay_1",
                "refund_id": "ref_1",
                "status": "succeeded",
                "amount": "500",
            }
        ),
        encoding="utf-8",
    )

    assert _run(monkeypatch, "decode", "Refund", str(payload)) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["created_at"] == "2024-06-01T10:00:00Z"
    assert output["amount"] == 500


def test_decode_reads_standard_input(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """decode without a file reads the document from stdin."""
    monkeypatch.setattr(sys, "stdin", StringIO('{"valid": true, "extra": 1}'))

    assert _run(monkeypatch, "decode", "LicenseValidateResponse") == 0

    assert json.loads(capsys.readouterr().out) == {"valid": True, "extra": 1}


def test_decode_unknown_model_fails(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """decode exits with 1 for names that are not models."""
    assert _run(monkeypatch, "decode", "NoSuchModel") == 1
    assert "unknown model 'NoSuchModel'" in capsys.readouterr().err


def test_decode_invalid_json_fails(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """decode exits with 1 for malformed JSON."""
    monkeypatch.setattr(sys, "stdin", StringIO("{not json"))
    assert _run(monkeypatch, "decode", "Payment") == 1
    assert "invalid JSON" in capsys.readouterr().err


def test_decode_missing_file_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """decode exits with 1 when the file cannot be read."""
    assert _run(monkeypatch, "decode", "Payment", str(tmp_path / "missing.json")) == 1
    assert "cannot read" in capsys.readouterr().err


# -------- config tests --------


def test_config_masks_api_key(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """config prints the resolved settings with the key masked."""
    config_file = tmp_path / "dodopayments.yaml"
    config_file.write_text("api-key: sk_live_abcdef1234\nenvironment: test_mode\n", encoding="utf-8")

    assert _run(monkeypatch, "config", "--config", str(config_file)) == 0

    out = capsys.readouterr().out
    assert "api-key: ****1234" in out
    assert "sk_live" not in out
    assert "base-url: https://test.dodopayments.com" in out
    assert "max-retries: 2" in out


def test_config_without_key(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """config reports a missing key."""
    assert _run(monkeypatch, "config") == 0
    assert "api-key: (not set)" in capsys.readouterr().out


def test_config_invalid_file_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """config exits with 1 when the file is invalid."""
    config_file = tmp_path / "dodopayments.yaml"
    config_file.write_text("timeout: never\n", encoding="utf-8")

    assert _run(monkeypatch, "config", "--config", str(config_file)) == 1
    assert "'timeout' must be a positive number" in capsys.readouterr().err


# -------- get tests --------


def test_get_prints_response(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, respx_mock: respx.MockRouter
) -> None:
    """get sends an authenticated request with the query and prints the JSON body."""
    monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "sk_cli")
    route = respx_mock.get(f"{BASE}/payments").mock(return_value=httpx.Response(200, json={"items": []}))

    assert _run(monkeypatch, "get", "payments", "--query", "page_size=5") == 0

    assert json.loads(capsys.readouterr().out) == {"items": []}
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer sk_cli"
    assert request.url.params["page_size"] == "5"


def test_get_reports_api_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, respx_mock: respx.MockRouter
) -> None:
    """get exits with 1 when the API answers with an error."""
    respx_mock.get(f"{BASE}/payments/pay_x").mock(return_value=httpx.Response(401, json={"message": "Unauthorized"}))

    assert _run(monkeypatch, "get", "payments/pay_x") == 1
    assert "Unauthorized" in capsys.readouterr().err


def test_get_rejects_malformed_query(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """get exits with 1 for query parameters without '='."""
    assert _run(monkeypatch, "get", "payments", "--query", "page_size") == 1
    assert "KEY=VALUE" in capsys.readouterr().err


# -------- logging tests --------


def test_log_level_configures_sdk_logger(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, sdk_logger: logging.Logger
) -> None:
    """--log-level sets the level of the SDK logger."""
    monkeypatch.setattr(sys, "stdin", StringIO('{"valid": false}'))
    assert _run(monkeypatch, "--log-level", "debug", "decode", "LicenseValidateResponse") == 0
    assert sdk_logger.level == logging.DEBUG


def test_unknown_log_level_fails(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, sdk_logger: logging.Logger
) -> None:
    """An unknown --log-level exits with 1."""
    assert _run(monkeypatch, "--log-level", "chatty", "config") == 1
    assert "unknown log level 'chatty'" in capsys.readouterr().err


def test_unknown_log_level_in_config_fails(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
    tmp_path: Path,
    sdk_logger: logging.Logger,
) -> None:
    """get exits with 1 before sending anything when the config file names an unknown log level."""
    config_file = tmp_path / "dodo.yaml"
    config_file.write_text("log-level: chatty\n", encoding="utf-8")

    assert _run(monkeypatch, "get", "payments", "--config", str(config_file)) == 1
    assert "unknown log level 'chatty'" in capsys.readouterr().err


def test_log_level_from_config_applies_to_get(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, sdk_logger: logging.Logger, respx_mock: respx.MockRouter
) -> None:
    """get configures the SDK logger from the config file's log-level."""
    config_file = tmp_path / "dodo.yaml"
    config_file.write_text("log-level: info\n", encoding="utf-8")
    respx_mock.get(f"{BASE}/payments").mock(return_value=httpx.Response(200, json={}))

    assert _run(monkeypatch, "get", "payments", "--config", str(config_file)) == 0
    assert sdk_logger.level == logging.INFO
