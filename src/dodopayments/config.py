# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the Dodo Payments client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from dodopayments.errors import ConfigError
from dodopayments.request_options import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT

# ###############
# Public Interface
# ###############

ENVIRONMENTS: dict[str, str] = {
    "live_mode": "https://live.dodopayments.com",
    "test_mode": "https://test.dodopayments.com",
}

DEFAULT_ENVIRONMENT = "live_mode"

API_KEY_ENV = "DODO_PAYMENTS_API_KEY"
BASE_URL_ENV = "DODO_PAYMENTS_BASE_URL"
LOG_LEVEL_ENV = "DODO_PAYMENTS_LOG"


@dataclass
class ClientConfig:
    """Settings used to build a client.

    Attributes:
        api_key: Bearer token sent with every request.
        base_url: Root URL of the API. Overrides the environment when set.
        environment: Either ``live_mode`` or ``test_mode``.
        timeout: Default request timeout in seconds.
        max_retries: Default number of retries for retryable failures.
        log_level: Level name for the ``dodopayments`` logger, if any.
    """

    api_key: str | None = None
    base_url: str | None = None
    environment: str = DEFAULT_ENVIRONMENT
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    log_level: str | None = None

    @property
    def resolved_base_url(self) -> str:
        """The explicit base URL, or the URL of the configured environment."""
        if self.base_url:
            return self.base_url
        return ENVIRONMENTS[self.environment]


def load_client_config(path: Path | None = None, env: Mapping[str, str] | None = None) -> ClientConfig:
    """Load the client configuration from an optional YAML file and the environment.

    Environment variables take precedence over values from the file.

    Args:
        path: Path to a YAML configuration file, or None to skip the file.
        env: Environment variables to read; defaults to ``os.environ``.

    Returns:
        A ClientConfig populated from the file and the environment.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    if env is None:
        env = os.environ

    if path is None:
        config = ClientConfig()
    else:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}") from None
        except OSError as exc:
            raise ConfigError(f"Cannot read config file: {exc}") from exc
        config = _parse_client_config(text, source_label=str(path))

    if env.get(API_KEY_ENV):
        config.api_key = env[API_KEY_ENV]
    if env.get(BASE_URL_ENV):
        config.base_url = env[BASE_URL_ENV]
    if env.get(LOG_LEVEL_ENV):
        config.log_level = env[LOG_LEVEL_ENV]
    return config


# ################
# Implementation
# ################

_KNOWN_KEYS = {"api-key", "base-url", "environment", "timeout", "max-retries", "log-level"}


def _parse_client_config(text: str, source_label: str = "<string>") -> ClientConfig:
    """Parse client config YAML text into a ClientConfig.

    Raises:
        ConfigError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    # An empty file is a valid, empty configuration.
    if data is None:
        return ClientConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: client config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    config = ClientConfig(
        api_key=_optional_string(data, "api-key", source_label),
        base_url=_optional_string(data, "base-url", source_label),
        log_level=_optional_string(data, "log-level", source_label),
    )

    environment = _optional_string(data, "environment", source_label)
    if environment is not None:
        if environment not in ENVIRONMENTS:
            choices = ", ".join(sorted(ENVIRONMENTS))
            raise ConfigError(f"{source_label}: 'environment' must be one of {choices}, got '{environment}'")
        config.environment = environment

    if "timeout" in data:
        timeout = data["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"{source_label}: 'timeout' must be a positive number")
        config.timeout = float(timeout)

    if "max-retries" in data:
        max_retries = data["max-retries"]
        if isinstance(max_retries, bool) or not isinstance(max_retries, int) or max_retries < 0:
            raise ConfigError(f"{source_label}: 'max-retries' must be a non-negative integer")
        config.max_retries = max_retries

    return config


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field from a mapping, raising ConfigError on a wrong type."""
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value
