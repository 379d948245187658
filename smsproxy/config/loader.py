"""
Settings loading for smsproxy.

Validates host-supplied mappings and environment variables into
ProxySettings, reporting every failing field at once.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .schemas import ProxySettings

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "Transport:Proxies:SmsTransportPlugin"
ENV_PREFIX = "SMSPROXY_"

_ENV_FIELDS = (
    "host",
    "port",
    "path",
    "use_ssl",
    "username",
    "password",
    "sender",
    "messages_per_second",
    "max_transmit_retry_count",
    "request_timeout",
)


class SettingsValidationError(Exception):
    """
    Raised when proxy settings fail validation.

    Attributes:
        section: Configuration section the settings came from
        errors: One "field: reason" entry per failure
    """

    def __init__(self, section: str, errors: list[str]):
        self.section = section
        self.errors = errors
        super().__init__(
            f"Invalid settings in section '{section}': " + "; ".join(errors)
        )


def validate_settings(
    data: Mapping[str, Any] | None,
    section: str = DEFAULT_SECTION,
) -> ProxySettings:
    """
    Validate a settings mapping.

    Args:
        data: Raw settings (e.g. from the host configuration)
        section: Section name used in error messages

    Returns:
        Validated ProxySettings

    Raises:
        SettingsValidationError: If the mapping is missing or invalid
    """
    if data is None:
        raise SettingsValidationError(section, ["plugin configuration must be provided"])

    try:
        return ProxySettings.model_validate(dict(data))
    except ValidationError as e:
        errors = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "settings"
            errors.append(f"{location}: {error['msg']}")
        logger.error(f"Settings validation failed for {section}: {errors}")
        raise SettingsValidationError(section, errors) from e


def load_settings(
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
    section: str = DEFAULT_SECTION,
) -> ProxySettings:
    """
    Build settings from environment variables.

    Reads SMSPROXY_HOST, SMSPROXY_PORT, ... (one variable per field).
    Unset or empty variables fall back to the model defaults.
    An empty SMSPROXY_MAX_TRANSMIT_RETRY_COUNT means unbounded retries.
    """
    environ = os.environ if environ is None else environ

    data: dict[str, Any] = {}
    for name in _ENV_FIELDS:
        value = environ.get(f"{prefix}{name.upper()}", "").strip()
        if value:
            data[name] = value

    return validate_settings(data, section=section)
