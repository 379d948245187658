"""
Transport plugin entry point for smsproxy.

The broker talks to a plugin; the plugin forwards every call to the
proxy it was built with. create_plugin() wires the proxy from explicit
dependencies.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import DEFAULT_SECTION, ProxySettings, validate_settings
from .health import HealthCheckResult
from .transport import (
    HttpClientFactory,
    Message,
    PhoneNumberUtilities,
    SmsTransportProxy,
    TransmitResult,
)


class SmsTransportPlugin:
    """
    Broker-facing plugin wrapping a SmsTransportProxy.

    Implements the MessageTransportPlugin protocol.
    """

    def __init__(self, proxy: SmsTransportProxy):
        self._proxy = proxy

    @property
    def name(self) -> str:
        return self._proxy.name

    @property
    def proxy(self) -> SmsTransportProxy:
        return self._proxy

    async def transmit(self, message: Message) -> TransmitResult:
        return await self._proxy.transmit(message)

    def get_messages_per_second(self) -> int:
        return self._proxy.get_messages_per_second()

    def get_try_send_count(self) -> int | None:
        return self._proxy.get_try_send_count()

    async def health_check(self) -> HealthCheckResult:
        return await self._proxy.health_check()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(proxy={self._proxy!r})"


def create_plugin(
    settings: ProxySettings | Mapping[str, Any],
    phone_utilities: PhoneNumberUtilities,
    client_factory: HttpClientFactory | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
    section: str = DEFAULT_SECTION,
) -> SmsTransportPlugin:
    """
    Factory function for creating SmsTransportPlugin.

    Args:
        settings: Validated settings, or a raw mapping to validate
        phone_utilities: Phone type check and normalization
        client_factory: Returns a fresh httpx.AsyncClient per call
        logger: Logger for the proxy
        section: Configuration section name used in validation errors

    Returns:
        Configured SmsTransportPlugin

    Raises:
        SettingsValidationError: If a raw mapping fails validation
    """
    if not isinstance(settings, ProxySettings):
        settings = validate_settings(settings, section=section)

    proxy = SmsTransportProxy(
        settings=settings,
        phone_utilities=phone_utilities,
        client_factory=client_factory,
        logger=logger,
    )
    return SmsTransportPlugin(proxy)
