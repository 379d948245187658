"""
Collaborator and plugin protocols for the SMS gateway transport.

The proxy depends on host-supplied collaborators only through these
interfaces, so tests and hosts can pass any object with the right shape.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

if TYPE_CHECKING:
    from ..health import HealthCheckResult
    from .errors import TransmitResult
    from .models import Message


HttpClientFactory = Callable[[], httpx.AsyncClient]


class IncorrectPhoneNumberError(ValueError):
    """Raised by a phone utility when a value is not a usable phone number."""


@runtime_checkable
class PhoneNumberUtilities(Protocol):
    """
    Phone number helper supplied by the host.

    `normalize` may be a plain or an async method.
    """

    def is_phone_credential_type(self, credential_type: str) -> bool:
        """Whether credential_type identifies a phone number."""
        ...

    def normalize(self, phone_number: str) -> str | Awaitable[str]:
        """
        Canonicalize a phone number.

        Raises:
            IncorrectPhoneNumberError: If the value is not a phone number
        """
        ...


@runtime_checkable
class MessageTransportPlugin(Protocol):
    """
    Contract the broker uses to drive a transport.

    - transmit(): Deliver one message, never raising for expected failures
    - get_messages_per_second(): Declared throughput (0 = unbounded)
    - get_try_send_count(): Declared retry budget (None = unbounded)
    - health_check(): Liveness, never raising
    """

    async def transmit(self, message: "Message") -> "TransmitResult":
        ...

    def get_messages_per_second(self) -> int:
        ...

    def get_try_send_count(self) -> int | None:
        ...

    async def health_check(self) -> "HealthCheckResult":
        ...
