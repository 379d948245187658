"""
smsproxy - SMS gateway transport proxy for message brokers.

Turns broker-neutral messages into gateway HTTP calls and gateway
responses into broker-neutral results:

- **Transmission**: validation, text selection, phone normalization,
  Basic-auth JSON request, response classification
- **Error Taxonomy**: every failure becomes a TransmitResult error
  with an ErrorCode the broker can act on
- **Capabilities**: declared throughput and retry budget
- **Health**: liveness probe that never raises

Quick Start:
    >>> from smsproxy import create_plugin, Message, Identity
    >>> from smsproxy.transport import DigitsPhoneNumberUtilities
    >>>
    >>> plugin = create_plugin(
    ...     {"host": "gw.example.com", "path": "/send", "username": "u",
    ...      "password": "p", "sender": "ACME"},
    ...     DigitsPhoneNumberUtilities(),
    ... )
    >>> result = await plugin.transmit(
    ...     Message(id=1, content="hi", identity=Identity("phone", "+1 555 000 1111"))
    ... )
"""

__version__ = "0.1.0"

from smsproxy.config import ProxySettings, SettingsValidationError
from smsproxy.health import HealthCheckResult, HealthStatus
from smsproxy.plugin import SmsTransportPlugin, create_plugin
from smsproxy.transport import (
    DomainError,
    ErrorCode,
    Identity,
    Message,
    MessagePriority,
    SmsTransportProxy,
    TransmitResult,
)

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "ProxySettings",
    "SettingsValidationError",
    # Plugin
    "SmsTransportPlugin",
    "SmsTransportProxy",
    "create_plugin",
    # Messages and results
    "Message",
    "Identity",
    "MessagePriority",
    "TransmitResult",
    "DomainError",
    "ErrorCode",
    # Health
    "HealthCheckResult",
    "HealthStatus",
]
