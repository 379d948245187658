"""
smsproxy Transport Layer.

Delivers broker messages through an SMS-style HTTP gateway.

Core Components:
- SmsTransportProxy: validation, request building, response mapping
- GatewayRequestBuilder: JSON body, Basic auth, routing metadata
- classify_response: gateway status/body -> DomainError
- TransmitResult / DomainError / ErrorCode: result types

Usage:
    from smsproxy.transport import SmsTransportProxy, Message, Identity

    proxy = SmsTransportProxy(settings, phone_utilities)
    result = await proxy.transmit(
        Message(id=1, content="hi", identity=Identity("phone", "+15550001111"))
    )
"""

from .errors import (
    DomainError,
    ErrorCode,
    TransmitResult,
    classify_response,
    parse_success_body,
    truncate_body,
)
from .models import (
    GatewayErrorInfo,
    GatewayMessage,
    GatewayResponse,
    Identity,
    Message,
    MessagePriority,
)
from .phone import DigitsPhoneNumberUtilities
from .protocol import (
    HttpClientFactory,
    IncorrectPhoneNumberError,
    MessageTransportPlugin,
    PhoneNumberUtilities,
)
from .proxy import PLUGIN_NAME, SmsTransportProxy
from .request import GatewayRequestBuilder, basic_auth_header

__all__ = [
    # Proxy
    "PLUGIN_NAME",
    "SmsTransportProxy",
    # Request
    "GatewayRequestBuilder",
    "basic_auth_header",
    # Errors / results
    "DomainError",
    "ErrorCode",
    "TransmitResult",
    "classify_response",
    "parse_success_body",
    "truncate_body",
    # Models
    "GatewayErrorInfo",
    "GatewayMessage",
    "GatewayResponse",
    "Identity",
    "Message",
    "MessagePriority",
    # Protocols
    "HttpClientFactory",
    "IncorrectPhoneNumberError",
    "MessageTransportPlugin",
    "PhoneNumberUtilities",
    "DigitsPhoneNumberUtilities",
]
