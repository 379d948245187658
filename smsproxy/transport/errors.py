"""
Error taxonomy for the SMS gateway transport.

Failures never leave the proxy as exceptions. They are described by a
DomainError carried inside a TransmitResult, so the broker can log,
alert on, or retry them according to its own policy.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError

from .models import GatewayErrorInfo, GatewayResponse

MAX_BODY_LENGTH = 500
ELLIPSIS = "..."


class ErrorCode(str, Enum):
    """Classification of transmit failures."""

    # Message problems - retrying the same message will not help
    INCORRECT_MESSAGE_DATA = "IncorrectMessageDataError"
    INVALID_CREDENTIAL_TYPE = "InvalidCredentialTypeError"
    INCORRECT_PHONE_NUMBER = "IncorrectPhoneNumberError"

    # Transport problems
    TRANSPORT_AUTHORIZE = "TransportAuthorizeError"
    TRANSPORT_PENDING = "TransportPendingError"

    # Gateway problems
    MESSAGE_TRANSMIT = "MessageTransmitError"
    MESSAGE_DELIVERY = "MessageDeliveryError"


@dataclass(frozen=True, slots=True)
class DomainError:
    """
    A classified (or unclassified) transmit failure.

    Attributes:
        message: Human-readable description
        code: Error classification, None for unclassified failures
        status_code: Gateway HTTP status, if a response was received
        gateway_error: Parsed error body, if the gateway sent one
        details: Traceback text for unexpected failures
    """

    message: str
    code: ErrorCode | None = None
    status_code: int | None = None
    gateway_error: GatewayErrorInfo | None = None
    details: str | None = None

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        *,
        code: ErrorCode | None = None,
        message: str | None = None,
    ) -> "DomainError":
        """
        Create a DomainError from an exception.

        Must be called from inside the handling `except` block so the
        traceback is still available.
        """
        return cls(
            message=message or str(exception) or type(exception).__name__,
            code=code,
            details=traceback.format_exc(),
        )

    @property
    def is_classified(self) -> bool:
        return self.code is not None

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "code": self.code.value if self.code else None,
            "status_code": self.status_code,
            "gateway_error": (
                self.gateway_error.model_dump() if self.gateway_error else None
            ),
            "details": self.details,
        }


@dataclass(frozen=True, slots=True)
class TransmitResult:
    """
    Outcome of one transmit call.

    Exactly one of `is_success` and `error` holds.

    Attributes:
        is_success: Whether the gateway accepted the message
        error: Failure description when not successful
        gateway_message_id: Identifier assigned by the gateway on success
    """

    is_success: bool
    error: DomainError | None = None
    gateway_message_id: int | None = None

    def __post_init__(self) -> None:
        if self.is_success == (self.error is not None):
            raise ValueError("TransmitResult must be either successful or carry an error")

    @classmethod
    def ok(cls, gateway_message_id: int | None = None) -> "TransmitResult":
        return cls(is_success=True, gateway_message_id=gateway_message_id)

    @classmethod
    def fail(cls, error: DomainError) -> "TransmitResult":
        return cls(is_success=False, error=error)


# Status code -> (error code, description)
_STATUS_ERRORS: dict[int, tuple[ErrorCode, str]] = {
    503: (ErrorCode.TRANSPORT_PENDING, "Transport is temporarily unavailable"),
    429: (ErrorCode.TRANSPORT_PENDING, "Transport is temporarily unavailable"),
    500: (ErrorCode.MESSAGE_TRANSMIT, "Gateway failed to process the message"),
    400: (ErrorCode.INCORRECT_MESSAGE_DATA, "Gateway rejected the message data"),
    406: (ErrorCode.INCORRECT_MESSAGE_DATA, "Gateway rejected the message data"),
    401: (ErrorCode.TRANSPORT_AUTHORIZE, "Gateway rejected the credentials"),
    403: (ErrorCode.TRANSPORT_AUTHORIZE, "Gateway rejected the credentials"),
}


def truncate_body(body: str, limit: int = MAX_BODY_LENGTH) -> str:
    """Cut body to `limit` characters, marking the cut with an ellipsis."""
    if len(body) <= limit:
        return body
    return body[:limit] + ELLIPSIS


def parse_success_body(body: str) -> GatewayResponse | None:
    """Parse a success body, or return None if it breaks the contract."""
    try:
        return GatewayResponse.model_validate_json(body)
    except ValidationError:
        return None


def classify_response(
    status_code: int,
    body: str,
    *,
    plugin_name: str,
    message_id: str | int,
) -> DomainError | None:
    """
    Map a gateway response to a DomainError.

    Args:
        status_code: HTTP status of the response
        body: Full response body
        plugin_name: Adapter name, included in the error message
        message_id: Broker message id, included in the error message

    Returns:
        None if the gateway accepted the message, otherwise the DomainError
    """
    if status_code == 200:
        if parse_success_body(body) is not None:
            return None
        return DomainError(
            message=(
                f"Gateway returned an unexpected response that could not be deserialized: "
                f"{plugin_name} {truncate_body(body)} {message_id}."
            ),
            code=ErrorCode.MESSAGE_DELIVERY,
            status_code=status_code,
        )

    truncated = truncate_body(body)
    code, description = _STATUS_ERRORS.get(
        status_code,
        (ErrorCode.MESSAGE_DELIVERY, "Message delivery failed"),
    )
    error_info = GatewayErrorInfo.parse_lenient(body)

    return DomainError(
        message=f"{description}: {plugin_name} {status_code} {truncated} {message_id}.",
        code=code,
        status_code=status_code,
        gateway_error=None if error_info.is_empty else error_info,
    )
