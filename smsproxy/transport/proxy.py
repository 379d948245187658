"""
SMS Gateway Transport Proxy for smsproxy.

Delivers broker messages through an SMS-style HTTP gateway.

Pipeline (one call to transmit):
    validate -> select text -> normalize phone -> build request
    -> send -> interpret response -> TransmitResult

Expected failures (bad message data, gateway rejections) are returned
as TransmitResult errors. Only task cancellation propagates.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any

import httpx

from ..config.schemas import ProxySettings
from ..health import HealthCheckResult
from .errors import DomainError, ErrorCode, TransmitResult, classify_response, parse_success_body
from .models import Message, MessagePriority
from .protocol import HttpClientFactory, IncorrectPhoneNumberError, PhoneNumberUtilities
from .request import GatewayRequestBuilder

PLUGIN_NAME = "SmsTransportPlugin"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class SmsTransportProxy:
    """
    Transport proxy for an SMS HTTP gateway.

    Holds only immutable state after construction, so one instance can
    serve concurrent transmit calls.

    Example:
        proxy = SmsTransportProxy(
            settings=ProxySettings(host="gw.example.com", username="u",
                                   password="p", sender="ACME"),
            phone_utilities=DigitsPhoneNumberUtilities(),
        )
        result = await proxy.transmit(message)
        if not result.is_success:
            print(result.error.code, result.error.message)
    """

    def __init__(
        self,
        settings: ProxySettings,
        phone_utilities: PhoneNumberUtilities,
        client_factory: HttpClientFactory | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        """
        Initialize the proxy.

        Args:
            settings: Validated proxy settings
            phone_utilities: Phone type check and normalization
            client_factory: Returns a fresh AsyncClient per call
            logger: Logger for pipeline checkpoints
        """
        self._settings = settings
        self._phone_utilities = phone_utilities
        self._client_factory = client_factory or httpx.AsyncClient
        self._logger = logger or logging.getLogger(f"smsproxy.{PLUGIN_NAME}")
        self._request_builder = GatewayRequestBuilder(settings)

        self._logger.info(
            f"{self.name} initialized: endpoint={self.endpoint} "
            f"options={settings.loggable_options()}"
        )

    @property
    def name(self) -> str:
        return PLUGIN_NAME

    @property
    def endpoint(self) -> str:
        return self._request_builder.endpoint

    @property
    def settings(self) -> ProxySettings:
        return self._settings

    # -------------------------------------------------------------------------
    # Transmission
    # -------------------------------------------------------------------------

    async def transmit(self, message: Message) -> TransmitResult:
        """
        Deliver one message through the gateway.

        Args:
            message: Broker message (not modified)

        Returns:
            TransmitResult, successful or carrying a DomainError
        """
        extra = self._log_extra(message)
        try:
            priority = self._choose_quota_priority(message.priority)
            self._logger.info(
                f"Transmitting message {message.id} (priority={priority.value})",
                extra=extra,
            )
            error = self._validate(message)
        except Exception as e:
            error = DomainError.from_exception(
                e,
                code=ErrorCode.MESSAGE_DELIVERY,
                message=f"Unexpected error while sending message: {self.name} {message.id}. {e}",
            )
            self._logger.error(f"Transmit failed for message {message.id}: {e}", exc_info=True, extra=extra)
            return TransmitResult.fail(error)

        if error is not None:
            return self._rejected(message, error)

        try:
            return await self._send(message, self._select_text(message))
        except Exception as e:
            self._logger.error(
                f"Transmit failed for message {message.id}: {e}",
                exc_info=True,
                extra=extra,
            )
            return TransmitResult.fail(DomainError.from_exception(e))

    async def _send(self, message: Message, text: str) -> TransmitResult:
        try:
            phone_number = await self._normalize_phone(message.identity.credential_value)
        except IncorrectPhoneNumberError as e:
            return self._rejected(
                message,
                DomainError(
                    message=f"Incorrect phone number: {self.name} {message.id}. {e}",
                    code=ErrorCode.INCORRECT_PHONE_NUMBER,
                ),
            )

        request = self._request_builder.build(text, phone_number)

        async with self._client_factory() as client:
            response = await client.send(request)
            body = response.text

        error = classify_response(
            response.status_code,
            body,
            plugin_name=self.name,
            message_id=message.id,
        )
        if error is not None:
            return self._rejected(message, error)

        parsed = parse_success_body(body)
        self._logger.info(
            f"Message {message.id} accepted by gateway (id={parsed.id})",
            extra=self._log_extra(message),
        )
        return TransmitResult.ok(gateway_message_id=parsed.id)

    def _choose_quota_priority(self, priority: MessagePriority) -> MessagePriority:
        """Priority whose quota a message spends. The gateway has one quota per priority."""
        return priority

    def _validate(self, message: Message) -> DomainError | None:
        """Check recipient credential and message text."""
        identity = message.identity
        if not self._phone_utilities.is_phone_credential_type(identity.credential_type):
            return DomainError(
                message=(
                    f"Invalid credential type '{identity.credential_type}': "
                    f"{self.name} {message.id}."
                ),
                code=ErrorCode.INVALID_CREDENTIAL_TYPE,
            )

        if _is_blank(identity.credential_value):
            return DomainError(
                message=f"Message has no phone number: {self.name} {message.id}.",
                code=ErrorCode.INCORRECT_MESSAGE_DATA,
            )

        if _is_blank(message.title) and _is_blank(message.content):
            return DomainError(
                message=f"Message has neither title nor content: {self.name} {message.id}.",
                code=ErrorCode.INCORRECT_MESSAGE_DATA,
            )

        return None

    @staticmethod
    def _select_text(message: Message) -> str:
        """Content wins whenever it is not blank; title is the fallback."""
        if _is_blank(message.content):
            return message.title or ""
        return message.content or ""

    async def _normalize_phone(self, value: str) -> str:
        phone_number = self._phone_utilities.normalize(value)
        if inspect.isawaitable(phone_number):
            phone_number = await phone_number
        return phone_number

    def _rejected(self, message: Message, error: DomainError) -> TransmitResult:
        self._logger.warning(
            f"Message {message.id} not delivered [{error.code.value if error.code else 'unclassified'}]: "
            f"{error.message}",
            extra=self._log_extra(message),
        )
        return TransmitResult.fail(error)

    def _log_extra(self, message: Message) -> dict[str, Any]:
        return {"message_id": message.id, "plugin": self.name}

    # -------------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------------

    def get_messages_per_second(self) -> int:
        """Declared throughput. 0 means unbounded."""
        return self._settings.messages_per_second

    def get_try_send_count(self) -> int | None:
        """Declared retry budget. None means unbounded."""
        return self._settings.max_transmit_retry_count

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    async def health_check(self) -> HealthCheckResult:
        """
        Report proxy liveness.

        There is no gateway ping endpoint, so the proxy is healthy as long
        as the result can be composed.
        """
        try:
            return HealthCheckResult.healthy(
                message="Transport proxy is operational",
                plugin=self.name,
                endpoint=self.endpoint,
            )
        except Exception as e:
            self._logger.error(f"{self.name} health check failed: {e}", exc_info=True)
            return HealthCheckResult.unhealthy(error=str(e), plugin=self.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', endpoint='{self.endpoint}')"
