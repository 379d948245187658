"""
Gateway request construction.

Builds the POST request carrying one message: JSON body, Basic auth
header, timeout and routing metadata for the HTTP layer.
"""
from __future__ import annotations

import base64

import httpx

from ..config.schemas import ProxySettings
from .models import GatewayMessage

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Request extension read by routing / circuit-breaking transports
POLICY_CONTEXT_KEY = "policy_context"


def basic_auth_header(username: str, password: str) -> str:
    """Generate Basic auth header value."""
    credentials = f"{username}:{password}"
    encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


class GatewayRequestBuilder:
    """
    Builds gateway requests from selected text and a normalized phone.

    The endpoint URL and the auth header depend only on the settings,
    so both are computed once here and reused by every request.
    """

    def __init__(self, settings: ProxySettings):
        self._settings = settings
        self._endpoint = settings.endpoint
        self._auth_header = basic_auth_header(
            settings.username,
            settings.password.get_secret_value(),
        )
        self._timeout = httpx.Timeout(settings.request_timeout)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def build_body(self, text: str, phone_number: str) -> GatewayMessage:
        return GatewayMessage(
            phone_number=phone_number,
            content=text,
            sender=self._settings.sender,
        )

    def build(self, text: str, phone_number: str) -> httpx.Request:
        """
        Build the gateway request.

        Args:
            text: Message text selected from content/title
            phone_number: Normalized recipient phone

        Returns:
            httpx.Request ready to be sent by any AsyncClient
        """
        body = self.build_body(text, phone_number)

        return httpx.Request(
            "POST",
            self._endpoint,
            content=body.model_dump_json(by_alias=True).encode("utf-8"),
            headers={
                "Authorization": self._auth_header,
                "Content-Type": JSON_CONTENT_TYPE,
            },
            extensions={
                "timeout": self._timeout.as_dict(),
                POLICY_CONTEXT_KEY: {"host": self._settings.host},
            },
        )
