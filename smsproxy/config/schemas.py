"""
Configuration Schemas for smsproxy.

Pydantic models for the transport proxy settings supplied by the host.

Security:
    The gateway password uses SecretStr to prevent accidental logging
    of credentials. Access the value with `.get_secret_value()`.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

_HOST_LABEL = re.compile(r"^(?!-)[A-Za-z0-9_-]{1,63}(?<!-)$")


def is_valid_hostname(host: str) -> bool:
    """Check that host is a DNS name, an IPv4 or an IPv6 address."""
    candidate = host.strip()
    if candidate.startswith("[") and candidate.endswith("]"):
        candidate = candidate[1:-1]
    try:
        ipaddress.ip_address(candidate)
        return True
    except ValueError:
        pass

    if not candidate or len(candidate) > 255:
        return False
    labels = candidate.rstrip(".").split(".")
    return all(_HOST_LABEL.match(label) for label in labels)


class ProxySettings(BaseModel):
    """
    Settings of the SMS gateway transport proxy.

    Constructed once when the proxy is created and never changed afterwards.

    Attributes:
        host: Gateway host name or IP address
        port: Gateway port (1..65535)
        path: Request path on the gateway
        use_ssl: Use https instead of http
        username: Basic auth user name
        password: Basic auth password
        sender: Sender identity shown to the recipient
        messages_per_second: Declared throughput, 0 means unbounded
        max_transmit_retry_count: Declared retry budget, None means unbounded
        request_timeout: Upper bound for one gateway call, in seconds
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    host: str = Field(..., description="Gateway host name")
    port: int = Field(443, gt=0, lt=65536, description="Gateway port")
    path: str = Field("/", description="Request path on the gateway")
    use_ssl: bool = Field(True, description="Use https")
    username: str = Field(..., description="Basic auth user name")
    password: SecretStr = Field(..., description="Basic auth password")
    sender: str = Field(..., description="Sender name")
    messages_per_second: int = Field(0, ge=0, description="0 means unbounded")
    max_transmit_retry_count: int | None = Field(None, ge=0, description="None means unbounded")
    request_timeout: float = Field(30.0, gt=0, description="Gateway call timeout in seconds")

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("host must not be empty")
        if not is_valid_hostname(value):
            raise ValueError("invalid host name")
        return value.strip()

    @field_validator("username", "sender")
    @classmethod
    def _check_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        value = (value or "").strip()
        if not value.startswith("/"):
            value = "/" + value
        return value

    @property
    def scheme(self) -> str:
        return "https" if self.use_ssl else "http"

    @property
    def endpoint(self) -> str:
        """Target URL of the gateway, e.g. https://gw.example.com:443/send."""
        host = self.host
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{self.scheme}://{host}:{self.port}{self.path}"

    def loggable_options(self) -> dict[str, Any]:
        """Settings that are safe to write to logs."""
        return {
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "use_ssl": self.use_ssl,
            "sender": self.sender,
            "messages_per_second": self.messages_per_second,
            "max_transmit_retry_count": self.max_transmit_retry_count,
        }
