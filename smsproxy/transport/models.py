"""
Message and wire models for the SMS gateway transport.

Message/Identity are owned by the broker and passed in read-only.
The Gateway* models describe the JSON exchanged with the gateway.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class MessagePriority(str, Enum):
    """Broker priority of a message."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class Identity:
    """
    Recipient identity.

    Attributes:
        credential_type: Kind of recipient identifier (e.g. "phone")
        credential_value: The identifier itself (e.g. "+1 555 000 1111")
    """

    credential_type: str
    credential_value: str | None = None


@dataclass(frozen=True, slots=True)
class Message:
    """
    A notification message handed over by the broker.

    Attributes:
        id: Broker message identifier
        identity: Recipient identity
        title: Message title (fallback text)
        content: Message body (preferred text)
        priority: Broker priority
    """

    id: str | int
    identity: Identity
    title: str | None = None
    content: str | None = None
    priority: MessagePriority = field(default=MessagePriority.NORMAL)


class GatewayMessage(BaseModel):
    """Request body sent to the gateway."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    phone_number: str = Field(..., alias="phone")
    content: str
    sender: str


class GatewayResponse(BaseModel):
    """Expected success body. Only `id` is required."""

    model_config = ConfigDict(extra="ignore")

    id: int


class GatewayErrorInfo(BaseModel):
    """Optional shape of a failure body."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    code: int | None = Field(None, alias="error_code")
    message: str | None = Field(None, alias="error_message")

    @property
    def is_empty(self) -> bool:
        return self.code is None and self.message is None

    @classmethod
    def parse_lenient(cls, body: str) -> "GatewayErrorInfo":
        """Parse a failure body, returning an empty info if it does not fit."""
        try:
            return cls.model_validate_json(body)
        except ValidationError:
            return cls()
