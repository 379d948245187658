"""
Health check results for smsproxy.

A probe must never crash its caller: failures are reported as an
UNHEALTHY result carrying the error text.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class HealthStatus(str, Enum):
    """Health status for a transport."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass(frozen=True)
class HealthCheckResult:
    """Result of a health check."""

    status: HealthStatus
    message: Optional[str] = None
    error: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

    @classmethod
    def healthy(cls, message: Optional[str] = None, **metadata: Any) -> "HealthCheckResult":
        return cls(status=HealthStatus.HEALTHY, message=message, metadata=metadata)

    @classmethod
    def unhealthy(cls, error: str, **metadata: Any) -> "HealthCheckResult":
        return cls(status=HealthStatus.UNHEALTHY, error=error, metadata=metadata)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "error": self.error,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


__all__ = [
    "HealthStatus",
    "HealthCheckResult",
]
