"""
Core interfaces and data structures for Seyren notifications.

A notification service receives a check, one of its subscriptions and the
alerts raised for that check, and delivers them somewhere:
- Check: what is monitored and its aggregate state
- Subscription: where (and through which channel kind) to deliver
- Alert: a single state transition of a monitored target
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seyren.config import SeyrenConfig


class AlertType(str, Enum):
    """Severity state of a check or alert."""
    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


class SubscriptionType(str, Enum):
    """Delivery channel kinds a subscription can ask for."""
    EMAIL = "EMAIL"
    PAGERDUTY = "PAGERDUTY"
    HIPCHAT = "HIPCHAT"
    HUBOT = "HUBOT"
    HTTP = "HTTP"
    PUSHOVER = "PUSHOVER"
    SLACK = "SLACK"
    SLACKWEBHOOK = "SLACKWEBHOOK"
    LOGGER = "LOGGER"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Check:
    """A monitored condition."""
    id: str
    name: str
    state: AlertType
    description: str | None = None
    target: str | None = None  # Graphite target expression


@dataclass(frozen=True)
class Subscription:
    """A delivery target for a check."""
    target: str  # Channel name, email address, URL... depending on type
    type: SubscriptionType
    id: str | None = None
    check_id: str | None = None
    enabled: bool = True


@dataclass(frozen=True)
class Alert:
    """One observed state transition."""
    target: str
    value: Decimal | float | int
    from_type: AlertType
    to_type: AlertType
    check_id: str | None = None
    timestamp: datetime | None = None


class DeliveryError(str, Enum):
    """Why a single delivery attempt failed."""
    SERIALIZATION = "serialization"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of one delivery attempt."""
    error: DeliveryError | None = None
    status_code: int | None = None
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class NotificationService(ABC):
    """
    Base class for all notification services.

    Services are created once with the shared configuration and may be
    called concurrently; they must not keep per-call state on the instance.
    """

    def __init__(self, config: SeyrenConfig):
        """
        Initialize the service with configuration.

        Args:
            config: Resolved Seyren configuration
        """
        self.config = config

    @abstractmethod
    def send_notification(
        self,
        check: Check,
        subscription: Subscription,
        alerts: list[Alert]
    ) -> None:
        """
        Deliver a notification about the alerts raised for a check.

        Args:
            check: The check whose state changed
            subscription: Where to deliver the notification
            alerts: State transitions, oldest first
        """
        raise NotImplementedError

    @abstractmethod
    def can_handle(self, subscription_type: SubscriptionType) -> bool:
        """Return True if this service delivers the given subscription kind."""
        raise NotImplementedError
