"""
Logger notifier for Seyren.
"""

from seyren.core import Alert, Check, NotificationService, Subscription, SubscriptionType
from seyren.logging_config import get_logger
from seyren.registry import register_notifier

logger = get_logger(__name__)


@register_notifier("logger")
class LoggerNotifier(NotificationService):
    """
    Writes the latest transition of a check to the Seyren log.

    Useful for testing subscriptions without an external service.

    Config:
        (none required)
    """

    def can_handle(self, subscription_type: SubscriptionType) -> bool:
        return subscription_type == SubscriptionType.LOGGER

    def send_notification(
        self,
        check: Check,
        subscription: Subscription,
        alerts: list[Alert]
    ) -> None:
        if not alerts:
            logger.warning("No alerts to log for check '%s'", check.id)
            return

        alert = alerts[-1]
        logger.info(
            "Check '%s' (%s) went %s -> %s: %s = %s [%s]",
            check.name,
            check.id,
            alert.from_type,
            alert.to_type,
            alert.target,
            alert.value,
            subscription.target
        )


__all__ = ["LoggerNotifier"]
