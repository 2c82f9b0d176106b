"""
Slack incoming-webhook notifier for Seyren.

Posts the most recent state transition of a check to a Slack channel as a
single colored attachment.
"""

from typing import Any, ClassVar

import requests
from pydantic import BaseModel

from seyren.config import SeyrenConfig
from seyren.core import (
    Alert,
    AlertType,
    Check,
    DeliveryError,
    DeliveryResult,
    NotificationService,
    Subscription,
    SubscriptionType,
)
from seyren.logging_config import get_logger
from seyren.registry import register_notifier

logger = get_logger(__name__)

COLOR_ERROR = "#d93240"
COLOR_WARN = "#FFD801"
COLOR_OK = "#5bb12f"
COLOR_UNKNOWN = "#CACACA"

ALERT_COLORS: dict[AlertType, str] = {
    AlertType.ERROR: COLOR_ERROR,
    AlertType.OK: COLOR_OK,
    AlertType.WARN: COLOR_WARN,
}


class SlackField(BaseModel):
    """One attachment field; `short` is omitted when unset."""
    title: str
    value: str
    short: bool | None = None


class SlackAttachment(BaseModel):
    color: str
    fallback: str
    title: str
    title_link: str
    fields: list[SlackField]


class SlackMessage(BaseModel):
    """Body of an incoming-webhook POST."""
    channel: str
    username: str
    icon_emoji: str = ":seyren:"
    attachments: list[SlackAttachment]

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


def get_alert_color(state: Any) -> str:
    """Map a check state to its attachment color; unknown values are gray."""
    try:
        return ALERT_COLORS.get(state, COLOR_UNKNOWN)
    except TypeError:  # unhashable
        return COLOR_UNKNOWN


def check_url(base_url: str, check_id: str) -> str:
    """Link to the check's detail page in the Seyren UI."""
    return f"{base_url.rstrip('/')}/#/checks/{check_id}"


def describe(alert: Alert) -> str:
    """Description field text: "<target> = <value>"."""
    return f"{alert.target} = {alert.value}"


@register_notifier("slack_webhook")
class SlackWebhookNotifier(NotificationService):
    """
    Sends notifications to Slack via an incoming webhook.

    Config:
        slack_webhook_url: Incoming webhook URL
        slack_username: Name the message is posted as
        base_url: Seyren UI URL used for the check link
        http_timeout: Seconds before the request is abandoned

    Delivery is best effort: failures are logged and never raised.
    """

    HEADERS: ClassVar[dict[str, str]] = {
        "accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(self, config: SeyrenConfig, webhook_url: str | None = None):
        super().__init__(config)
        self.webhook_url = webhook_url if webhook_url is not None else config.slack_webhook_url
        self.username = config.slack_username

    def can_handle(self, subscription_type: SubscriptionType) -> bool:
        return subscription_type == SubscriptionType.SLACKWEBHOOK

    def build_message(
        self,
        check: Check,
        subscription: Subscription,
        alerts: list[Alert]
    ) -> SlackMessage:
        """
        Build the webhook message for the latest transition.

        Only the last alert is rendered; earlier ones are ignored.

        Raises:
            IndexError: If alerts is empty
        """
        alert = alerts[-1]

        attachment = SlackAttachment(
            color=get_alert_color(check.state),
            fallback=check.name,
            title=check.name,
            title_link=check_url(self.config.base_url, check.id),
            fields=[
                SlackField(title="New State Value", value=str(alert.to_type), short=True),
                SlackField(title="Old State Value", value=str(alert.from_type), short=True),
                SlackField(title="Description", value=describe(alert)),
            ],
        )

        return SlackMessage(
            channel=subscription.target,
            username=self.username,
            attachments=[attachment],
        )

    def deliver(
        self,
        check: Check,
        subscription: Subscription,
        alerts: list[Alert]
    ) -> DeliveryResult:
        """
        Make a single delivery attempt and report how it went.

        Returns:
            DeliveryResult whose error names the failing step, if any
        """
        try:
            body = self.build_message(check, subscription, alerts).to_json()
        except (IndexError, ValueError, TypeError, AttributeError) as e:
            return DeliveryResult(error=DeliveryError.SERIALIZATION, cause=e)

        logger.debug("> parameters: %s", body)

        try:
            with requests.Session() as session:
                with session.post(
                    self.webhook_url,
                    data=body.encode("utf-8"),
                    headers=self.HEADERS,
                    timeout=self.config.http_timeout
                ) as response:
                    logger.debug("Status: %s, Body: %s", response.status_code, response.text)
                    try:
                        response.raise_for_status()
                    except requests.HTTPError as e:
                        return DeliveryResult(
                            error=DeliveryError.HTTP_STATUS,
                            status_code=response.status_code,
                            cause=e
                        )
                    return DeliveryResult(status_code=response.status_code)
        except requests.RequestException as e:
            return DeliveryResult(error=DeliveryError.TRANSPORT, cause=e)

    def send_notification(
        self,
        check: Check,
        subscription: Subscription,
        alerts: list[Alert]
    ) -> None:
        """Post the latest transition to Slack; never raises on delivery failure."""
        try:
            result = self.deliver(check, subscription, alerts)
        except Exception as e:  # pylint: disable=broad-except
            result = DeliveryResult(error=DeliveryError.UNEXPECTED, cause=e)

        if result.ok:
            logger.info(
                "Slack notification sent for check '%s' to %s",
                check.id,
                subscription.target
            )
            return

        logger.warning(
            "Error posting to Slack for check '%s' (%s)",
            getattr(check, "id", None),
            result.error.value,
            exc_info=result.cause
        )


__all__ = ["SlackWebhookNotifier"]
