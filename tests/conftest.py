"""
Pytest configuration and fixtures for Seyren tests.
"""

import logging
from collections.abc import Iterator
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from seyren.config import SeyrenConfig
from seyren.core import Alert, AlertType, Check, Subscription, SubscriptionType


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo setup_logging() so caplog keeps seeing package records."""
    yield
    package_logger = logging.getLogger("seyren")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def config() -> SeyrenConfig:
    return SeyrenConfig(
        base_url="http://seyren.example.com",
        slack_webhook_url="https://hooks.slack.com/services/XXX/YYY/ZZZ",
        slack_username="Seyren",
    )


@pytest.fixture
def check() -> Check:
    return Check(id="42", name="CPU High", state=AlertType.ERROR)


@pytest.fixture
def subscription() -> Subscription:
    return Subscription(target="#alerts", type=SubscriptionType.SLACKWEBHOOK)


@pytest.fixture
def alert() -> Alert:
    return Alert(
        target="host1.cpu",
        value=Decimal("97.5"),
        from_type=AlertType.WARN,
        to_type=AlertType.ERROR,
        check_id="42"
    )


@pytest.fixture
def slack_session() -> Iterator[MagicMock]:
    """
    Patch requests.Session in the Slack notifier.

    Yields the session object the notifier posts with; the response it
    returns is `slack_session.post.return_value.__enter__.return_value`.
    """
    with patch("seyren.notifiers.slack.requests.Session") as session_cls:
        session = MagicMock()
        session_cls.return_value.__enter__.return_value = session
        session_cls.return_value.__exit__.return_value = False

        response = MagicMock()
        response.status_code = 200
        response.text = "ok"
        session.post.return_value.__enter__.return_value = response
        session.post.return_value.__exit__.return_value = False

        session.session_cls = session_cls
        yield session
