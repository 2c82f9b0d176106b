"""
Built-in Seyren notifiers.

Importing this package registers every notifier below with the registry.
"""

from seyren.notifiers.log import LoggerNotifier
from seyren.notifiers.slack import SlackWebhookNotifier

__all__ = ["LoggerNotifier", "SlackWebhookNotifier"]
