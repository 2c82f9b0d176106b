"""
Seyren notifications - delivers check state changes to external channels.

Notification services format the latest alert transition of a check and
send it to the destination named by a subscription (a Slack channel via
incoming webhook, or the local log).
"""

__version__ = "0.1.0"
