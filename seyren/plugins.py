"""
Plugin initialization for Seyren.

Importing this module registers every built-in notifier.
"""

# pylint: disable=unused-import
# ruff: noqa: F401
from seyren.notifiers import log, slack
from seyren.registry import (
    create_notifier,
    create_notifiers,
    get_registry,
    notifiers_for,
)

__all__ = [
    "create_notifier",
    "create_notifiers",
    "get_registry",
    "notifiers_for",
]
