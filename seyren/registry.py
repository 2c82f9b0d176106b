"""
Notifier registry and factory functions for Seyren.

Notifiers register themselves under a name; a dispatcher creates them once
from configuration and routes each subscription to the notifiers whose
can_handle() accepts its kind.
"""

from collections.abc import Callable, Iterable

from seyren.config import SeyrenConfig
from seyren.core import NotificationService, SubscriptionType


class NotifierRegistry:
    """Mapping of registration names to notification service classes."""

    def __init__(self) -> None:
        self._notifiers: dict[str, type[NotificationService]] = {}

    def register_notifier(self, name: str, cls: type[NotificationService]) -> None:
        """Register a notifier implementation."""
        self._notifiers[name] = cls

    def get_notifier(self, name: str) -> type[NotificationService]:
        """Get a notifier class by name."""
        if name not in self._notifiers:
            raise ValueError(f"Unknown notifier type: {name}")
        return self._notifiers[name]

    def list_notifiers(self) -> list[str]:
        """List the names of all registered notifiers."""
        return list(self._notifiers.keys())


# Global registry instance
_registry = NotifierRegistry()


def create_notifier(name: str, config: SeyrenConfig) -> NotificationService:
    """Create a notifier instance from configuration."""
    cls = _registry.get_notifier(name)
    return cls(config)


def create_notifiers(config: SeyrenConfig) -> list[NotificationService]:
    """Create one instance of every registered notifier."""
    return [create_notifier(name, config) for name in _registry.list_notifiers()]


def notifiers_for(
    subscription_type: SubscriptionType,
    notifiers: Iterable[NotificationService]
) -> list[NotificationService]:
    """Return the notifiers able to deliver the given subscription kind."""
    return [notifier for notifier in notifiers if notifier.can_handle(subscription_type)]


def register_notifier(
    name: str
) -> Callable[[type[NotificationService]], type[NotificationService]]:
    """Decorator to register a notifier class."""
    def decorator(cls: type[NotificationService]) -> type[NotificationService]:
        _registry.register_notifier(name, cls)
        return cls
    return decorator


def get_registry() -> NotifierRegistry:
    """Get the global notifier registry."""
    return _registry
