"""
Seyren CLI - Command line interface for Seyren notifications.

Provides commands for:
- Configuration validation
- Sending a notification for a check by hand
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation

from seyren.config import SeyrenConfig, load_config
from seyren.core import Alert, AlertType, Check, Subscription, SubscriptionType
from seyren.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _mask(url: str) -> str:
    """Hide the secret part of a webhook URL."""
    if not url:
        return "(not set)"
    if len(url) <= 24:
        return "***"
    return f"{url[:24]}***"


def _parse_value(raw: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise argparse.ArgumentTypeError(f"not a number: {raw}") from e


def cmd_config_validate(args: argparse.Namespace, config: SeyrenConfig) -> int:
    """Print the resolved configuration."""
    print(f"✓ Configuration valid{f': {args.config}' if args.config else ''}")
    print(f"  - Base URL:          {config.base_url}")
    print(f"  - Slack webhook URL: {_mask(config.slack_webhook_url)}")
    print(f"  - Slack username:    {config.slack_username}")
    print(f"  - HTTP timeout:      {config.http_timeout}s")
    return 0


def cmd_notify(args: argparse.Namespace, config: SeyrenConfig) -> int:
    """Send a notification about a single transition."""
    from seyren.plugins import create_notifiers, notifiers_for

    subscription_type = SubscriptionType(args.type.upper())

    check = Check(id=args.check_id, name=args.check_name, state=args.to_state)
    subscription = Subscription(target=args.channel, type=subscription_type)
    alert = Alert(
        target=args.target,
        value=args.value,
        from_type=args.from_state,
        to_type=args.to_state,
        check_id=args.check_id
    )

    handlers = notifiers_for(subscription_type, create_notifiers(config))
    if not handlers:
        print(f"✗ No notifier handles subscription type {subscription_type}", file=sys.stderr)
        return 1

    delivered = 0
    for notifier in handlers:
        name = type(notifier).__name__
        deliver = getattr(notifier, "deliver", None)
        if deliver is None:
            notifier.send_notification(check, subscription, [alert])
        else:
            result = deliver(check, subscription, [alert])
            if not result.ok:
                print(f"  ✗ {name} ({result.error.value})")
                continue
        print(f"  ✓ {name}")
        delivered += 1

    return 0 if delivered > 0 else 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="seyren",
        description="Seyren - deliver check state changes to notification channels"
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to YAML configuration file (environment variables are always applied)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log request and response details"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="subcommand")
    config_subparsers.add_parser("validate", help="Validate configuration")

    states = [state.value for state in AlertType]
    notify_parser = subparsers.add_parser("notify", help="Send a notification for a check")
    notify_parser.add_argument("channel", help="Subscription target (e.g. Slack channel)")
    notify_parser.add_argument("--check-id", required=True, help="Check identifier")
    notify_parser.add_argument("--check-name", required=True, help="Check display name")
    notify_parser.add_argument("--target", required=True, help="Metric target that changed")
    notify_parser.add_argument("--value", required=True, type=_parse_value, help="Observed value")
    notify_parser.add_argument("--from-state", required=True, type=AlertType, choices=states,
                               metavar="STATE", help="Previous state")
    notify_parser.add_argument("--to-state", required=True, type=AlertType, choices=states,
                               metavar="STATE", help="New state")
    notify_parser.add_argument(
        "-t", "--type",
        choices=["slackwebhook", "logger"],
        default="slackwebhook",
        help="Subscription type (default: slackwebhook)"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"✗ Configuration invalid: {e}", file=sys.stderr)
        return 1

    setup_logging(config, verbose=args.verbose)

    if args.command == "config":
        if args.subcommand == "validate":
            return cmd_config_validate(args, config)
        parser.print_help()
        return 0

    if args.command == "notify":
        try:
            return cmd_notify(args, config)
        except Exception as e:
            print(f"Error sending notification: {e}", file=sys.stderr)
            logger.exception("Error in notify")
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
