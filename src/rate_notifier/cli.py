#!/usr/bin/env python3
"""
Command-line interface for Rate Notifier
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import LOG_LEVELS, Config
from .constants import ENV_API_KEY, ENV_WEBHOOK_URL
from .exceptions import ConfigurationError, RateNotifierError
from .handler import PubSubMessage, handle_message
from .utils.logging import setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="rate-notifier",
        description="Fetch the USD to AUD exchange rate and post it to Slack",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run once using variables from .env in the current directory
  rate-notifier

  # Use a specific env file with debug output
  rate-notifier --env-file ~/.config/rate-notifier.env --log-level DEBUG
        """,
    )

    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "--env-file",
        help="Path to .env file (defaults to .env lookup from the current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level (overrides LOG_LEVEL)",
    )

    parser.add_argument(
        "--payload",
        default="hello",
        help="Trigger payload to pass to the handler (ignored by the run)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main execution function"""
    args = parse_args(argv)

    logger = setup_logger(level=args.log_level)

    try:
        try:
            config = Config.from_env(args.env_file)
        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            print("\nPlease check your .env file or environment variables.")
            print("Required variables:")
            print(f"  - {ENV_API_KEY}")
            print(f"  - {ENV_WEBHOOK_URL}")
            sys.exit(1)

        # Re-apply logging with the configured level and file
        logger = setup_logger(config, level=args.log_level)
        logger.debug(f"Loaded {config!r}")

        rate = handle_message(PubSubMessage(data=args.payload.encode("utf-8")), config=config)
        logger.info(f"Done, posted rate {rate:.5f}")

    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user")
        sys.exit(0)
    except RateNotifierError as e:
        logger.error(f"Application error: {e}", exc_info=True)
        print(f"\n✗ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
