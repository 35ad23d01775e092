#!/usr/bin/env python3
"""
Database Seeder — Interactive CLI.

Menu-driven front end over the same steps the batch runs. The session keeps
its context (token, client ID, fetched lists, selections) alive between
actions until Exit, Ctrl+C, or Clear Session.

A failing action never ends the session: the error is printed and the menu
comes back. Exit and Ctrl+C both leave with status 0.

Usage:
    python interactive.py
    python interactive.py --verbose
    python interactive.py --env /path/to/.env
"""

import sys
import argparse
import logging

from core import CliSession, ConfigurationError, RequestFailed, load_config
from core import menu
from core.actions import handle_action


def run_interactive(session: CliSession) -> int:
    """Menu loop. Returns the process exit status."""
    menu.display_welcome(session.config.api_base_url)

    while True:
        try:
            action = menu.show_main_menu(session.is_authenticated())

            if action == menu.EXIT:
                menu.display_goodbye()
                return 0

            handle_action(action, session)

        except (KeyboardInterrupt, EOFError):
            print("\n\nInterrupted by user.")
            menu.display_goodbye()
            return 0

        except Exception as e:
            print(f"\n✗ Error: {e}")
            if session.config.verbose and isinstance(e, RequestFailed) and e.body is not None:
                print(f"  API Response: {e.body}")
            print("\nReturning to main menu...\n")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Database Seeder - Interactive CLI"
    )
    parser.add_argument("--env", "-e", default="./.env", help="Path to .env file")
    parser.add_argument("--verbose", action="store_true", help="Log HTTP calls")
    parser.add_argument("--debug", action="store_true", help="Verbose plus HTTP library debug logging")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s - %(levelname)s - %(message)s'
        )
        logging.getLogger('urllib3').setLevel(logging.DEBUG)

    config = load_config(args.env)
    if args.verbose or args.debug:
        config.verbose = True

    try:
        config.ensure_valid()
    except ConfigurationError as e:
        print("\nConfiguration Errors:")
        for err in e.errors:
            print(f"  - {err}")
        sys.exit(1)

    sys.exit(run_interactive(CliSession(config)))


if __name__ == "__main__":
    main()
