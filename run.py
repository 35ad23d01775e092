#!/usr/bin/env python3
"""
Database Seeder — Batch entry point.

Authenticates against the backend and runs the configured seeding steps in
order, stopping at the first failure. Configuration comes from a .env file
(see config/settings.py for every setting and its default).

The batch (managed by SeederOrchestrator) always starts with:
  1. Domain  - fetch the client ID
  2. Auth    - log in and store the bearer token
followed by any creation steps requested with --include.

Usage:
    python run.py                              # Authenticate only
    python run.py --include activities         # Authenticate, then create activities
    python run.py --include activities --include users
    python run.py --verbose                    # Log every HTTP call, dump context
    python run.py --debug                      # Verbose + urllib3 debug logging
    python run.py --env /path/to/.env          # Use alternate .env file

Exit status is 0 when every step succeeded, 1 otherwise.
"""

import sys
import argparse
import logging
from pathlib import Path

from core import ConfigurationError, SeederContext, SeederHttpClient, SeederOrchestrator, load_config
from steps import AUTHENTICATION_STEPS, OPTIONAL_STEPS

VERSION_FILE = Path(__file__).resolve().parent / "VERSION"
VERSION = VERSION_FILE.read_text().strip() if VERSION_FILE.exists() else "unknown"


def build_steps(include=None):
    """Authentication steps followed by the requested optional steps, in order."""
    return list(AUTHENTICATION_STEPS) + [OPTIONAL_STEPS[name] for name in include or []]


def main(argv=None):
    """Parse CLI arguments and run the seeding batch."""
    parser = argparse.ArgumentParser(
        description="Database Seeder - Seed a REST backend with sample data"
    )
    parser.add_argument("--env", "-e", default="./.env", help="Path to .env file")
    parser.add_argument(
        "--include",
        action="append",
        choices=sorted(OPTIONAL_STEPS),
        help="Creation step to run after authentication (repeatable)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log HTTP calls and dump context")
    parser.add_argument("--debug", action="store_true", help="Verbose plus HTTP library debug logging")
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")

    args = parser.parse_args(argv)

    if args.version:
        print(f"db-seeder {VERSION}")
        sys.exit(0)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s - %(levelname)s - %(message)s'
        )
        logging.getLogger('urllib3').setLevel(logging.DEBUG)

    config = load_config(args.env)
    if args.verbose or args.debug:
        config.verbose = True

    steps = build_steps(args.include)

    print("=" * 60)
    print(f"Database Seeder Starting v{VERSION}")
    print("=" * 60)
    print(f"API Base URL: {config.api_base_url}")
    print(f"Verbose Mode: {'ON' if config.verbose else 'OFF'}")
    print(f"Steps: {', '.join(step.name for step in steps)}")
    print("=" * 60)

    try:
        config.ensure_valid()
    except ConfigurationError as e:
        print("\nConfiguration Errors:")
        for err in e.errors:
            print(f"  - {err}")
        sys.exit(1)

    context = SeederContext()
    client = SeederHttpClient.from_config(context, config)
    orchestrator = SeederOrchestrator(steps, client, context, verbose=config.verbose)

    results = orchestrator.run()
    orchestrator.print_summary(results)

    if not results.get("success"):
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
