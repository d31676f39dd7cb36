#!/usr/bin/env python
"""Console runner script.

Usage:
    python scripts/run_console.py [--config PATH] [--env-file PATH] [--seed-file PATH]

Examples:
    python scripts/run_console.py                             # Default seeds
    python scripts/run_console.py --seed-file configs/seed.example.yaml
    python scripts/run_console.py --log-level debug --log-format console
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main() -> None:
    """Run the interactive console with the specified configuration."""
    parser = argparse.ArgumentParser(
        description="Run the Dexter research console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/run_console.py
    python scripts/run_console.py --seed-file configs/seed.example.yaml
    python scripts/run_console.py --log-level debug --log-format console
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: configs/app.yaml)",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Path to .env file",
    )

    parser.add_argument(
        "--seed-file",
        type=str,
        default=None,
        help="YAML file with initial messages, providers and agent cards",
    )

    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (default: from config)",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=None,
        help="Log format (default: from config)",
    )

    args = parser.parse_args()

    # Set environment variables for the config loader to pick up
    if args.seed_file:
        os.environ["CONSOLE_SEED_FILE"] = args.seed_file
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level.upper()
    if args.log_format:
        os.environ["LOG_FORMAT"] = args.log_format

    from dexter_console.main import HELP_TEXT, ConsoleRunner, create_console
    from dexter_console.utils.exceptions import ConfigurationError

    try:
        session = create_console(config_path=args.config, env_file=args.env_file)
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(f"\n{'='*60}")
    print("  Dexter - Web Console (terminal)")
    print(f"{'='*60}")
    print(f"  Session:   {session.session_id}")
    print(f"  Providers: {len(session.providers)}")
    print(f"  Cards:     {len(session.agent_cards)}")
    print(f"{'='*60}\n")
    print(HELP_TEXT)

    ConsoleRunner(session).run(sys.stdin)


if __name__ == "__main__":
    main()
