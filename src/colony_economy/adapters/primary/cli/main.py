#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load .env file from the working directory
dotenv_path = Path.cwd() / '.env'
if dotenv_path.exists():
    load_dotenv(dotenv_path)

from .chain_cli import setup_chain_commands
from .planning_cli import setup_planning_commands


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Colony economy chain planner")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # Setup subcommands
    setup_planning_commands(subparsers)
    setup_chain_commands(subparsers)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Use func attribute set by set_defaults
    if hasattr(args, "func"):
        return args.func(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
