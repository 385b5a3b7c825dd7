"""
Chain CLI commands

Inspects and ages stored chains:
- colony-economy chains list [--funded]
- colony-economy chains age
"""
import argparse
import asyncio

from ....application.planning.commands.age_funded_chains import AgeFundedChainsCommand
from ....application.planning.queries.list_chains import ListChainsQuery
from ....configuration.container import get_mediator
from .formatting import print_chains


def list_chains_command(args: argparse.Namespace) -> int:
    """
    Handle chains list command

    Returns:
        0 on success, 1 on error
    """
    try:
        mediator = get_mediator()
        chains = asyncio.run(mediator.send_async(ListChainsQuery(funded_only=args.funded)))

        if not chains:
            print("No funded chains stored" if args.funded else "No chains stored")
            return 0

        print_chains("Funded chains" if args.funded else "Stored chains", chains)
        return 0

    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def age_chains_command(args: argparse.Namespace) -> int:
    """
    Handle chains age command

    Returns:
        0 on success, 1 on error
    """
    try:
        mediator = get_mediator()
        aged = asyncio.run(mediator.send_async(AgeFundedChainsCommand(ticks=args.ticks)))

        print(f"✅ Aged {len(aged)} funded chains")
        return 0

    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def setup_chain_commands(subparsers):
    """
    Setup chain CLI command structure

    Args:
        subparsers: Argparse subparsers to add commands to
    """
    chains_parser = subparsers.add_parser("chains", help="Inspect stored chains")
    chains_subparsers = chains_parser.add_subparsers(dest="chains_command")

    list_parser = chains_subparsers.add_parser("list", help="List stored chains")
    list_parser.add_argument("--funded", action="store_true", help="Only funded chains")
    list_parser.set_defaults(func=list_chains_command)

    age_parser = chains_subparsers.add_parser("age", help="Advance the age of funded chains")
    age_parser.add_argument("--ticks", type=int, default=1, help="Ticks to add")
    age_parser.set_defaults(func=age_chains_command)
