"""
Planning CLI commands

Plans production chains over a scenario snapshot:
- colony-economy plan viable --scenario colony.json
- colony-economy plan best --scenario colony.json --budget 5000 --fund
"""
import argparse
import asyncio

from ....application.planning.commands.fund_best_chains import FundBestChainsCommand
from ....application.planning.queries.find_best_chains import FindBestChainsQuery
from ....application.planning.queries.find_viable_chains import FindViableChainsQuery
from ....configuration.container import configure_planner_factory, get_mediator, get_mint_values
from ....configuration.settings import settings
from ....domain.shared.exceptions import DomainException
from ...secondary.scenario.scenario_loader import load_scenario
from .formatting import print_chains


def _configure_scenario(args: argparse.Namespace) -> None:
    scenario = load_scenario(args.scenario, get_mint_values())
    configure_planner_factory(
        lambda: scenario.create_planner(
            max_depth=settings.max_depth,
            hauling_cost_per_tile=settings.hauling_cost_per_tile
        )
    )


def plan_viable_command(args: argparse.Namespace) -> int:
    """
    Handle plan viable command

    Returns:
        0 on success, 1 on error
    """
    try:
        _configure_scenario(args)
        mediator = get_mediator()

        chains = asyncio.run(mediator.send_async(FindViableChainsQuery(tick=args.tick)))

        if not chains:
            print("No viable chains found")
            return 0

        print_chains("Viable chains", chains)
        return 0

    except DomainException as e:
        print(f"❌ {e}")
        return 1
    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def plan_best_command(args: argparse.Namespace) -> int:
    """
    Handle plan best command; with --fund the selection is persisted

    Returns:
        0 on success, 1 on error
    """
    try:
        _configure_scenario(args)
        mediator = get_mediator()

        if args.fund:
            request = FundBestChainsCommand(tick=args.tick, budget=args.budget)
        else:
            request = FindBestChainsQuery(tick=args.tick, budget=args.budget)

        chains = asyncio.run(mediator.send_async(request))

        if not chains:
            print(f"No chains fit a budget of {args.budget:.2f}")
            return 0

        print_chains("Funded chains" if args.fund else "Best chains", chains)
        total_cost = sum(chain.total_cost for chain in chains)
        print(f"\nTotal cost {total_cost:.2f} of budget {args.budget:.2f}")
        if args.fund:
            print(f"✅ Funded {len(chains)} chains")
        return 0

    except DomainException as e:
        print(f"❌ {e}")
        return 1
    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def setup_planning_commands(subparsers):
    """
    Setup planning CLI command structure

    Args:
        subparsers: Argparse subparsers to add commands to
    """
    plan_parser = subparsers.add_parser("plan", help="Plan production chains")
    plan_subparsers = plan_parser.add_subparsers(dest="plan_command")

    viable_parser = plan_subparsers.add_parser("viable", help="List every profitable chain")
    viable_parser.add_argument("--scenario", required=True, help="Scenario JSON file")
    viable_parser.add_argument("--tick", type=int, default=0, help="Planning tick")
    viable_parser.set_defaults(func=plan_viable_command)

    best_parser = plan_subparsers.add_parser("best", help="Select chains for a budget")
    best_parser.add_argument("--scenario", required=True, help="Scenario JSON file")
    best_parser.add_argument("--budget", type=float, required=True, help="Credits available")
    best_parser.add_argument("--tick", type=int, default=0, help="Planning tick")
    best_parser.add_argument("--fund", action="store_true", help="Fund and store the selection")
    best_parser.set_defaults(func=plan_best_command)
