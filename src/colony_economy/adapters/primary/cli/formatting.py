"""Console rendering of chains"""
from typing import List

from ....domain.planning.chain import Chain, calculate_chain_roi


def print_chain(chain: Chain) -> None:
    status = "funded" if chain.funded else "unfunded"
    print(f"\n  {chain.chain_id} ({status}, age {chain.age})")
    print(f"    Cost:   {chain.total_cost:.2f}")
    print(f"    Mint:   {chain.mint_value:.2f}")
    print(f"    Profit: {chain.profit:.2f} (ROI {calculate_chain_roi(chain):.1%})")
    print("    Segments:")
    for segment in chain.segments:
        print(
            f"      {segment.corp_id:<20} {segment.corp_type.value:<10} "
            f"{segment.quantity:>8.1f} {segment.resource:<14} -> {segment.output_price:.2f}"
        )


def print_chains(title: str, chains: List[Chain]) -> None:
    print(f"\n{title} ({len(chains)}):")
    print("=" * 80)
    for chain in chains:
        print_chain(chain)
