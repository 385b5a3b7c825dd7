"""Chain planning commands"""
from .fund_best_chains import FundBestChainsCommand
from .age_funded_chains import AgeFundedChainsCommand

__all__ = [
    'FundBestChainsCommand',
    'AgeFundedChainsCommand',
]
