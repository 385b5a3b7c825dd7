"""Chain planning queries"""
from .find_viable_chains import FindViableChainsQuery
from .find_best_chains import FindBestChainsQuery
from .list_chains import ListChainsQuery

__all__ = [
    'FindViableChainsQuery',
    'FindBestChainsQuery',
    'ListChainsQuery',
]
