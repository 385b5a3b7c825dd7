"""Graph navigation adapters"""

from .node_navigator import NodeNavigator, PathResult

__all__ = ['NodeNavigator', 'PathResult']
