"""Cross-cutting pipeline behaviors"""
from .behaviors import LoggingBehavior, ValidationBehavior

__all__ = ['LoggingBehavior', 'ValidationBehavior']
