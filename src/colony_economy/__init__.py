"""Colony economy - production chain planning for corp-based colonies"""

__version__ = "0.1.0"
