"""Colony policy - credit minting"""

from .mint_values import (
    MintValues,
    DEFAULT_MINT_VALUES,
    EXPANSION_MINT_VALUES,
    DEFENSIVE_MINT_VALUES,
    MINT_PRESETS,
    get_mint_value,
    calculate_mint,
    create_mint_values,
    get_preset,
)

__all__ = [
    'MintValues',
    'DEFAULT_MINT_VALUES',
    'EXPANSION_MINT_VALUES',
    'DEFENSIVE_MINT_VALUES',
    'MINT_PRESETS',
    'get_mint_value',
    'calculate_mint',
    'create_mint_values',
    'get_preset',
]
