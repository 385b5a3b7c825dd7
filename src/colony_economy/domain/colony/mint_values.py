"""
Mint values - credits created per unit of each colony achievement.

This is the colony's primary economic policy lever:
- Higher values encourage more of that activity
- Lower values discourage it relative to alternatives
- Zero disables that income source entirely
"""
from dataclasses import asdict, dataclass, fields, replace
from typing import Dict, Mapping, Optional

from ..shared.exceptions import UnknownMintPresetError


@dataclass(frozen=True)
class MintValues:
    """Per-unit credit value of each achievement type"""
    rcl_upgrade: float = 1000        # Controller upgrade point below max level
    gcl_upgrade: float = 300         # Controller upgrade point at max level
    remote_source_tap: float = 500
    room_claim: float = 5000
    container_built: float = 100
    extension_built: float = 200
    road_built: float = 10
    storage_built: float = 1000
    enemy_killed: float = 200
    tower_built: float = 500
    link_built: float = 300

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_MINT_VALUES = MintValues()

# Encourages remote mining and claiming
EXPANSION_MINT_VALUES = replace(
    DEFAULT_MINT_VALUES,
    remote_source_tap=1000,
    room_claim=10000,
    container_built=200
)

# Encourages military activity
DEFENSIVE_MINT_VALUES = replace(
    DEFAULT_MINT_VALUES,
    enemy_killed=500,
    tower_built=1000
)

MINT_PRESETS: Dict[str, MintValues] = {
    'default': DEFAULT_MINT_VALUES,
    'expansion': EXPANSION_MINT_VALUES,
    'defensive': DEFENSIVE_MINT_VALUES,
}

_ACHIEVEMENTS = frozenset(f.name for f in fields(MintValues))


def get_mint_value(values: MintValues, achievement: str) -> float:
    """Value of one unit of an achievement; 0 for unknown achievement names"""
    if achievement not in _ACHIEVEMENTS:
        return 0
    return getattr(values, achievement)


def calculate_mint(values: MintValues, achievement: str, quantity: float = 1) -> float:
    return get_mint_value(values, achievement) * quantity


def create_mint_values(
    overrides: Mapping[str, float],
    base: Optional[MintValues] = None
) -> MintValues:
    """
    Base table (defaults unless given) with partial overrides applied.

    Raises:
        ValueError: If an override names an unknown achievement
    """
    unknown = set(overrides) - _ACHIEVEMENTS
    if unknown:
        raise ValueError(f"Unknown mint achievements: {', '.join(sorted(unknown))}")
    return replace(base or DEFAULT_MINT_VALUES, **overrides)


def get_preset(name: str) -> MintValues:
    """
    Look up a named preset (default, expansion, defensive).

    Raises:
        UnknownMintPresetError: If no preset has that name
    """
    try:
        return MINT_PRESETS[name.lower()]
    except KeyError:
        raise UnknownMintPresetError(
            f"Unknown mint preset '{name}'. Available: {', '.join(sorted(MINT_PRESETS))}"
        ) from None
