"""
Cost-plus pricing rules.

Every corp prices its output as input cost times (1 + margin). Margins
shrink as a corp accumulates wealth, so rich corps undercut poor ones.
"""

BASE_MARGIN = 0.1
MAX_WEALTH_DISCOUNT = 0.05
WEALTH_THRESHOLD = 10000


def calculate_margin(
    balance: float,
    base_margin: float = BASE_MARGIN,
    max_discount: float = MAX_WEALTH_DISCOUNT,
    threshold: float = WEALTH_THRESHOLD
) -> float:
    """
    Margin for a corp holding the given balance.

    - balance 0: base_margin (10%)
    - balance >= threshold: base_margin - max_discount (5%)
    """
    wealth_ratio = min(balance / threshold, 1)
    return base_margin - wealth_ratio * max_discount


def calculate_price(input_cost: float, margin: float) -> float:
    """Cost-plus output price; nothing in means nothing to mark up"""
    if input_cost <= 0:
        return 0
    return input_cost * (1 + margin)


def calculate_roi(revenue: float, cost: float) -> float:
    if cost == 0:
        return 0
    return (revenue - cost) / cost
