"""Currency display helpers"""


def format_cost(amount: int, symbol: str = "€") -> str:
    """Format a whole-unit amount with thousands separators, e.g. 36900 -> '€36,900'"""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,}"
