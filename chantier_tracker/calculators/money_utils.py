"""Currency rounding and formatting helpers.

Amounts are carried unrounded everywhere in the engine and only rounded
here, at presentation time.
"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
DEFAULT_CURRENCY_SYMBOL = "€"


def quantize_money(amount: Decimal) -> Decimal:
    """Round an amount to cents using ROUND_HALF_UP.

    Example:
        >>> quantize_money(Decimal("12.345"))
        Decimal('12.35')
    """
    rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    # Avoid displaying "-0.00" for tiny negative remainders
    if rounded.is_zero():
        return abs(rounded)
    return rounded


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two decimals and no symbol.

    Example:
        >>> format_amount(Decimal("170"))
        '170.00'
    """
    return f"{quantize_money(amount):.2f}"


def format_currency(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount with two decimals and a currency symbol prefix.

    Example:
        >>> format_currency(Decimal("115"))
        '€115.00'
        >>> format_currency(Decimal("3.5"), symbol="$")
        '$3.50'
    """
    return f"{symbol}{format_amount(amount)}"


def format_percentage(value: Decimal) -> str:
    """Format a margin percentage as "N%" without trailing zeros.

    Example:
        >>> format_percentage(Decimal("15"))
        '15%'
        >>> format_percentage(Decimal("12.50"))
        '12.5%'
        >>> format_percentage(Decimal("100"))
        '100%'
    """
    if value.is_zero():
        return "0%"
    return f"{value.normalize():f}%"
