"""Money helpers — amounts are Decimals, quantized to cents, never floats."""

from decimal import Decimal

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    """Quantize a number or decimal string to two decimal places."""
    return Decimal(str(value)).quantize(CENTS)


def format_money(value) -> str:
    """Render an amount as the decimal string used on the wire and in storage."""
    return str(to_money(value))
