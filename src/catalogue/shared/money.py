"""Catalogue prices — decimal strings with at most two decimal places."""

import re
from decimal import Decimal

from protean.exceptions import ValidationError

PRICE_PATTERN = re.compile(r"^\d{1,8}(\.\d{1,2})?$")
CENTS = Decimal("0.01")


def to_price(value) -> str:
    """Normalize a number or numeric string to ``"24.00"`` form."""
    return str(Decimal(str(value)).quantize(CENTS))


def check_price(field: str, value, required: bool = True) -> None:
    """Raise ``ValidationError`` on ``field`` unless ``value`` is a valid price."""
    if value is None or value == "":
        if required:
            raise ValidationError({field: ["is required"]})
        return
    if not PRICE_PATTERN.match(str(value)):
        raise ValidationError({field: [f"'{value}' is not a valid price"]})
