"""Order-creation request contract.

The wire payload uses camelCase names (``customerName``, ``items[].productId``);
snake_case names are accepted too. Validation reports every violated field in
one Protean ``ValidationError`` keyed by the snake_case field name, with
nested item fields as ``items.<index>.<field>``.

Text fields are stored exactly as sent. Blank values are rejected but
surrounding whitespace is not trimmed.
"""

import re
from decimal import Decimal
from typing import Annotated

from protean.exceptions import ValidationError
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel, to_snake

from ordering.order.order import OrderStatus, PaymentMethod

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("Value must not be blank")
    return value


Money = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
NonEmpty = Annotated[str, Field(min_length=1), AfterValidator(_not_blank)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class OrderItemRequest(_WireModel):
    product_id: NonEmpty
    product_name: NonEmpty
    product_image: NonEmpty
    price: Money
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class OrderRequest(_WireModel):
    order_number: NonEmpty | None = None
    customer_name: NonEmpty
    customer_email: NonEmpty
    customer_address: NonEmpty
    customer_city: NonEmpty
    customer_zip: NonEmpty
    customer_country: NonEmpty
    payment_method: PaymentMethod
    subtotal: Money
    shipping: Money
    total: Money
    status: OrderStatus | None = None
    items: list[OrderItemRequest] = Field(min_length=1)

    @field_validator("customer_email")
    @classmethod
    def email_must_look_like_an_address(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email address")
        return value


# Partial views used to check the amounts even when other fields are invalid
class _Amounts(_WireModel):
    subtotal: Money
    shipping: Money
    total: Money


class _LineAmount(_WireModel):
    price: Money
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class _LineAmounts(_WireModel):
    items: list[_LineAmount] = Field(min_length=1)


def _field_name(loc) -> str:
    if not loc:
        return "payload"
    return ".".join(to_snake(part) if isinstance(part, str) else str(part) for part in loc)


def _message(error) -> str:
    message = error["msg"]
    return message.removeprefix("Value error, ")


def _field_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        messages.setdefault(_field_name(error["loc"]), []).append(_message(error))
    return messages


def _amount_errors(payload) -> dict[str, list[str]]:
    """Consistency errors between the items, subtotal, shipping and total.

    Checks run only on the amounts that parsed; unparseable ones are already
    reported as field errors.
    """
    try:
        amounts = _Amounts.model_validate(payload)
    except PydanticValidationError:
        return {}

    errors: dict[str, list[str]] = {}
    try:
        lines = _LineAmounts.model_validate(payload).items
    except PydanticValidationError:
        lines = None

    if lines is not None:
        items_subtotal = sum((line.line_total for line in lines), Decimal("0"))
        if amounts.subtotal != items_subtotal:
            errors["subtotal"] = [f"Subtotal {amounts.subtotal} does not match the items total {items_subtotal}"]
    if amounts.total != amounts.subtotal + amounts.shipping:
        errors["total"] = [f"Total {amounts.total} must equal subtotal + shipping"]
    return errors


def validate_order_request(payload) -> OrderRequest:
    """Validate an order-creation payload or raise ``ValidationError``.

    Beyond per-field rules, the amounts must agree: ``subtotal`` is the sum
    of the item lines and ``total`` is ``subtotal + shipping``. Field errors
    and amount errors are reported together.
    """
    request = None
    try:
        request = OrderRequest.model_validate(payload)
    except PydanticValidationError as exc:
        errors = _field_errors(exc)
    else:
        errors = {}

    for field_name, messages in _amount_errors(payload).items():
        errors.setdefault(field_name, []).extend(messages)
    if errors:
        raise ValidationError(errors)

    return request
