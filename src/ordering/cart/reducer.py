"""Shopping cart reducer — a pure ``(Cart, Command) -> Cart`` function.

The cart is a tuple of ``CartLine`` values, at most one per product. Every
mutation is expressed as a command value (``AddItem``, ``RemoveItem``,
``SetQuantity``, ``ClearCart``) and applied by ``reduce``, which never
mutates its input. ``CartStore`` persists the results; this module knows
nothing about storage.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from functools import reduce as _fold

Cart = tuple  # tuple[CartLine, ...]

EMPTY_CART: Cart = ()


@dataclass(frozen=True)
class CartLine:
    """One product's presence in the cart.

    ``quantity`` is always at least 1; a change that would take it to zero or
    below removes the line instead.

    ``product_name``, ``product_image`` and ``price`` are snapshots taken when
    the product was first added; they are never refreshed from the catalogue.
    """

    product_id: str
    product_name: str
    product_image: str
    price: Decimal
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AddItem:
    product_id: str
    product_name: str
    product_image: str
    price: Decimal
    quantity: int | None = None

    @classmethod
    def from_product(cls, product, quantity=None):
        """Build an add candidate from a catalogue product.

        Uses the sale price when the product has one, the list price otherwise.
        """
        price = product.sale_price or product.price
        return cls(
            product_id=str(product.id),
            product_name=product.name,
            product_image=product.image,
            price=Decimal(str(price)),
            quantity=quantity,
        )


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class SetQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


Command = AddItem | RemoveItem | SetQuantity | ClearCart


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------
def _add(cart: Cart, command: AddItem) -> Cart:
    increment = 1 if command.quantity is None else int(command.quantity)
    existing = find_line(cart, command.product_id)
    if existing is not None:
        # Merge quantity only; the existing display snapshot wins
        return _set_quantity(cart, SetQuantity(command.product_id, existing.quantity + increment))

    if increment < 1:
        return cart

    line = CartLine(
        product_id=command.product_id,
        product_name=command.product_name,
        product_image=command.product_image,
        price=Decimal(str(command.price)),
        quantity=increment,
    )
    return (*cart, line)


def _remove(cart: Cart, product_id: str) -> Cart:
    return tuple(line for line in cart if line.product_id != product_id)


def _set_quantity(cart: Cart, command: SetQuantity) -> Cart:
    if command.quantity <= 0:
        return _remove(cart, command.product_id)

    return tuple(
        replace(line, quantity=command.quantity) if line.product_id == command.product_id else line for line in cart
    )


def reduce(cart: Cart, command: Command) -> Cart:
    """Apply ``command`` to ``cart`` and return the resulting cart."""
    if isinstance(command, AddItem):
        return _add(cart, command)
    if isinstance(command, RemoveItem):
        return _remove(cart, command.product_id)
    if isinstance(command, SetQuantity):
        return _set_quantity(cart, command)
    if isinstance(command, ClearCart):
        return EMPTY_CART
    raise TypeError(f"Unknown cart command: {command!r}")


def replay(commands, cart: Cart = EMPTY_CART) -> Cart:
    """Fold a sequence of commands over ``cart`` (empty by default)."""
    return _fold(reduce, commands, cart)


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------
def cart_total(cart: Cart) -> Decimal:
    """Sum of price x quantity over all lines; zero for an empty cart."""
    return sum((line.line_total for line in cart), Decimal("0"))


def cart_count(cart: Cart) -> int:
    """Number of units in the cart (not the number of distinct lines)."""
    return sum(line.quantity for line in cart)


def find_line(cart: Cart, product_id: str) -> CartLine | None:
    return next((line for line in cart if line.product_id == product_id), None)
