"""CartStore — the session's shopping cart with durable snapshots.

Wraps the pure reducer with persistence: every mutating operation reduces
the current cart and writes the whole snapshot to a ``CartStorage`` under a
fixed key. A new store bootstraps from that key, so the cart survives
reloads.

Storage failures never reach the caller of a mutation. They are logged and
reflected in ``degraded`` until the next successful write.
"""

import json
from decimal import Decimal, InvalidOperation

import structlog

from ordering.cart.reducer import (
    EMPTY_CART,
    AddItem,
    Cart,
    ClearCart,
    RemoveItem,
    SetQuantity,
    cart_count,
    cart_total,
    reduce,
    replay,
)
from ordering.cart.storage import CartStorage, StorageError, get_storage

logger = structlog.get_logger(__name__)

CART_STORAGE_KEY = "shopping-cart"


def encode_cart(cart: Cart) -> str:
    """Serialize a cart to its JSON snapshot. Prices are decimal strings."""
    return json.dumps(
        [
            {
                "productId": line.product_id,
                "productName": line.product_name,
                "productImage": line.product_image,
                "price": str(line.price),
                "quantity": line.quantity,
            }
            for line in cart
        ]
    )


def decode_cart(snapshot: str) -> Cart:
    """Parse a JSON snapshot back into a cart.

    Entries are replayed as adds, so a hand-edited snapshot still yields one
    line per product: duplicates merge and non-positive quantities drop out.
    """
    return replay(
        AddItem(
            product_id=str(entry["productId"]),
            product_name=entry["productName"],
            product_image=entry["productImage"],
            price=Decimal(str(entry["price"])),
            quantity=int(entry["quantity"]),
        )
        for entry in json.loads(snapshot)
    )


class CartStore:
    """Authoritative in-session list of cart lines."""

    def __init__(self, storage: CartStorage | None = None, key: str = CART_STORAGE_KEY) -> None:
        self.storage = storage if storage is not None else get_storage()
        self.key = key
        self.degraded = False
        self._cart: Cart = self._load()

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    def _load(self) -> Cart:
        try:
            snapshot = self.storage.get(self.key)
        except StorageError as exc:
            self.degraded = True
            logger.warning("cart_load_failed", key=self.key, error=str(exc))
            return EMPTY_CART

        if not snapshot:
            return EMPTY_CART

        try:
            return decode_cart(snapshot)
        except (ValueError, KeyError, TypeError, InvalidOperation) as exc:
            logger.warning("cart_snapshot_unreadable", key=self.key, error=str(exc))
            return EMPTY_CART

    def _persist(self) -> None:
        try:
            self.storage.set(self.key, encode_cart(self._cart))
        except StorageError as exc:
            self.degraded = True
            logger.warning("cart_persist_failed", key=self.key, error=str(exc))
        else:
            self.degraded = False

    def dispatch(self, command) -> Cart:
        """Reduce ``command`` into the cart, persist the result and return it."""
        self._cart = reduce(self._cart, command)
        self._persist()
        return self._cart

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, product_id, product_name, product_image, price, quantity=None) -> Cart:
        """Add a product, or increase the quantity of its existing line."""
        return self.dispatch(
            AddItem(
                product_id=product_id,
                product_name=product_name,
                product_image=product_image,
                price=price,
                quantity=quantity,
            )
        )

    def remove_item(self, product_id) -> Cart:
        return self.dispatch(RemoveItem(product_id=product_id))

    def set_quantity(self, product_id, quantity) -> Cart:
        """Replace a line's quantity; zero or less removes the line."""
        return self.dispatch(SetQuantity(product_id=product_id, quantity=quantity))

    def clear(self) -> Cart:
        return self.dispatch(ClearCart())

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def lines(self) -> Cart:
        return self._cart

    def is_empty(self) -> bool:
        return not self._cart

    def total(self) -> Decimal:
        return cart_total(self._cart)

    def count(self) -> int:
        return cart_count(self._cart)
