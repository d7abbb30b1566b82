"""Product aggregate root — an item for sale in the storefront."""

import json
from decimal import Decimal

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Integer, String, Text

from catalogue.domain import catalogue
from catalogue.shared.money import check_price, to_price

# Attributes a product update may change
EDITABLE_FIELDS = (
    "name",
    "description",
    "price",
    "sale_price",
    "category",
    "image",
    "images",
    "stock",
    "featured",
)


@catalogue.aggregate
class Product:
    """Product aggregate root.

    ``price`` and ``sale_price`` are decimal strings. When a sale price is set
    it is what the storefront charges. ``images`` holds a JSON list of image
    references; ``image`` is the primary one shown on cards.
    """

    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    sale_price: String(max_length=20)
    category: String(required=True, max_length=100)  # category slug
    image: String(required=True, max_length=500)
    images: Text()
    stock: Integer(default=100, min_value=0)
    featured: Boolean(default=False)

    @invariant.post
    def prices_must_be_valid(self):
        check_price("price", self.price)
        check_price("sale_price", self.sale_price, required=False)

        if self.sale_price and Decimal(self.sale_price) >= Decimal(self.price):
            raise ValidationError({"sale_price": [f"Sale price {self.sale_price} must be less than price {self.price}"]})

    @property
    def effective_price(self) -> Decimal:
        """What a customer pays per unit: the sale price if any, else the list price."""
        return Decimal(self.sale_price or self.price)

    @property
    def on_sale(self) -> bool:
        return bool(self.sale_price)

    @property
    def image_list(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category,
        image,
        sale_price=None,
        images=None,
        stock=None,
        featured=False,
    ):
        from catalogue.product.events import ProductAdded

        product = cls(
            name=name,
            description=description,
            price=_price_or_raw(price),
            sale_price=_price_or_raw(sale_price) if sale_price not in (None, "") else None,
            category=category,
            image=image,
            images=json.dumps(list(images) if images else [image]),
            stock=100 if stock is None else stock,
            featured=bool(featured),
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category=category,
                price=product.price,
                sale_price=product.sale_price,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial update. Only the keys present in ``changes`` change."""
        from catalogue.product.events import ProductDetailsUpdated

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["is not an editable product field"] for field in sorted(unknown)})

        with atomic_change(self):
            for field, value in changes.items():
                if field in ("price", "sale_price") and value not in (None, ""):
                    value = _price_or_raw(value)
                elif field == "sale_price":
                    value = None
                elif field == "images":
                    value = json.dumps(list(value or []))
                elif field == "featured":
                    value = bool(value)
                setattr(self, field, value)

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                category=self.category,
                price=self.price,
                sale_price=self.sale_price,
                changed_fields=json.dumps(sorted(changes)),
            )
        )


def _price_or_raw(value):
    """Normalize well-formed prices, leave anything else for the invariant to reject."""
    if value is None:
        return None
    try:
        check_price("price", value)
    except ValidationError:
        return str(value)
    return to_price(value)
