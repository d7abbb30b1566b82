"""Domain events for the Product aggregate."""

from protean.fields import Identifier, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = "v1"

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: String(required=True)
    sale_price: String()


@catalogue.event(part_of="Product")
class ProductDetailsUpdated:
    """One or more product attributes were changed."""

    __version__ = "v1"

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: String(required=True)
    sale_price: String()
    changed_fields: Text()  # JSON list of field names

