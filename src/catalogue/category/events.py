"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Category")
class CategoryCreated:
    """A new product category was added to the catalogue."""

    __version__ = "v1"

    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
