"""Category aggregate root for grouping products on the storefront."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String, Text

from catalogue.domain import catalogue

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


@catalogue.aggregate
class Category:
    """A named product grouping, addressed on the storefront by its slug.

    Both ``name`` and ``slug`` are unique across the catalogue. Products
    refer to their category by slug.
    """

    name: String(required=True, max_length=100, unique=True)
    slug: String(required=True, max_length=100, unique=True)
    image: String(required=True, max_length=500)
    description: Text()

    @invariant.post
    def slug_must_be_url_safe(self):
        slug = self.slug
        if not slug:
            return

        if not SLUG_PATTERN.match(slug):
            raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

        if slug.startswith("-") or slug.endswith("-"):
            raise ValidationError({"slug": ["Slug must not start or end with a hyphen"]})

        if "--" in slug:
            raise ValidationError({"slug": ["Slug must not contain consecutive hyphens"]})

    @classmethod
    def create(cls, name, image, slug=None, description=None):
        from catalogue.category.events import CategoryCreated

        category = cls(
            name=name,
            slug=slug or slugify(name or ""),
            image=image,
            description=description,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                slug=category.slug,
            )
        )
        return category
