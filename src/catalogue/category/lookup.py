"""Category reads for the storefront navigation."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.category.category import Category


def list_categories() -> list[Category]:
    return current_domain.repository_for(Category)._dao.query.order_by("name").all().items


def get_category_by_slug(slug: str) -> Category:
    """Raises ``ObjectNotFoundError`` when no category has ``slug``."""
    category = current_domain.repository_for(Category).find_by_slug(slug)
    if category is None:
        raise ObjectNotFoundError({"_entity": f"Category with slug `{slug}` does not exist"})
    return category
