"""Repository for the Category aggregate."""

from catalogue.category.category import Category
from catalogue.domain import catalogue


@catalogue.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug: str) -> Category | None:
        results = self._dao.query.filter(slug=slug).all().items
        return results[0] if results else None

    def find_by_name(self, name: str) -> Category | None:
        results = self._dao.query.filter(name=name).all().items
        return results[0] if results else None
