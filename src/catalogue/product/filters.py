"""Product listing filters — search, category, price range and featured.

All filters combine with AND. Price bounds apply to the price a customer
pays (the sale price when the product is on sale) and are inclusive.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from protean.utils.globals import current_domain

from catalogue.product.product import Product


@dataclass(frozen=True)
class ProductFilter:
    search: str | None = None
    categories: tuple[str, ...] = field(default_factory=tuple)
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    featured: bool | None = None

    def matches(self, product: Product) -> bool:
        if self.search:
            needle = self.search.lower()
            if needle not in product.name.lower() and needle not in product.description.lower():
                return False

        if self.categories and product.category not in self.categories:
            return False

        price = product.effective_price
        if self.min_price is not None and price < self.min_price:
            return False
        if self.max_price is not None and price > self.max_price:
            return False

        if self.featured is not None and bool(product.featured) != self.featured:
            return False

        return True

    @property
    def is_empty(self) -> bool:
        return self == ProductFilter()


def filter_products(products, product_filter: ProductFilter) -> list[Product]:
    """Products from ``products`` that satisfy ``product_filter``, order kept."""
    return [product for product in products if product_filter.matches(product)]


def list_products(product_filter: ProductFilter | None = None) -> list[Product]:
    """All catalogue products, optionally narrowed by ``product_filter``."""
    products = current_domain.repository_for(Product)._dao.query.order_by("name").all().items
    if product_filter is None or product_filter.is_empty:
        return list(products)
    return filter_products(products, product_filter)
