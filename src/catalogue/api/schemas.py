"""Pydantic response schemas for the Catalogue API.

These are external contracts (anti-corruption layer) — separate from
internal Protean aggregates. Field names go out in camelCase.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProductResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    price: str
    sale_price: str | None = None
    category: str
    image: str
    images: list[str]
    stock: int
    featured: bool

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            sale_price=product.sale_price,
            category=product.category,
            image=product.image,
            images=product.image_list,
            stock=product.stock,
            featured=bool(product.featured),
        )


class CategoryResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    slug: str
    image: str
    description: str | None = None

    @classmethod
    def from_category(cls, category) -> "CategoryResponse":
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug,
            image=category.image,
            description=category.description,
        )
