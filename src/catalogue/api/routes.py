"""FastAPI endpoints for the Catalogue domain."""

import json
from decimal import Decimal

from fastapi import APIRouter, Query, Request, Response
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from catalogue.api.schemas import CategoryResponse, ProductResponse
from catalogue.category.category import Category
from catalogue.category.lookup import get_category_by_slug, list_categories
from catalogue.category.management import CreateCategory
from catalogue.product.creation import CreateProduct
from catalogue.product.details import RemoveProduct, UpdateProductDetails
from catalogue.product.filters import ProductFilter, list_products
from catalogue.product.product import Product

product_router = APIRouter(prefix="/api/products", tags=["products"])
category_router = APIRouter(prefix="/api/categories", tags=["categories"])

# Wire name -> command field for product payloads
_PRODUCT_FIELDS = {
    "name": "name",
    "description": "description",
    "price": "price",
    "salePrice": "sale_price",
    "category": "category",
    "image": "image",
    "images": "images",
    "stock": "stock",
    "featured": "featured",
}


async def _json_object(request: Request) -> dict:
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        raise ValidationError({"payload": ["Request body must be a JSON object"]})
    return payload


def _product_kwargs(payload: dict) -> dict:
    """Translate the camelCase wire payload into command keyword arguments."""
    kwargs = {}
    for wire_name, field in _PRODUCT_FIELDS.items():
        if wire_name not in payload and field not in payload:
            continue
        value = payload.get(wire_name, payload.get(field))
        if field in ("price", "sale_price"):
            value = "" if value is None and field == "sale_price" else value
            value = str(value) if value is not None else None
        elif field == "images":
            value = json.dumps(value) if value is not None else None
        elif field == "featured":
            value = bool(value)
        kwargs[field] = value
    return kwargs


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def get_products(
    category: list[str] | None = Query(default=None),
    search: str | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
    featured: bool | None = None,
) -> list[ProductResponse]:
    product_filter = ProductFilter(
        search=search or None,
        categories=tuple(category or ()),
        min_price=min_price,
        max_price=max_price,
        featured=featured,
    )
    return [ProductResponse.from_product(product) for product in list_products(product_filter)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse.from_product(current_domain.repository_for(Product).get(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(request: Request) -> ProductResponse:
    payload = await _json_object(request)
    kwargs = _product_kwargs(payload)
    if kwargs.get("sale_price") == "":
        kwargs["sale_price"] = None
    result = current_domain.process(CreateProduct(**kwargs), asynchronous=False)
    return ProductResponse.from_product(current_domain.repository_for(Product).get(result))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, request: Request) -> ProductResponse:
    repo = current_domain.repository_for(Product)
    repo.get(product_id)  # 404 before validating the body

    payload = await _json_object(request)
    command = UpdateProductDetails(product_id=product_id, **_product_kwargs(payload))
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(repo.get(product_id))


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str) -> Response:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def get_categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_category(category) for category in list_categories()]


@category_router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str) -> CategoryResponse:
    return CategoryResponse.from_category(get_category_by_slug(slug))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(request: Request) -> CategoryResponse:
    payload = await _json_object(request)
    command = CreateCategory(
        name=payload.get("name"),
        slug=payload.get("slug"),
        image=payload.get("image"),
        description=payload.get("description"),
    )
    result = current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(current_domain.repository_for(Category).get(result))
