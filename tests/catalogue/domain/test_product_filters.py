"""Tests for product listing filters."""

from decimal import Decimal

import pytest
from catalogue.product.filters import ProductFilter, filter_products
from catalogue.product.product import Product


def _product(name, category, price, sale_price=None, featured=False, description="A thing"):
    return Product.create(
        name=name,
        description=description,
        price=price,
        sale_price=sale_price,
        category=category,
        image=f"/img/{name}.png",
        featured=featured,
    )


@pytest.fixture()
def catalogue_items():
    return {
        "mug": _product("Ceramic Coffee Mug", "kitchen", "24.00", sale_price="19.00", featured=True),
        "board": _product("Oak Cutting Board", "kitchen", "65.00", description="Solid oak for serving"),
        "lamp": _product("Brass Desk Lamp", "lighting", "129.00", featured=True),
    }


def _names(products):
    return [product.name for product in products]


class TestProductFilter:
    def test_empty_filter_keeps_everything(self, catalogue_items):
        products = list(catalogue_items.values())
        assert ProductFilter().is_empty
        assert filter_products(products, ProductFilter()) == products

    def test_search_matches_name_case_insensitively(self, catalogue_items):
        result = filter_products(catalogue_items.values(), ProductFilter(search="MUG"))
        assert _names(result) == ["Ceramic Coffee Mug"]

    def test_search_matches_description(self, catalogue_items):
        result = filter_products(catalogue_items.values(), ProductFilter(search="serving"))
        assert _names(result) == ["Oak Cutting Board"]

    def test_category(self, catalogue_items):
        result = filter_products(catalogue_items.values(), ProductFilter(categories=("lighting",)))
        assert _names(result) == ["Brass Desk Lamp"]

    def test_several_categories(self, catalogue_items):
        result = filter_products(catalogue_items.values(), ProductFilter(categories=("kitchen", "lighting")))
        assert len(result) == 3

    def test_price_range_uses_sale_price(self, catalogue_items):
        product_filter = ProductFilter(min_price=Decimal("0"), max_price=Decimal("20"))
        assert _names(filter_products(catalogue_items.values(), product_filter)) == ["Ceramic Coffee Mug"]

    def test_price_bounds_are_inclusive(self, catalogue_items):
        product_filter = ProductFilter(min_price=Decimal("65"), max_price=Decimal("129"))
        assert _names(filter_products(catalogue_items.values(), product_filter)) == [
            "Oak Cutting Board",
            "Brass Desk Lamp",
        ]

    def test_featured(self, catalogue_items):
        featured = filter_products(catalogue_items.values(), ProductFilter(featured=True))
        assert _names(featured) == ["Ceramic Coffee Mug", "Brass Desk Lamp"]
        assert _names(filter_products(catalogue_items.values(), ProductFilter(featured=False))) == ["Oak Cutting Board"]

    def test_filters_combine(self, catalogue_items):
        product_filter = ProductFilter(categories=("kitchen",), featured=True, max_price=Decimal("50"))
        assert _names(filter_products(catalogue_items.values(), product_filter)) == ["Ceramic Coffee Mug"]
