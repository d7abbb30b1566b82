"""Application tests for category commands and lookups."""

import pytest
from catalogue.category.category import Category
from catalogue.category.lookup import get_category_by_slug, list_categories
from catalogue.category.management import CreateCategory
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _create_category(**overrides):
    defaults = {
        "name": "Lighting",
        "slug": "lighting",
        "image": "/img/lighting.png",
        "description": "Contemporary lamps and lighting fixtures",
    }
    defaults.update(overrides)
    return current_domain.process(CreateCategory(**defaults), asynchronous=False)


class TestCreateCategory:
    def test_persists_category(self):
        category_id = _create_category()
        category = current_domain.repository_for(Category).get(category_id)
        assert category.slug == "lighting"

    def test_duplicate_slug_is_rejected(self):
        _create_category()
        with pytest.raises(ValidationError) as exc:
            _create_category(name="Lamps")
        assert "slug" in exc.value.messages

    def test_duplicate_name_is_rejected(self):
        _create_category()
        with pytest.raises(ValidationError) as exc:
            _create_category(slug="lights")
        assert "name" in exc.value.messages


class TestCategoryLookups:
    def test_get_by_slug(self):
        _create_category()
        assert get_category_by_slug("lighting").name == "Lighting"

    def test_unknown_slug(self):
        with pytest.raises(ObjectNotFoundError):
            get_category_by_slug("nope")

    def test_list_sorted_by_name(self):
        _create_category()
        _create_category(name="Decor", slug="decor", image="/img/decor.png")
        assert [c.slug for c in list_categories()] == ["decor", "lighting"]
