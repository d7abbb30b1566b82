"""Category management — commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.domain import catalogue, logger


@catalogue.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(max_length=100)
    image: String(required=True, max_length=500)
    description: Text()


@catalogue.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        category = Category.create(
            name=command.name,
            slug=command.slug,
            image=command.image,
            description=command.description,
        )

        errors = {}
        if repo.find_by_slug(category.slug) is not None:
            errors["slug"] = [f"Category slug '{category.slug}' is already in use"]
        if repo.find_by_name(category.name) is not None:
            errors["name"] = [f"Category '{category.name}' already exists"]
        if errors:
            raise ValidationError(errors)

        repo.add(category)
        logger.info("category_created", category_id=str(category.id), slug=category.slug)
        return str(category.id)
