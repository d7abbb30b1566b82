"""Product details update and removal — commands and handler."""

import json

from protean import handle
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class UpdateProductDetails:
    """Partial update: fields left as None are not touched.

    An empty ``sale_price`` clears the sale.
    """

    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: String(max_length=20)
    sale_price: String(max_length=20)
    category: String(max_length=100)
    image: String(max_length=500)
    images: Text()  # JSON list of image references
    stock: Integer(min_value=0)
    featured: Boolean()


@catalogue.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@catalogue.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProductDetails)
    def update_product_details(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {
            field: getattr(command, field)
            for field in ("name", "description", "price", "sale_price", "category", "image", "stock", "featured")
            if getattr(command, field) is not None
        }
        if command.images is not None:
            changes["images"] = json.loads(command.images)

        product.update_details(**changes)
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product_removed", product_id=str(command.product_id))
