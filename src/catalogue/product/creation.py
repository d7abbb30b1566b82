"""Product creation — command and handler."""

import json

from protean import handle
from protean.fields import Boolean, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    sale_price: String(max_length=20)
    category: String(required=True, max_length=100)
    image: String(required=True, max_length=500)
    images: Text()  # JSON list of image references
    stock: Integer(min_value=0)
    featured: Boolean(default=False)


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            sale_price=command.sale_price,
            category=command.category,
            image=command.image,
            images=json.loads(command.images) if command.images else None,
            stock=command.stock,
            featured=command.featured,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_added", product_id=str(product.id), category=product.category)
        return str(product.id)
