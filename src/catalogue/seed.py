"""Starter catalogue loaded when the storefront boots.

Seeding is skipped when the catalogue already has products, so calling
``seed_catalogue`` twice is harmless.
"""

import json

from protean.utils.globals import current_domain

from catalogue.category.management import CreateCategory
from catalogue.domain import logger
from catalogue.product.creation import CreateProduct
from catalogue.product.product import Product

_IMAGES = "/assets/generated_images"

SEED_CATEGORIES = [
    {
        "name": "Furniture",
        "slug": "furniture",
        "image": f"{_IMAGES}/Furniture_category_8b84f9ed.png",
        "description": "Modern and minimalist furniture pieces for every room",
    },
    {
        "name": "Kitchen",
        "slug": "kitchen",
        "image": f"{_IMAGES}/Kitchen_category_e892f3ee.png",
        "description": "Essential kitchenware and dining accessories",
    },
    {
        "name": "Lighting",
        "slug": "lighting",
        "image": f"{_IMAGES}/Lighting_category_26ea200c.png",
        "description": "Contemporary lamps and lighting fixtures",
    },
    {
        "name": "Decor",
        "slug": "decor",
        "image": f"{_IMAGES}/Decor_category_8c95bbae.png",
        "description": "Stylish home decor and decorative objects",
    },
    {
        "name": "Textiles",
        "slug": "textiles",
        "image": f"{_IMAGES}/Textiles_category_6144795d.png",
        "description": "Quality linens, blankets, and soft furnishings",
    },
    {
        "name": "Accessories",
        "slug": "accessories",
        "image": f"{_IMAGES}/Accessories_category_47bf6b42.png",
        "description": "Everyday essentials and organizational tools",
    },
]

SEED_PRODUCTS = [
    {
        "name": "Modern Lounge Chair",
        "description": (
            "Elegant Scandinavian-inspired armchair with soft gray upholstery. Perfect for reading nooks "
            "and living spaces. Features solid wood legs and premium fabric."
        ),
        "price": "599.00",
        "sale_price": None,
        "category": "furniture",
        "image": f"{_IMAGES}/Modern_gray_armchair_245a9895.png",
        "stock": 15,
        "featured": True,
    },
    {
        "name": "Ceramic Coffee Mug",
        "description": (
            "Handcrafted porcelain mug with smooth finish. Ideal for your morning coffee or tea. "
            "Dishwasher and microwave safe."
        ),
        "price": "24.00",
        "sale_price": "19.00",
        "category": "kitchen",
        "image": f"{_IMAGES}/White_ceramic_mug_ac1fd6a5.png",
        "stock": 50,
        "featured": True,
    },
    {
        "name": "Brass Desk Lamp",
        "description": (
            "Contemporary table lamp with brass finish and adjustable arm. Provides warm ambient lighting "
            "for your workspace or bedside table."
        ),
        "price": "129.00",
        "sale_price": None,
        "category": "lighting",
        "image": f"{_IMAGES}/Brass_table_lamp_9fbef4c3.png",
        "stock": 20,
        "featured": True,
    },
    {
        "name": "Oak Cutting Board",
        "description": (
            "Premium solid oak cutting board with natural grain. Perfect for food preparation and serving. "
            "Treated with food-safe mineral oil."
        ),
        "price": "65.00",
        "sale_price": None,
        "category": "kitchen",
        "image": f"{_IMAGES}/Oak_cutting_board_01457441.png",
        "stock": 30,
        "featured": True,
    },
    {
        "name": "Minimalist Wall Clock",
        "description": (
            "Clean, modern design clock with black metal frame. Silent sweep movement ensures no ticking "
            "noise. Battery operated."
        ),
        "price": "89.00",
        "sale_price": None,
        "category": "decor",
        "image": f"{_IMAGES}/Black_wall_clock_abf66e47.png",
        "stock": 25,
        "featured": False,
    },
    {
        "name": "Linen Throw Blanket",
        "description": (
            "Luxurious natural linen blanket in warm beige. Perfect for layering on beds or sofas. "
            "Machine washable and breathable."
        ),
        "price": "110.00",
        "sale_price": "95.00",
        "category": "textiles",
        "image": f"{_IMAGES}/Beige_linen_blanket_3615f3a8.png",
        "stock": 40,
        "featured": False,
    },
    {
        "name": "Ceramic Vase",
        "description": (
            "Sleek cylindrical vase in matte gray finish. Ideal for fresh or dried flowers. Handmade "
            "ceramic with contemporary aesthetic."
        ),
        "price": "48.00",
        "sale_price": None,
        "category": "decor",
        "image": f"{_IMAGES}/Gray_ceramic_vase_88bc30b1.png",
        "stock": 35,
        "featured": False,
    },
    {
        "name": "Leather Bifold Wallet",
        "description": (
            "Classic slim wallet crafted from premium full-grain leather. Features multiple card slots "
            "and bill compartment. Ages beautifully."
        ),
        "price": "78.00",
        "sale_price": None,
        "category": "accessories",
        "image": f"{_IMAGES}/Brown_leather_wallet_5a5c9bbf.png",
        "stock": 45,
        "featured": False,
    },
    {
        "name": "Wire Desk Organizer",
        "description": (
            "Modern metal mesh desk caddy with multiple compartments. Keeps your workspace tidy and "
            "organized. Powder-coated white finish."
        ),
        "price": "32.00",
        "sale_price": None,
        "category": "accessories",
        "image": f"{_IMAGES}/White_desk_organizer_769a74a5.png",
        "stock": 60,
        "featured": False,
    },
]


def seed_catalogue() -> bool:
    """Load the starter categories and products. Must run inside the catalogue domain context.

    Returns False when the catalogue already had products and nothing was loaded.
    """
    if current_domain.repository_for(Product)._dao.query.all().items:
        logger.info("catalogue_seed_skipped")
        return False

    for category in SEED_CATEGORIES:
        current_domain.process(CreateCategory(**category), asynchronous=False)

    for product in SEED_PRODUCTS:
        current_domain.process(
            CreateProduct(**product, images=json.dumps([product["image"]])),
            asynchronous=False,
        )

    logger.info("catalogue_seeded", categories=len(SEED_CATEGORIES), products=len(SEED_PRODUCTS))
    return True
