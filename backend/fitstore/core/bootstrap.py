# fitstore/core/bootstrap.py
"""
Bootstrap module for application initialization.
Seeds the product catalog on first startup.
"""
import logging
from decimal import Decimal

from fitstore.config import settings
from fitstore.models.product import Product

logger = logging.getLogger("uvicorn.error")

DEFAULT_CATALOG = [
    {"id": "p1", "name": "Adjustable Dumbbell Set", "company": "IronCore", "type": "equipment",
     "price": "89.99", "weight": "24 kg", "img": "dumbbells.png"},
    {"id": "p2", "name": "Yoga Mat Pro", "company": "FlexFit", "type": "equipment",
     "price": "29.50", "weight": "1.2 kg", "img": "yoga-mat.png"},
    {"id": "p3", "name": "Resistance Bands (5 pack)", "company": "FlexFit", "type": "equipment",
     "price": "19.99", "weight": "0.4 kg", "img": "bands.png"},
    {"id": "p4", "name": "Kettlebell 16 kg", "company": "IronCore", "type": "equipment",
     "price": "45.00", "weight": "16 kg", "img": "kettlebell.png"},
    {"id": "p5", "name": "Whey Protein Vanilla", "company": "NutriMax", "type": "supplement",
     "price": "54.90", "weight": "2 kg", "img": "whey.png"},
    {"id": "p6", "name": "Creatine Monohydrate", "company": "NutriMax", "type": "supplement",
     "price": "24.99", "weight": "500 g", "img": "creatine.png"},
    {"id": "p7", "name": "BCAA Recovery", "company": "PurePower", "type": "supplement",
     "price": "32.00", "weight": "400 g", "img": "bcaa.png"},
    {"id": "p8", "name": "Multivitamin Active", "company": "PurePower", "type": "supplement",
     "price": "15.75", "weight": "120 caps", "img": "multivitamin.png"},
]


async def seed_products() -> int:
    """
    Insert the default catalog if the product table is empty.
    Only takes effect when SEED_PRODUCTS is enabled.

    Returns:
        Number of products inserted (0 when skipped)
    """
    if not settings.seed_products:
        return 0
    if await Product.all().exists():
        return 0  # Catalog already present; it is never overwritten

    await Product.bulk_create([Product(**{**item, "price": Decimal(item["price"])}) for item in DEFAULT_CATALOG])
    logger.warning("[bootstrap] Seeded product catalog -> %d products", len(DEFAULT_CATALOG))
    return len(DEFAULT_CATALOG)
