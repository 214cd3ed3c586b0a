"""
Service layer for products.

``ProductService`` holds the product business rules (partial updates
that skip empty values) on top of an injected ``ProductRepository``.
Endpoints never touch the repository directly, so swapping the
in-memory store for a database only means providing another
repository implementation.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from rest_services.app.schemas.product import Product, ProductCreate, ProductUpdate
from rest_services.app.services.product_repository import ProductRepository


logger = logging.getLogger(__name__)


class ProductService:
    """Service class for managing products."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    async def list_products(self) -> List[Product]:
        return self.repository.list()

    async def get_product(self, product_id: int) -> Optional[Product]:
        return self.repository.get(product_id)

    async def create_product(self, data: ProductCreate) -> Tuple[int, Product]:
        """Append a new product and return its id and stored value."""
        product_id, product = self.repository.add(Product(name=data.name, price=data.price))
        logger.info("Created product %s (%s)", product_id, product.name)
        return product_id, product

    async def update_product(self, product_id: int, data: ProductUpdate) -> Optional[Product]:
        """Update an existing product.

        Only a non-empty ``name`` and a non-zero ``price`` are applied.
        Returns the updated product or ``None`` if the id does not exist.
        """
        changes = data.changes()
        product = self.repository.update(product_id, changes)
        if product is not None:
            logger.info("Updated product %s (fields: %s)", product_id, ", ".join(sorted(changes)) or "none")
        return product
