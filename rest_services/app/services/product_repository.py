"""
Storage for products.

``ProductRepository`` is the interface the product service talks to.
``InMemoryProductRepository`` keeps products in an insertion-ordered
dict keyed by an integer id.  Ids start at 0 and grow by one for every
product added; they are never reused, so as long as nothing is
removed an id is also the product's position in ``list()``.

Every method holds the repository lock for its full duration.  There
is no reader/writer split: reads and writes are serialized alike.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple

from rest_services.app.schemas.product import Product


DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(name="food", price=10.00),
    Product(name="car", price=250.00),
    Product(name="gadgets", price=50.00),
)


class ProductRepository(ABC):
    """Interface over the product collection."""

    @abstractmethod
    def list(self) -> List[Product]:
        """Return all products in insertion order."""

    @abstractmethod
    def get(self, product_id: int) -> Optional[Product]:
        """Return the product with ``product_id`` or ``None``."""

    @abstractmethod
    def add(self, product: Product) -> Tuple[int, Product]:
        """Store ``product`` and return its new id together with the stored copy."""

    @abstractmethod
    def update(self, product_id: int, changes: dict) -> Optional[Product]:
        """Apply ``changes`` to the product with ``product_id``.

        Returns the updated product or ``None`` if no such product exists.
        """


class InMemoryProductRepository(ProductRepository):
    """Thread-safe in-memory product store."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._lock = threading.Lock()
        self._products: Dict[int, Product] = {}
        self._next_id = 0
        for product in DEFAULT_PRODUCTS if products is None else products:
            self._insert(product)

    def _insert(self, product: Product) -> Tuple[int, Product]:
        product_id = self._next_id
        self._next_id += 1
        stored = Product(name=product.name, price=product.price)
        self._products[product_id] = stored
        return product_id, stored.model_copy()

    def list(self) -> List[Product]:
        with self._lock:
            return [product.model_copy() for product in self._products.values()]

    def get(self, product_id: int) -> Optional[Product]:
        with self._lock:
            product = self._products.get(product_id)
            return product.model_copy() if product is not None else None

    def add(self, product: Product) -> Tuple[int, Product]:
        with self._lock:
            return self._insert(product)

    def update(self, product_id: int, changes: dict) -> Optional[Product]:
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return None
            updated = product.model_copy(update=changes)
            self._products[product_id] = updated
            return updated.model_copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
