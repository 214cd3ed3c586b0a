"""Tests for the in-memory product repository and the product service."""

import asyncio
import threading

from rest_services.app.schemas.product import Product, ProductCreate, ProductUpdate
from rest_services.app.services.product_repository import InMemoryProductRepository
from rest_services.app.services.product_service import ProductService


def test_default_seed() -> None:
    repository = InMemoryProductRepository()
    assert [p.name for p in repository.list()] == ["food", "car", "gadgets"]
    assert len(repository) == 3


def test_ids_follow_insertion_order() -> None:
    repository = InMemoryProductRepository([])
    first_id, _ = repository.add(Product(name="a", price=1))
    second_id, _ = repository.add(Product(name="b", price=2))
    assert (first_id, second_id) == (0, 1)
    assert repository.get(1).name == "b"
    assert repository.get(2) is None


def test_returned_products_are_copies() -> None:
    repository = InMemoryProductRepository()
    product = repository.get(0)
    product.name = "changed"
    repository.list()[1].price = 0
    assert repository.get(0).name == "food"
    assert repository.get(1).price == 250.0


def test_update_missing_product_returns_none() -> None:
    repository = InMemoryProductRepository()
    assert repository.update(7, {"name": "x"}) is None
    assert len(repository) == 3


def test_concurrent_adds_get_unique_ids() -> None:
    repository = InMemoryProductRepository([])
    ids = []
    ids_lock = threading.Lock()

    def worker(n: int) -> None:
        for i in range(50):
            product_id, _ = repository.add(Product(name=f"{n}-{i}", price=i + 1))
            with ids_lock:
                ids.append(product_id)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(repository) == 400
    assert sorted(ids) == list(range(400))


def test_service_update_skips_empty_values() -> None:
    service = ProductService(InMemoryProductRepository())
    updated = asyncio.run(service.update_product(1, ProductUpdate(name="", price=0)))
    assert updated == Product(name="car", price=250.0)

    updated = asyncio.run(service.update_product(1, ProductUpdate(price=99.5)))
    assert updated == Product(name="car", price=99.5)


def test_service_create_returns_new_id() -> None:
    service = ProductService(InMemoryProductRepository())
    product_id, product = asyncio.run(service.create_product(ProductCreate(name="x", price=1)))
    assert product_id == 3
    assert product == Product(name="x", price=1.0)


def test_update_changes() -> None:
    assert ProductUpdate(name="", price=5).changes() == {"price": 5}
    assert ProductUpdate(name="n").changes() == {"name": "n"}
    assert ProductUpdate().changes() == {}
