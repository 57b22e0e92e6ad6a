"""Unit tests for the Product repositories.

Both backends are exercised against the same contract:
- create writes id and timestamps back.
- get_all is ordered by id.
- duplicate code -> ProductAlreadyExists.
- missing rows -> ProductNotFound (never None).
"""

from __future__ import annotations

import pytest

from modules.products.entities import Product
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import ProductRow
from modules.products.repositories import (
    IProductRepository,
    ProductDjangoRepository,
    ProductMemoryRepository,
)

pytestmark = pytest.mark.unit


@pytest.fixture(params=["django", "memory"])
def repo(request, memory_store) -> IProductRepository:
    if request.param == "django":
        return ProductDjangoRepository()
    return ProductMemoryRepository(memory_store)


class TestCreate:
    def test_assigns_id_and_timestamps(self, repo):
        product = Product(name="Widget", code="P-001")
        repo.create(product)
        assert product.id is not None
        assert product.created_at is not None
        assert product.created_at == product.updated_at

    def test_duplicate_code_raises(self, repo):
        repo.create(Product(name="Widget", code="P-001"))
        with pytest.raises(ProductAlreadyExists, match="P-001"):
            repo.create(Product(name="Other", code="P-001"))
        assert len(repo.get_all()) == 1


class TestRead:
    def test_get_by_id_round_trip(self, repo):
        product = Product(name="Widget", code="P-001", image_url="http://img")
        repo.create(product)
        fetched = repo.get_by_id(product.id)
        assert fetched.name == "Widget"
        assert fetched.code == "P-001"
        assert fetched.image_url == "http://img"

    def test_get_by_id_missing_raises(self, repo):
        with pytest.raises(ProductNotFound) as exc_info:
            repo.get_by_id(999)
        assert exc_info.value.product_id == 999
        assert str(exc_info.value) == "product with ID 999 not found"

    def test_get_all_ordered_by_id(self, repo):
        for code in ("C", "A", "B"):
            repo.create(Product(name=code, code=code))
        ids = [p.id for p in repo.get_all()]
        assert ids == sorted(ids)
        assert [p.code for p in repo.get_all()] == ["C", "A", "B"]

    def test_get_all_empty(self, repo):
        assert repo.get_all() == []


class TestUpdate:
    def test_rewrites_fields(self, repo):
        product = Product(name="Widget", code="P-001")
        repo.create(product)
        product.name = "Widget v2"
        product.code = "P-002"
        repo.update(product)
        fetched = repo.get_by_id(product.id)
        assert fetched.name == "Widget v2"
        assert fetched.code == "P-002"

    def test_keeps_created_at(self, repo):
        product = Product(name="Widget", code="P-001")
        repo.create(product)
        created_at = product.created_at
        repo.update(Product(id=product.id, name="X", code="P-001"))
        assert repo.get_by_id(product.id).created_at == created_at

    def test_missing_raises(self, repo):
        with pytest.raises(ProductNotFound):
            repo.update(Product(id=999, name="Ghost", code="G"))

    def test_duplicate_code_raises(self, repo):
        repo.create(Product(name="A", code="A"))
        b = Product(name="B", code="B")
        repo.create(b)
        b.code = "A"
        with pytest.raises(ProductAlreadyExists):
            repo.update(b)
        assert repo.get_by_id(b.id).code == "B"


class TestDelete:
    def test_removes_row(self, repo):
        product = Product(name="Widget", code="P-001")
        repo.create(product)
        repo.delete(product.id)
        with pytest.raises(ProductNotFound):
            repo.get_by_id(product.id)

    def test_missing_raises(self, repo):
        with pytest.raises(ProductNotFound):
            repo.delete(999)


class TestDjangoSpecifics:
    def test_is_instance_of_interface(self):
        assert isinstance(ProductDjangoRepository(), IProductRepository)

    def test_row_persisted(self):
        product = Product(name="Widget", code="P-001")
        ProductDjangoRepository().create(product)
        assert ProductRow.objects.filter(pk=product.id, code="P-001").exists()


class TestMemorySpecifics:
    def test_returned_records_are_copies(self, memory_store):
        repo = ProductMemoryRepository(memory_store)
        product = Product(name="Widget", code="P-001")
        repo.create(product)
        product.name = "mutated after create"
        fetched = repo.get_by_id(product.id)
        fetched.name = "mutated after read"
        assert repo.get_by_id(product.id).name == "Widget"
