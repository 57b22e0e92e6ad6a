"""Memory-only behaviour of StockMemoryRepository."""

from __future__ import annotations

import threading

import pytest

from modules.products.entities import Product
from modules.products.exceptions import ProductInUse
from modules.products.repositories import ProductMemoryRepository
from modules.providers.entities import Provider
from modules.providers.exceptions import ProviderInUse
from modules.providers.repositories import ProviderMemoryRepository
from modules.stocks.entities import Stock
from modules.stocks.exceptions import InvalidStockReference, StockAlreadyExists
from modules.stocks.repositories import StockMemoryRepository
from modules.users.entities import User
from modules.users.exceptions import UserInUse
from modules.users.repositories import UserMemoryRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def refs(memory_store):
    product = Product.new(name="Widget", code="P-001")
    user = User.new(name="Ana", email="ana@example.com", role="admin", password="pw")
    provider = Provider.new(name="Acme", email="sales@acme.example.com")
    ProductMemoryRepository(memory_store).create(product)
    UserMemoryRepository(memory_store).create(user)
    ProviderMemoryRepository(memory_store).create(provider)
    return product, user, provider


@pytest.fixture()
def repo(memory_store):
    return StockMemoryRepository(memory_store)


def _stock(refs, serial="SN-001", **ids) -> Stock:
    product, user, provider = refs
    return Stock.new(
        product_id=ids.get("product_id", product.id),
        serial=serial,
        batch="B1",
        purchase_date=None,
        provider_id=ids.get("provider_id", provider.id),
        created_by_user_id=ids.get("user_id", user.id),
    )


class TestReferences:
    @pytest.mark.parametrize(
        "ids, reference",
        [
            ({"product_id": 99}, "product"),
            ({"provider_id": 99}, "provider"),
            ({"user_id": 99}, "created_by_user"),
        ],
    )
    def test_dangling_reference_rejected(self, repo, refs, ids, reference):
        with pytest.raises(InvalidStockReference) as exc_info:
            repo.create(_stock(refs, **ids))
        assert exc_info.value.reference == reference
        assert exc_info.value.reference_id == 99
        assert repo.get_all() == []

    def test_update_with_dangling_updater_rejected(self, repo, refs):
        stock = _stock(refs)
        repo.create(stock)
        changed = stock.model_copy(update={"updated_by_user": User(id=99)})
        with pytest.raises(InvalidStockReference):
            repo.update(changed)
        assert repo.get_by_id(stock.id).updated_by_user.id == refs[1].id

    def test_referenced_rows_cannot_be_deleted(self, memory_store, repo, refs):
        product, user, provider = refs
        repo.create(_stock(refs))
        with pytest.raises(ProductInUse):
            ProductMemoryRepository(memory_store).delete(product.id)
        with pytest.raises(UserInUse):
            UserMemoryRepository(memory_store).delete(user.id)
        with pytest.raises(ProviderInUse):
            ProviderMemoryRepository(memory_store).delete(provider.id)

    def test_unreferenced_rows_can_be_deleted(self, memory_store, repo, refs):
        stock = _stock(refs)
        repo.create(stock)
        repo.delete(stock.id)
        ProductMemoryRepository(memory_store).delete(refs[0].id)


class TestStorage:
    def test_rows_keep_only_reference_ids(self, memory_store, repo, refs):
        stock = _stock(refs)
        repo.create(stock)
        stored = memory_store.table("stocks")[stock.id]
        assert stored.product == Product(id=refs[0].id)
        assert stored.created_by_user == User(id=refs[1].id)

    def test_reads_reflect_current_reference_rows(self, memory_store, repo, refs):
        product = refs[0]
        stock = _stock(refs)
        repo.create(stock)
        ProductMemoryRepository(memory_store).update(
            product.model_copy(update={"name": "Renamed"})
        )
        assert repo.get_by_id(stock.id).product.name == "Renamed"

    def test_concurrent_creates_with_same_serial(self, repo, refs):
        results = []
        start = threading.Barrier(8, timeout=5)

        def worker():
            start.wait()
            try:
                repo.create(_stock(refs))
                results.append("created")
            except StockAlreadyExists:
                results.append("duplicate")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(5)

        assert results.count("created") == 1
        assert results.count("duplicate") == 7
        assert len(repo.get_all()) == 1

    def test_concurrent_creates_get_distinct_ids(self, repo, refs):
        def worker(n):
            for i in range(10):
                repo.create(_stock(refs, serial=f"SN-{n}-{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(5)

        ids = [s.id for s in repo.get_all()]
        assert len(ids) == 40
        assert ids == sorted(set(ids))
