"""Tests for the JSON-file repositories and the photo store.

Each test works in its own ``tmp_path`` directory.
"""

import threading
from decimal import Decimal

import pytest

from storefront.domain.exceptions import ConflictError, StoreUnavailableError
from storefront.domain.model.category import Category
from storefront.domain.model.order import CartLineItem, Order
from storefront.domain.model.product_query import ProductQuery
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Actor, Money, Photo, Rating
from storefront.infrastructure.persistence.filesystem_photo_store import (
    FilesystemPhotoStore,
)
from storefront.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from storefront.infrastructure.persistence.json_file import JsonFile
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_review_repository import (
    JsonReviewRepository,
)
from tests.fakes import make_product


class TestJsonFile:

    def test_creates_empty_array(self, tmp_path):
        store = JsonFile(tmp_path / "nested" / "things.json")
        assert store.read() == []
        assert (tmp_path / "nested" / "things.json").read_text(encoding="utf-8") == "[]"

    def test_update_persists_on_clean_exit(self, tmp_path):
        store = JsonFile(tmp_path / "things.json")
        with store.update() as records:
            records.append({"id": "a"})
        assert JsonFile(tmp_path / "things.json").read() == [{"id": "a"}]

    def test_update_discards_changes_on_error(self, tmp_path):
        store = JsonFile(tmp_path / "things.json")
        with pytest.raises(RuntimeError):
            with store.update() as records:
                records.append({"id": "a"})
                raise RuntimeError("boom")
        assert store.read() == []

    def test_times_out_while_another_thread_holds_the_file(self, tmp_path):
        store = JsonFile(tmp_path / "things.json", timeout=0.05)
        holding = threading.Event()
        release = threading.Event()

        def hold():
            with store.update():
                holding.set()
                release.wait(5)

        worker = threading.Thread(target=hold)
        worker.start()
        try:
            assert holding.wait(5)
            with pytest.raises(StoreUnavailableError):
                store.read()
        finally:
            release.set()
            worker.join()


class TestJsonProductRepository:

    def test_round_trips_a_product(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = make_product("p1", "Blue Kettle", price="19.99")
        product.attach_review("r1")
        repo.save(product)

        loaded = JsonProductRepository(tmp_path / "products.json").get_by_slug("Blue-Kettle")
        assert loaded == product
        assert loaded.price.amount == Decimal("19.99")

    def test_save_overwrites_existing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = make_product("p1", "Kettle")
        repo.save(product)
        product.quantity = 42
        repo.save(product)
        assert repo.count_all() == 1
        assert repo.get_by_id("p1").quantity == 42

    def test_find_pages_newest_first(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for i in range(5):
            repo.save(make_product(f"p{i}", f"Thing {i}", minutes=i))
        page = repo.find(ProductQuery.everything(), newest_first=True, skip=1, limit=2)
        assert [p.id for p in page] == ["p3", "p2"]

    def test_count_matches_find(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product("a", "A", price="5", category_id="x"))
        repo.save(make_product("b", "B", price="15", category_id="x"))
        repo.save(make_product("c", "C", price="15", category_id="y"))
        query = ProductQuery.for_filter(["x"], [10, 20])
        assert repo.count(query) == len(repo.find(query)) == 1

    def test_push_and_pull_review(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product("p1", "Kettle"))

        assert repo.push_review("p1", "r1") is True
        assert repo.push_review("p1", "r1") is True
        assert repo.get_by_id("p1").review_ids == ["r1"]
        assert repo.pull_review("p1", "r1") is True
        assert repo.pull_review("p1", "r1") is False
        assert repo.get_by_id("p1").review_ids == []

    def test_push_to_missing_product_reports_false(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.push_review("ghost", "r1") is False

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product("p1", "Kettle"))
        assert repo.delete_by_id("p1") is True
        assert repo.delete_by_id("p1") is False
        assert repo.count_all() == 0


class TestJsonCategoryRepository:

    def test_save_and_lookup(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "categories.json")
        category = Category.create("Garden Tools")
        repo.save(category)
        assert repo.get_by_id(category.id) == category
        assert repo.get_by_slug("Garden-Tools") == category
        assert repo.list_all() == [category]

    def test_unknown_lookups_return_none(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "categories.json")
        assert repo.get_by_id("x") is None
        assert repo.get_by_slug("x") is None


class TestJsonReviewRepository:

    def test_add_and_get_many_skips_missing(self, tmp_path):
        repo = JsonReviewRepository(tmp_path / "reviews.json")
        review = Review.post("p1", Actor("u1", "Ann"), "Lovely", Rating(4))
        repo.add(review)
        assert repo.get_many([review.id, "ghost"]) == [review]

    def test_same_author_same_product_conflicts(self, tmp_path):
        repo = JsonReviewRepository(tmp_path / "reviews.json")
        repo.add(Review.post("p1", Actor("u1"), "Lovely", Rating(4)))
        with pytest.raises(ConflictError):
            repo.add(Review.post("p1", Actor("u1"), "Again", Rating(2)))
        assert repo.delete_for_product("p1") == 1

    def test_save_overwrites(self, tmp_path):
        repo = JsonReviewRepository(tmp_path / "reviews.json")
        review = Review.post("p1", Actor("u1"), "Lovely", Rating(4))
        repo.add(review)
        review.edit(Actor("u1"), "Meh", Rating(2))
        repo.save(review)
        loaded = repo.get_by_id(review.id)
        assert loaded.body == "Meh"
        assert loaded.rating == Rating(2)

    def test_delete_for_product_leaves_others(self, tmp_path):
        repo = JsonReviewRepository(tmp_path / "reviews.json")
        keep = Review.post("p2", Actor("u1"), "Keep", Rating(5))
        repo.add(Review.post("p1", Actor("u1"), "Gone", Rating(1)))
        repo.add(Review.post("p1", Actor("u2"), "Gone", Rating(1)))
        repo.add(keep)
        assert repo.delete_for_product("p1") == 2
        assert repo.get_by_id(keep.id) == keep


class TestJsonOrderRepository:

    def test_round_trips_an_order(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.place(
            Actor("u1"),
            [CartLineItem(Money.of("10"), "p1", "Kettle"), CartLineItem(Money.of("2.50"))],
            {"id": "txn_1", "status": "submitted_for_settlement"},
        )
        repo.add(order)
        loaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id(order.id)
        assert loaded == order
        assert loaded.amount == Money.of("12.50")


class TestFilesystemPhotoStore:

    def test_put_get_delete(self, tmp_path):
        store = FilesystemPhotoStore(tmp_path / "photos")
        photo = Photo(b"\x89PNG\r\n", "image/png")
        store.put("p1", photo)
        assert store.get("p1") == photo
        store.delete("p1")
        assert store.get("p1") is None

    def test_missing_photo_is_none(self, tmp_path):
        assert FilesystemPhotoStore(tmp_path).get("nope") is None

    def test_delete_missing_is_noop(self, tmp_path):
        FilesystemPhotoStore(tmp_path).delete("nope")

    def test_ids_cannot_escape_directory(self, tmp_path):
        store = FilesystemPhotoStore(tmp_path / "photos")
        store.put("../evil", Photo(b"x", "image/png"))
        assert not (tmp_path / "evil.bin").exists()
        assert (tmp_path / "photos" / "evil.bin").exists()
