"""Tests for the CatalogQueryEngine read side.

Uses in-memory fake repositories, no file I/O.
"""

import dataclasses
from datetime import timedelta

import pytest

from storefront.application.catalog_query import (
    FILTER_PAGE_SIZE,
    LIST_PAGE_SIZE,
    CatalogQueryEngine,
)
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Actor, Photo, Rating
from tests.fakes import (
    BASE_TIME,
    FakeCategoryRepository,
    FakePhotoStore,
    FakeProductRepository,
    FakeReviewRepository,
    make_category,
    make_product,
)


def _catalog(n_kitchen: int = 10, n_office: int = 5):
    """Kitchen products k0..k{n-1} priced 10,11,...; office products o0.. priced 100,101,..."""
    products = []
    minute = 0
    for i in range(n_kitchen):
        products.append(make_product(f"k{i}", f"Kitchen Thing {i}", price=str(10 + i), category_id="kitchen", minutes=minute))
        minute += 1
    for i in range(n_office):
        products.append(make_product(f"o{i}", f"Office Thing {i}", price=str(100 + i), category_id="office", minutes=minute))
        minute += 1
    categories = [make_category("kitchen", "Kitchen"), make_category("office", "Office")]
    product_repo = FakeProductRepository(products)
    review_repo = FakeReviewRepository()
    photos = FakePhotoStore()
    engine = CatalogQueryEngine(product_repo, FakeCategoryRepository(categories), review_repo, photos)
    return engine, product_repo, review_repo, photos


def _field_names(dto) -> set[str]:
    return {f.name for f in dataclasses.fields(dto)}


class TestListings:

    def test_list_all_newest_first_with_category(self):
        engine, _, _, _ = _catalog(2, 1)
        products = engine.list_all()
        assert [p.id for p in products] == ["o0", "k1", "k0"]
        assert products[0].category.name == "Office"

    def test_listings_never_carry_photo_or_reviews(self):
        engine, _, _, photos = _catalog(2, 1)
        photos.put("k0", Photo(b"png", "image/png"))
        listings = [
            engine.list_all(),
            engine.list_page(1),
            engine.filter([], []),
            engine.search(""),
            engine.related("k0", "kitchen"),
            engine.by_category("Kitchen")[1],
        ]
        for products in listings:
            for p in products:
                assert "photo" not in _field_names(p)
                assert "reviews" not in _field_names(p)

    def test_list_page_size_is_six(self):
        engine, _, _, _ = _catalog(10, 5)
        page1 = engine.list_page(1)
        page3 = engine.list_page(3)
        assert len(page1) == LIST_PAGE_SIZE == 6
        assert len(page3) == 3
        everything = engine.list_all()
        assert [p.id for p in page1] == [p.id for p in everything[0:6]]
        assert [p.id for p in page3] == [p.id for p in everything[12:18]]

    def test_page_past_the_end_is_empty(self):
        engine, _, _, _ = _catalog(2, 0)
        assert engine.list_page(5) == []

    def test_page_zero_rejected(self):
        engine, _, _, _ = _catalog(2, 0)
        with pytest.raises(ValidationError, match="Page must be 1 or greater"):
            engine.list_page(0)

    def test_count_all(self):
        engine, _, _, _ = _catalog(3, 4)
        assert engine.count_all() == 7


class TestFilter:

    def test_page_size_is_eight(self):
        engine, _, _, _ = _catalog(10, 5)
        assert len(engine.filter([], [], 1)) == FILTER_PAGE_SIZE == 8
        assert len(engine.filter([], [], 2)) == 7

    def test_pages_are_consecutive_slices_of_the_newest_first_order(self):
        engine, _, _, _ = _catalog(10, 5)
        everything = engine.list_all()
        page2 = engine.filter([], [], 2)
        assert [p.id for p in page2] == [p.id for p in everything[8:16]]

    def test_category_and_price(self):
        engine, _, _, _ = _catalog(10, 5)
        result = engine.filter(["kitchen"], [12, 14])
        assert sorted(p.id for p in result) == ["k2", "k3", "k4"]

    def test_count_agrees_with_unpaged_listing(self):
        engine, product_repo, _, _ = _catalog(10, 5)
        for checked, radio in [([], []), (["kitchen"], []), ([], [15, 102]), (["office"], [101, 200])]:
            listed = []
            page = 1
            while batch := engine.filter(checked, radio, page):
                listed.extend(batch)
                page += 1
            assert engine.count_filtered(checked, radio) == len(listed)

    def test_empty_category_set_means_any_category(self):
        engine, _, _, _ = _catalog(2, 2)
        assert engine.count_filtered([], []) == 4


class TestSearch:

    def test_matches_name_or_description_ignoring_case(self):
        engine, product_repo, _, _ = _catalog(0, 0)
        product_repo.save(make_product("a", "Steel Kettle", description="boils water"))
        product_repo.save(make_product("b", "Teapot", description="Pairs with a KETTLE"))
        product_repo.save(make_product("c", "Lamp", description="bright"))
        assert sorted(p.id for p in engine.search("kettle")) == ["a", "b"]

    def test_empty_keyword_matches_everything(self):
        engine, _, _, _ = _catalog(2, 2)
        assert len(engine.search("")) == 4


class TestRelated:

    def test_at_most_four_from_same_category_excluding_self(self):
        engine, _, _, _ = _catalog(10, 5)
        related = engine.related("k0", "kitchen")
        assert len(related) == 4
        assert all(p.category.id == "kitchen" for p in related)
        assert "k0" not in {p.id for p in related}


class TestByCategory:

    def test_resolves_category_by_slug(self):
        engine, _, _, _ = _catalog(2, 3)
        category, products = engine.by_category("Office")
        assert category.name == "Office"
        assert sorted(p.id for p in products) == ["o0", "o1", "o2"]

    def test_unknown_slug_not_found(self):
        engine, _, _, _ = _catalog(1, 1)
        with pytest.raises(EntityNotFoundError, match="Category 'garden' not found"):
            engine.by_category("garden")


class TestSingleProduct:

    def test_unknown_slug_not_found(self):
        engine, _, _, _ = _catalog(1, 0)
        with pytest.raises(EntityNotFoundError):
            engine.get_by_slug("nope")

    def test_reviews_hydrated_newest_updated_first(self):
        engine, product_repo, review_repo, _ = _catalog(1, 0)
        product = product_repo.get_by_id("k0")
        first = Review.post("k0", Actor("u1", "Ann"), "first", Rating(3))
        second = Review.post("k0", Actor("u2", "Ben"), "second", Rating(4))
        for review in (first, second):
            review_repo.add(review)
            product.attach_review(review.id)
        first.updated_at = BASE_TIME + timedelta(days=2)
        second.updated_at = BASE_TIME + timedelta(days=1)

        dto = engine.get_by_slug(product.slug)

        assert [r.id for r in dto.reviews] == [first.id, second.id]
        assert dto.reviews[0].author.name == "Ann"
        assert dto.category.name == "Kitchen"

    def test_dangling_reference_is_skipped(self):
        engine, product_repo, _, _ = _catalog(1, 0)
        product = product_repo.get_by_id("k0")
        product.attach_review("ghost")
        assert engine.get_by_slug(product.slug).reviews == []


class TestPhoto:

    def test_returns_stored_photo(self):
        engine, _, _, photos = _catalog(1, 0)
        photos.put("k0", Photo(b"\x89PNG", "image/png"))
        photo = engine.get_photo("k0")
        assert photo.content_type == "image/png"
        assert photo.data == b"\x89PNG"

    def test_missing_photo_is_none(self):
        engine, _, _, _ = _catalog(1, 0)
        assert engine.get_photo("k0") is None
