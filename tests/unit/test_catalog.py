"""Unit tests for the purchase catalog lookups."""

import pytest

from kuberx.domain.exceptions import PurchaseItemNotFoundException
from kuberx.service.engine.catalog import (
    PURCHASE_CATEGORIES,
    all_purchase_items,
    find_purchase_item,
    get_popular_purchases,
    get_purchase_item,
    get_purchases_by_category,
)
from kuberx.service.engine.models import PurchaseType


class TestCatalogData:
    """Tests for the static catalog contents."""

    def test_eight_categories(self):
        assert [c.id for c in PURCHASE_CATEGORIES] == [
            "gadgets-tech",
            "gaming-entertainment",
            "vehicles-transport",
            "travel-experiences",
            "fashion-lifestyle",
            "education-skills",
            "home-living",
            "financial-decisions",
        ]

    def test_item_ids_are_unique(self):
        ids = [item.id for item in all_purchase_items()]
        assert len(ids) == len(set(ids))

    def test_items_carry_their_category_name(self):
        for category in PURCHASE_CATEGORIES:
            for item in category.items:
                assert item.category == category.name

    def test_prices_are_positive(self):
        assert all(item.average_price > 0 for item in all_purchase_items())


class TestCatalogLookups:
    """Tests for the lookup helpers."""

    def test_get_item(self):
        item = get_purchase_item("iphone")

        assert item.name == "iPhone / Premium Smartphone"
        assert item.average_price == 80000
        assert item.type == PurchaseType.LIFESTYLE

    def test_unknown_item_raises(self):
        with pytest.raises(PurchaseItemNotFoundException) as exc_info:
            get_purchase_item("yacht")

        assert exc_info.value.item_id == "yacht"
        assert exc_info.value.code == "PURCHASE_ITEM_NOT_FOUND"

    def test_find_item_returns_none_when_missing(self):
        assert find_purchase_item("yacht") is None

    def test_items_by_category(self):
        items = get_purchases_by_category("financial-decisions")

        assert "buy-gold" in [item.id for item in items]
        assert all(item.category == "Financial Decisions" for item in items)

    def test_unknown_category_is_empty(self):
        assert get_purchases_by_category("space-travel") == []

    def test_popular_purchases(self):
        popular = get_popular_purchases()
        assert [item.id for item in popular] == ["iphone", "international-trip", "gaming-console"]
