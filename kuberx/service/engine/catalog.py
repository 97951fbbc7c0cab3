"""
Purchase Catalog for the "Should I Buy" evaluator.

Static reference data describing typical purchases with an average
price, a type (essential / lifestyle / investment), how fast they lose
value, and a rough financial-impact tag. The evaluator only reads it.
"""

from typing import List, Optional, Tuple

from kuberx.domain.exceptions import PurchaseItemNotFoundException

from .models import (
    DepreciationLevel,
    ImpactLevel,
    PurchaseCategory,
    PurchaseItem,
    PurchaseType,
)

# (id, name, average price, type, depreciation, impact)
_Row = Tuple[str, str, int, str, str, str]


def _category(category_id: str, name: str, *rows: _Row) -> PurchaseCategory:
    items = tuple(
        PurchaseItem(
            id=item_id,
            name=item_name,
            average_price=average_price,
            category=name,
            type=PurchaseType(item_type),
            depreciation_level=DepreciationLevel(depreciation),
            financial_impact=ImpactLevel(impact),
        )
        for item_id, item_name, average_price, item_type, depreciation, impact in rows
    )
    return PurchaseCategory(id=category_id, name=name, items=items)


PURCHASE_CATEGORIES = (
    _category(
        "gadgets-tech",
        "Gadgets & Tech",
        ("iphone", "iPhone / Premium Smartphone", 80000, "lifestyle", "high", "high"),
        ("android-phone", "Android Flagship Phone", 70000, "lifestyle", "high", "high"),
        ("laptop", "Laptop (MacBook / Windows)", 90000, "lifestyle", "high", "high"),
        ("tablet", "Tablet / iPad", 45000, "lifestyle", "high", "medium"),
        ("smartwatch", "Smartwatch", 25000, "lifestyle", "high", "medium"),
        ("earbuds", "Wireless Earbuds", 15000, "lifestyle", "high", "low"),
        ("gaming-console", "Gaming Console", 35000, "lifestyle", "high", "medium"),
        ("mechanical-keyboard", "Mechanical Keyboard", 10000, "lifestyle", "medium", "low"),
        ("monitor", "External Monitor", 20000, "lifestyle", "medium", "low"),
        ("camera", "Camera / GoPro", 50000, "lifestyle", "high", "medium"),
    ),
    _category(
        "gaming-entertainment",
        "Gaming & Entertainment",
        ("gaming-pc", "Gaming PC", 120000, "lifestyle", "high", "high"),
        ("ps5-xbox", "PlayStation / Xbox", 50000, "lifestyle", "high", "medium"),
        ("gaming-accessories", "Gaming Accessories", 8000, "lifestyle", "high", "low"),
        ("in-game-purchases", "In-game Purchases", 2000, "lifestyle", "high", "low"),
        ("streaming-subs", "Streaming Subscriptions", 500, "lifestyle", "none", "low"),
        ("movie-tickets", "Movie Tickets", 400, "lifestyle", "none", "low"),
    ),
    _category(
        "vehicles-transport",
        "Vehicles & Transport",
        ("bike-motorcycle", "Bike / Motorcycle", 150000, "essential", "medium", "high"),
        ("e-scooter", "Electric Scooter", 45000, "lifestyle", "high", "medium"),
        ("used-car", "Used Car", 400000, "essential", "medium", "high"),
        ("new-car", "New Car", 800000, "essential", "high", "high"),
    ),
    _category(
        "travel-experiences",
        "Travel & Experiences",
        ("domestic-trip", "Domestic Trip", 15000, "lifestyle", "none", "medium"),
        ("international-trip", "International Trip", 120000, "lifestyle", "none", "high"),
        ("weekend-getaway", "Weekend Getaway", 7000, "lifestyle", "none", "low"),
        ("concert-festival", "Concert / Music Festival", 5000, "lifestyle", "none", "low"),
        ("adventure-activity", "Adventure Activity", 10000, "lifestyle", "none", "medium"),
    ),
    _category(
        "fashion-lifestyle",
        "Fashion & Lifestyle",
        ("premium-sneakers", "Premium Sneakers", 12000, "lifestyle", "high", "low"),
        ("designer-clothes", "Designer Clothes", 10000, "lifestyle", "high", "low"),
        ("gym-membership", "Gym Membership (Annual)", 20000, "essential", "none", "low"),
        ("fitness-equipment", "Fitness Equipment", 15000, "lifestyle", "medium", "low"),
        ("luxury-watch", "Luxury Watch", 50000, "lifestyle", "low", "medium"),
        ("sunglasses", "Sunglasses", 5000, "lifestyle", "high", "low"),
    ),
    _category(
        "education-skills",
        "Education & Skill Building",
        ("online-course", "Online Course", 8000, "investment", "none", "low"),
        ("certification", "Certification Program", 25000, "investment", "none", "medium"),
        ("bootcamp", "Coding Bootcamp", 100000, "investment", "none", "high"),
        ("workshop", "Professional Workshop", 10000, "investment", "none", "low"),
    ),
    _category(
        "home-living",
        "Home & Living",
        ("furniture", "Furniture Purchase", 50000, "essential", "medium", "medium"),
        ("home-office", "Home Office Setup", 40000, "essential", "medium", "medium"),
        ("kitchen-appliances", "Kitchen Appliances", 30000, "essential", "low", "medium"),
    ),
    _category(
        "financial-decisions",
        "Financial Decisions",
        ("sip-investment", "Start SIP Investment", 5000, "investment", "none", "medium"),
        ("buy-gold", "Buy Gold", 50000, "investment", "low", "medium"),
        ("buy-crypto", "Buy Crypto", 25000, "investment", "high", "high"),
        ("credit-card-upgrade", "Credit Card Upgrade", 5000, "lifestyle", "none", "low"),
        ("bnpl-purchase", "Buy Now Pay Later Purchase", 20000, "lifestyle", "medium", "medium"),
        ("personal-loan", "Take Personal Loan", 200000, "essential", "none", "high"),
    ),
)

POPULAR_PURCHASE_IDS = ("iphone", "international-trip", "gaming-console")

_ITEMS_BY_ID = {
    item.id: item
    for category in PURCHASE_CATEGORIES
    for item in category.items
}


def all_purchase_items() -> List[PurchaseItem]:
    """Every catalog item, in category order."""
    return [item for category in PURCHASE_CATEGORIES for item in category.items]


def find_purchase_item(item_id: str) -> Optional[PurchaseItem]:
    return _ITEMS_BY_ID.get(item_id)


def get_purchase_item(item_id: str) -> PurchaseItem:
    """
    Look up a catalog item by id.

    Raises:
        PurchaseItemNotFoundException: If the id is not in the catalog
    """
    item = find_purchase_item(item_id)
    if item is None:
        raise PurchaseItemNotFoundException(item_id)
    return item


def get_purchases_by_category(category_id: str) -> List[PurchaseItem]:
    """Items in a category; empty for an unknown category id."""
    for category in PURCHASE_CATEGORIES:
        if category.id == category_id:
            return list(category.items)
    return []


def get_popular_purchases() -> List[PurchaseItem]:
    return [
        _ITEMS_BY_ID[item_id]
        for item_id in POPULAR_PURCHASE_IDS
        if item_id in _ITEMS_BY_ID
    ]
