# services/pricing_service.py

from __future__ import annotations
from decimal import Decimal, localcontext
from typing import Dict

from models.item import Category


# Base discount (in percent) for each category.
# SECOND_FREE only gets its base discount when more than one unit is bought,
# see base_discount() below.
BASE_DISCOUNTS: Dict[Category, int] = {
    Category.NEW: 0,
    Category.REGULAR: 0,
    Category.SECOND_FREE: 50,
    Category.SALE: 70,
}

# Every full BULK_STEP units add one extra percent, up to MAX_DISCOUNT.
BULK_STEP = 10
MAX_DISCOUNT = 80


def base_discount(category: Category, quantity: int) -> int:
    if category is Category.SECOND_FREE and quantity <= 1:
        return 0
    return BASE_DISCOUNTS[category]


def calculate_discount(category: Category, quantity: int) -> int:
    """
    Return the discount percentage (0..80) for a line of the cart.

    - NEW items never get a discount, not even the bulk bonus
    - SECOND_FREE items get 50% if quantity > 1
    - SALE items get 70%
    - every full 10 units of a non-NEW item add 1%, capped at 80% total
    """
    category = Category(category)
    if category is Category.NEW:
        return 0

    discount = base_discount(category, quantity)
    if discount < MAX_DISCOUNT:
        discount = min(discount + quantity // BULK_STEP, MAX_DISCOUNT)
    return discount


def line_total(price: Decimal, quantity: int, discount: int) -> Decimal:
    # Exact total of one line; rounding happens when it is formatted.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(price.as_tuple().digits) + len(str(quantity)) + 3)
        return price * quantity * (100 - discount) / 100
