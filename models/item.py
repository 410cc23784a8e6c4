# models/item.py
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    # Discount class of an item. See services/pricing_service.py for the rules.
    NEW = "NEW"
    REGULAR = "REGULAR"
    SECOND_FREE = "SECOND_FREE"
    SALE = "SALE"


# Item model representing one line of the cart. Built by Cart.add_item only,
# so every instance already satisfies the validation limits.
@dataclass(frozen=True)
class Item:
    title: str
    price: Decimal
    quantity: int
    category: Category
