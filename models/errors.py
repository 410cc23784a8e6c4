# models/errors.py
"""
Validation errors raised by Cart.add_item.

Each error carries a fixed, human readable message. They subclass ValueError,
so code that already guards cart input with `except ValueError` keeps working.

    InvalidItemError (ValueError)
    ├── InvalidTitle      "Illegal title"
    ├── InvalidPrice      "Illegal price"
    └── InvalidQuantity   "Illegal quantity"
"""


class InvalidItemError(ValueError):
    message = "Illegal item"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidTitle(InvalidItemError):
    message = "Illegal title"


class InvalidPrice(InvalidItemError):
    message = "Illegal price"


class InvalidQuantity(InvalidItemError):
    message = "Illegal quantity"
