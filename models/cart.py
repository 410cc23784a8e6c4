# models/cart.py
import logging
from decimal import Decimal, InvalidOperation

from models.errors import InvalidPrice, InvalidQuantity, InvalidTitle
from models.item import Category, Item
from services.ticket_service import TicketService
from utils.money import to_decimal

logger = logging.getLogger("shopping_cart.cart")

MAX_TITLE_LENGTH = 32
MIN_PRICE = Decimal("0.01")


# Cart model representing a shopping cart.
# Items keep their insertion order, which is also their order on the ticket.
# Not safe for concurrent use; keep one cart per session.
class Cart:
    def __init__(self, ticket_service: TicketService | None = None):
        self._items: list[Item] = []
        self._ticket_service = ticket_service or TicketService()

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, title: str, price, quantity: int, category: Category) -> None:
        """
        Validate and append a new item.

        title: 1 to 32 characters
        price: at least 0.01 (Decimal, int, float or numeric string)
        quantity: at least 1
        category: Category member or its name

        Raises InvalidTitle, InvalidPrice or InvalidQuantity, checked in
        that order, so only the first problem is reported.
        """
        try:
            item = Item(
                title=_check_title(title),
                price=_check_price(price),
                quantity=_check_quantity(quantity),
                category=Category(category),
            )
        except ValueError as e:
            logger.warning(f"Cart: rejected item {title!r}: {e}")
            raise

        self._items.append(item)
        logger.debug(f"Cart: added {item.title} x {item.quantity} ({item.category.value})")

    def format_ticket(self) -> str:
        # "No items." for an empty cart, otherwise the full ticket table.
        return self._ticket_service.render(self._items)


def _check_title(title) -> str:
    if not isinstance(title, str) or not 0 < len(title) <= MAX_TITLE_LENGTH:
        raise InvalidTitle()
    return title


def _check_price(price) -> Decimal:
    if isinstance(price, bool):
        raise InvalidPrice()
    try:
        value = to_decimal(price)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidPrice() from None
    if not value.is_finite() or value < MIN_PRICE:
        raise InvalidPrice()
    return value


def _check_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantity()
    return quantity
