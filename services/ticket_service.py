# services/ticket_service.py
import logging
from decimal import Decimal, localcontext
from typing import Iterable, List, Sequence

from models.item import Item
from services.pricing_service import calculate_discount, line_total
from utils.money import MoneyFormat, USD, format_money, parse_money
from utils.table import Align, column_widths, format_row, separator

logger = logging.getLogger("shopping_cart.ticket")

NO_ITEMS = "No items."

HEADER = ["#", "Item", "Price", "Quan.", "Discount", "Total"]
ALIGNMENTS = [Align.RIGHT, Align.LEFT, Align.RIGHT, Align.RIGHT, Align.RIGHT, Align.RIGHT]
TOTAL_COLUMN = 5


# ticket_service.py is a service module (Service Layer)
# with the class name TicketService, responsible for turning cart items
# into the printable, column aligned ticket.
class TicketService:
    def __init__(self, money_format: MoneyFormat = USD):
        self.money_format = money_format

    def item_rows(self, items: Iterable[Item]) -> List[List[str]]:
        # One row per item: #, title, price, quantity, discount, line total.
        rows = []
        for index, item in enumerate(items, start=1):
            discount = calculate_discount(item.category, item.quantity)
            total = line_total(item.price, item.quantity, discount)
            rows.append([
                str(index),
                item.title,
                format_money(item.price, self.money_format),
                str(item.quantity),
                "-" if discount == 0 else f"{discount}%",
                format_money(total, self.money_format),
            ])
        return rows

    def total(self, rows: Sequence[Sequence[str]]) -> Decimal:
        # Sum the line totals as printed, so the footer always adds up
        # with the rounded amounts shown above it.
        amounts = [parse_money(row[TOTAL_COLUMN], self.money_format) for row in rows]
        with localcontext() as ctx:
            largest = max((amount.adjusted() for amount in amounts), default=0)
            ctx.prec = max(ctx.prec, largest + self.money_format.places + len(str(len(amounts))) + 2)
            return sum(amounts, Decimal(0))

    def footer(self, rows: Sequence[Sequence[str]]) -> List[str]:
        return [str(len(rows)), "", "", "", "", format_money(self.total(rows), self.money_format)]

    def render(self, items: Sequence[Item]) -> str:
        if not items:
            return NO_ITEMS

        rows = self.item_rows(items)
        footer = self.footer(rows)
        widths = column_widths([HEADER, *rows, footer], len(HEADER))
        line = separator(widths)

        lines = [format_row(HEADER, ALIGNMENTS, widths), line]
        for row in rows:
            lines.append(format_row(row, ALIGNMENTS, widths))
            lines.append(line)
        lines.append(format_row(footer, ALIGNMENTS, widths))

        logger.debug(f"Ticket: rendered {len(rows)} rows, total {footer[TOTAL_COLUMN]}")
        return "\n".join(lines)
