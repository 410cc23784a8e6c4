# utils/money.py
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN, localcontext


@dataclass(frozen=True)
class MoneyFormat:
    """
    How amounts are rendered on a ticket.

    The default mirrors the classic "$#.00" decimal pattern:
    - currency symbol in front, no thousands grouping
    - exactly two fraction digits, "." as separator
    - no leading zero for amounts below one ($.30, not $0.30)
    - half-even rounding
    """

    symbol: str = "$"
    places: int = 2
    rounding: str = ROUND_HALF_EVEN

    @property
    def quantum(self) -> Decimal:
        # e.g. Decimal("0.01") for two places
        return Decimal(1).scaleb(-self.places)


USD = MoneyFormat()


def to_decimal(value) -> Decimal:
    # floats go through str() so 0.99 stays 0.99 instead of its binary expansion
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def format_money(amount, fmt: MoneyFormat = USD) -> str:
    value = to_decimal(amount)
    with localcontext() as ctx:
        # room for every integer digit plus the fraction digits
        ctx.prec = max(ctx.prec, value.adjusted() + fmt.places + 2)
        value = value.quantize(fmt.quantum, rounding=fmt.rounding)
    text = f"{value:f}"
    if text.startswith("0."):
        text = text[1:]
    return f"{fmt.symbol}{text}"


def parse_money(text: str, fmt: MoneyFormat = USD) -> Decimal:
    # "$4.95" -> Decimal("4.95"), "$.30" -> Decimal(".30")
    return Decimal(text.replace(fmt.symbol, "", 1).strip())
