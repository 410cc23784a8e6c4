import argparse
import logging

from models.cart import Cart
from models.item import Category
from utils.logger import setup_logger

# Fixed sample cart printed by the demo.
SAMPLE_ITEMS = [
    ("Apple", "0.99", 5, Category.NEW),
    ("Banana", "20.00", 4, Category.SECOND_FREE),
    ("A long piece of toilet paper", "17.20", 1, Category.SALE),
    ("Nails", "2.00", 500, Category.REGULAR),
]


def build_sample_cart() -> Cart:
    cart = Cart()
    for title, price, quantity, category in SAMPLE_ITEMS:
        cart.add_item(title, price, quantity, category)
    return cart


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Print a sample shopping cart ticket.")
    parser.add_argument("--log-dir", default="data/logs", help="directory for rotating log files")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger(args.log_dir, getattr(logging, args.log_level))

    cart = build_sample_cart()
    logger.info(f"Demo: built sample cart with {len(cart)} items")
    print(cart.format_ticket())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
