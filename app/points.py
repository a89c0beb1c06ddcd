"""Receipt scoring.

Seven independent rules, each worth a fixed or computed number of points,
summed into the receipt's total. All money arithmetic is done on integer
cents so that checks like "multiple of 0.25" are exact.
"""

import unicodedata
from datetime import time

from app.models import Receipt

POINTS_PER_ALNUM_CHAR = 1
POINTS_ROUND_TOTAL = 50
POINTS_QUARTER_TOTAL = 25
POINTS_PER_ITEM_PAIR = 5
POINTS_ODD_DAY = 6
POINTS_AFTERNOON = 10

QUARTER_CENTS = 25
DESCRIPTION_LENGTH_FACTOR = 3
# price * 0.2 == cents / 500
DESCRIPTION_PRICE_DIVISOR_CENTS = 500

AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)


def _is_alphanumeric(char: str) -> bool:
    # Letters of any script and decimal digits; str.isalnum() would also
    # accept fractions, superscripts and other numeric symbols.
    category = unicodedata.category(char)
    return category.startswith("L") or category == "Nd"


def retailer_points(retailer: str) -> int:
    """One point for every letter or decimal digit in the retailer name."""
    return sum(POINTS_PER_ALNUM_CHAR for c in retailer if _is_alphanumeric(c))


def round_total_points(total_cents: int) -> int:
    """50 points if the total is a round dollar amount with no cents."""
    return POINTS_ROUND_TOTAL if total_cents % 100 == 0 else 0


def quarter_total_points(total_cents: int) -> int:
    """25 points if the total is a multiple of 0.25."""
    return POINTS_QUARTER_TOTAL if total_cents % QUARTER_CENTS == 0 else 0


def item_pair_points(item_count: int) -> int:
    """5 points for every two items on the receipt."""
    return (item_count // 2) * POINTS_PER_ITEM_PAIR


def item_description_points(short_description: str, price_cents: int) -> int:
    """ceil(price * 0.2) if the trimmed description length is a multiple of 3.

    Blank descriptions earn nothing.
    """
    length = len(short_description.strip())
    if length == 0 or length % DESCRIPTION_LENGTH_FACTOR != 0:
        return 0
    return -(-price_cents // DESCRIPTION_PRICE_DIVISOR_CENTS)


def description_points(receipt: Receipt) -> int:
    return sum(item_description_points(i.short_description, i.price_cents) for i in receipt.items)


def purchase_day_points(receipt: Receipt) -> int:
    """6 points if the day in the purchase date is odd."""
    return POINTS_ODD_DAY if receipt.purchase_date.day % 2 == 1 else 0


def purchase_time_points(receipt: Receipt) -> int:
    """10 points if purchased strictly after 14:00 and strictly before 16:00."""
    return POINTS_AFTERNOON if AFTERNOON_START < receipt.purchase_time < AFTERNOON_END else 0


def points_breakdown(receipt: Receipt) -> dict[str, int]:
    """Points earned per rule, keyed by rule name."""
    return {
        "retailer": retailer_points(receipt.retailer),
        "round_total": round_total_points(receipt.total_cents),
        "quarter_total": quarter_total_points(receipt.total_cents),
        "item_pairs": item_pair_points(len(receipt.items)),
        "descriptions": description_points(receipt),
        "odd_day": purchase_day_points(receipt),
        "afternoon": purchase_time_points(receipt),
    }


def calculate_points(receipt: Receipt) -> int:
    return sum(points_breakdown(receipt).values())
