import re
import uuid
from dataclasses import dataclass
from datetime import date as date_type, datetime, time as time_type

from app.errors import FieldFormatError
from app.schemas import AMOUNT_PATTERN, DATE_FORMAT, TIME_FORMAT, ReceiptIn

CENTS_PER_DOLLAR = 100


def new_uuid() -> str:
    return str(uuid.uuid4())


def parse_cents(value: str, field: str) -> int:
    """Parse a two-decimal currency string such as "35.35" into integer cents.

    Digits are converted exactly, however long the amount is.
    """
    if not isinstance(value, str) or not re.fullmatch(AMOUNT_PATTERN, value):
        raise FieldFormatError(f"{field}: expected a non-negative amount with two decimals, got {value!r}")

    dollars, cents = value.split(".")
    try:
        return int(dollars) * CENTS_PER_DOLLAR + int(cents)
    except ValueError:
        # int() refuses strings past the interpreter's digit limit
        raise FieldFormatError(f"{field}: amount too large")


def parse_date(value: str) -> date_type:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (ValueError, TypeError):
        raise FieldFormatError(f"purchaseDate: expected YYYY-MM-DD, got {value!r}")


def parse_time(value: str) -> time_type:
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except (ValueError, TypeError):
        raise FieldFormatError(f"purchaseTime: expected HH:MM, got {value!r}")


@dataclass(frozen=True)
class Item:
    short_description: str
    price_cents: int


@dataclass(frozen=True)
class Receipt:
    """A stored receipt. Amounts are integer cents; never mutated once built."""

    id: str
    retailer: str
    purchase_date: date_type
    purchase_time: time_type
    total_cents: int
    items: tuple[Item, ...]

    @classmethod
    def from_input(cls, receipt_id: str, data: ReceiptIn) -> "Receipt":
        items = tuple(
            Item(
                short_description=item.short_description,
                price_cents=parse_cents(item.price, f"items[{i}].price"),
            )
            for i, item in enumerate(data.items)
        )
        return cls(
            id=receipt_id,
            retailer=data.retailer,
            purchase_date=parse_date(data.purchase_date),
            purchase_time=parse_time(data.purchase_time),
            total_cents=parse_cents(data.total, "total"),
            items=items,
        )
