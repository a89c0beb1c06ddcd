from app.models import CENTS_PER_DOLLAR, Item, Receipt
from app.schemas import TIME_FORMAT


def format_cents(cents: int) -> str:
    dollars, remainder = divmod(cents, CENTS_PER_DOLLAR)
    return f"{dollars}.{remainder:02d}"


def serialize_item(item: Item) -> dict:
    return {
        "shortDescription": item.short_description,
        "price": format_cents(item.price_cents),
    }


def serialize_receipt(receipt: Receipt) -> dict:
    return {
        "id": receipt.id,
        "retailer": receipt.retailer,
        "purchaseDate": receipt.purchase_date.isoformat(),
        "purchaseTime": receipt.purchase_time.strftime(TIME_FORMAT),
        "items": [serialize_item(i) for i in receipt.items],
        "total": format_cents(receipt.total_cents),
    }
