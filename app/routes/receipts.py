import logging

from fastapi import APIRouter, Depends, Request

from app.deps import get_receipt_by_id, get_store
from app.logging_config import LOGGER_NAME
from app.models import Receipt, new_uuid
from app.points import calculate_points
from app.ratelimit import limiter, process_rate_limit
from app.schemas import ReceiptIn
from app.serializers import serialize_receipt
from app.store import ReceiptStore

logger = logging.getLogger(LOGGER_NAME)
router = APIRouter()


@router.get("/")
def list_receipts(store: ReceiptStore = Depends(get_store)):
    return [serialize_receipt(r) for r in store.iterate()]


@router.post("/receipts/process")
@limiter.limit(process_rate_limit)
def process_receipt(
    request: Request,
    data: ReceiptIn,
    store: ReceiptStore = Depends(get_store),
):
    receipt = Receipt.from_input(new_uuid(), data)

    # Insert last: nothing above may leave a partial receipt behind
    store.put(receipt.id, receipt)

    logger.info(
        "Receipt stored",
        extra={"extra_data": {"receipt_id": receipt.id, "items_count": len(receipt.items)}},
    )
    return {"id": receipt.id}


@router.get("/receipts/{receipt_id}/points")
def get_points(receipt: Receipt = Depends(get_receipt_by_id)):
    points = calculate_points(receipt)
    logger.info(
        "Points calculated",
        extra={"extra_data": {"receipt_id": receipt.id, "points": points}},
    )
    return {"points": points}
