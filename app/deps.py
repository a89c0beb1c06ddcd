import logging

from fastapi import Depends, Request

from app.errors import NotFoundError
from app.logging_config import LOGGER_NAME
from app.models import Receipt
from app.store import ReceiptStore

logger = logging.getLogger(LOGGER_NAME)


def get_store(request: Request) -> ReceiptStore:
    """Return the process-wide store created by create_app()."""
    return request.app.state.store


def get_receipt_by_id(
    receipt_id: str,
    store: ReceiptStore = Depends(get_store),
) -> Receipt:
    receipt = store.get(receipt_id)
    if receipt is None:
        logger.warning("Receipt not found", extra={"extra_data": {"receipt_id": receipt_id}})
        raise NotFoundError(f"No receipt found for id {receipt_id}")
    return receipt
