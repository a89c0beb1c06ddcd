"""Shared test fixtures."""

from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.models import Receipt
from app.schemas import ReceiptIn

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "9.00"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


def build_receipt(payload: dict, receipt_id: str = "test-receipt") -> Receipt:
    """Validate a wire payload and parse it into a Receipt."""
    return Receipt.from_input(receipt_id, ReceiptIn.model_validate(payload))


@pytest.fixture
def target_payload() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_payload() -> dict:
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def app():
    """A fresh application, and so an empty store, per test."""
    return create_app(Settings())


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_receipt():
    return build_receipt
