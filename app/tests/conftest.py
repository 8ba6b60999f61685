# tests/conftest.py
import copy

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas import Receipt
from app.store import ScoreStore

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

MM_CORNER_RECEIPT = {
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

@pytest.fixture
def target_receipt():
    return Receipt.model_validate(TARGET_RECEIPT)

@pytest.fixture
def mm_corner_receipt():
    return Receipt.model_validate(MM_CORNER_RECEIPT)

@pytest.fixture
def store(monkeypatch):
    s = ScoreStore()
    monkeypatch.setattr(app.state, "store", s)
    return s

@pytest.fixture
def client(store):
    with TestClient(app) as c:
        yield c

@pytest.fixture
def target_payload():
    return copy.deepcopy(TARGET_RECEIPT)

@pytest.fixture
def mm_corner_payload():
    return copy.deepcopy(MM_CORNER_RECEIPT)
