import pytest
from fastapi.testclient import TestClient

from stock_hub.db.base import get_store
from stock_hub.db.json_store import JsonFileStore
from stock_hub.db.memory_store import InMemoryStore
from stock_hub.db.store import Collection
from stock_hub.main import app


def seed_ledgers():
    return {
        "products": [
            {"id": 1, "sku": "BSS-001", "name": "Bamboo Spork Set", "category": "Cutlery", "unitCost": 2.5, "reorderPoint": 100},
            {"id": 2, "sku": "RSP-002", "name": "Reusable Straw Pack", "category": "Drinkware", "unitCost": 4.0, "reorderPoint": 100},
            {"id": 3, "sku": "CMP-003", "name": "Compost Bin", "category": "Kitchen", "unitCost": 30.0, "reorderPoint": 50},
            {"id": 4, "sku": "GLJ-004", "name": "Glass Jar", "category": "Storage", "unitCost": 1.25, "reorderPoint": 100},
        ],
        "warehouses": [
            {"id": 1, "code": "MDC", "name": "Main Distribution Center", "location": "Columbus, OH"},
            {"id": 2, "code": "WCF", "name": "West Coast Facility", "location": "Fresno, CA"},
            {"id": 3, "code": "SEH", "name": "Southeast Hub", "location": "Atlanta, GA"},
        ],
        "stock": [
            {"id": 1, "productId": 1, "warehouseId": 1, "quantity": 250},
            {"id": 2, "productId": 1, "warehouseId": 2, "quantity": 150},
            {"id": 3, "productId": 2, "warehouseId": 1, "quantity": 40},
            {"id": 4, "productId": 4, "warehouseId": 2, "quantity": 100},
        ],
    }


@pytest.fixture
def store(tmp_path):
    json_store = JsonFileStore(tmp_path / "data")
    for name, rows in seed_ledgers().items():
        json_store.replace_all(Collection(name), rows)
    return json_store


@pytest.fixture
def memory_store():
    return InMemoryStore(seed_ledgers())


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def stock_quantity(store, product_id, warehouse_id):
    for row in store.load_all(Collection.STOCK):
        if row["productId"] == product_id and row["warehouseId"] == warehouse_id:
            return row["quantity"]
    return None
