# stock_hub/db/repositories/catalog.py
from typing import List, Optional

from stock_hub.db.models.products import Product
from stock_hub.db.models.warehouses import Warehouse
from stock_hub.db.repositories.common import load_rows
from stock_hub.db.store import Collection, LedgerStore


def get_products(store: LedgerStore) -> List[Product]:
    return load_rows(store, Collection.PRODUCTS, Product)


def get_warehouses(store: LedgerStore) -> List[Warehouse]:
    return load_rows(store, Collection.WAREHOUSES, Warehouse)


def find_product(products: List[Product], product_id: int) -> Optional[Product]:
    return next((p for p in products if p.id == product_id), None)


def find_warehouse(warehouses: List[Warehouse], warehouse_id: int) -> Optional[Warehouse]:
    return next((w for w in warehouses if w.id == warehouse_id), None)
