# stock_hub/db/repositories/stock.py
from typing import List, Optional

from stock_hub.db.models.stock import StockRecord
from stock_hub.db.repositories.common import load_rows, save_rows
from stock_hub.db.store import Collection, LedgerStore


def get_stock(store: LedgerStore) -> List[StockRecord]:
    return load_rows(store, Collection.STOCK, StockRecord)


def save_stock(store: LedgerStore, records: List[StockRecord]) -> None:
    save_rows(store, Collection.STOCK, records)


def find_stock_index(
    records: List[StockRecord],
    product_id: int,
    warehouse_id: int,
) -> Optional[int]:
    for index, record in enumerate(records):
        if record.product_id == product_id and record.warehouse_id == warehouse_id:
            return index
    return None


def quantity_at(records: List[StockRecord], product_id: int, warehouse_id: int) -> int:
    index = find_stock_index(records, product_id, warehouse_id)
    return records[index].quantity if index is not None else 0
