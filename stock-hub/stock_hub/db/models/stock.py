# stock_hub/db/models/stock.py
from stock_hub.db.models.common import LedgerModel


class StockRecord(LedgerModel):
    """On-hand quantity of one product in one warehouse.

    There is at most one record per (product_id, warehouse_id). Transfers
    delete a record instead of leaving it at zero.
    """

    id: int
    product_id: int
    warehouse_id: int
    quantity: int
