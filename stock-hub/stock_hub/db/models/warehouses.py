# stock_hub/db/models/warehouses.py
from stock_hub.db.models.common import LedgerModel


class Warehouse(LedgerModel):
    id: int
    code: str = ""
    name: str
    location: str = ""
