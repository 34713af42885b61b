# stock_hub/db/models/products.py
from decimal import Decimal

from stock_hub.db.models.common import LedgerModel


class Product(LedgerModel):
    """A catalog entry. Read-only for the core; edited by the CRUD screens."""

    id: int
    sku: str
    name: str
    category: str = ""
    unit_cost: Decimal = Decimal("0")
    reorder_point: int = 0
