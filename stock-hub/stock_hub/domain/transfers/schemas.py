# stock_hub/domain/transfers/schemas.py
from typing import Any, Optional

from stock_hub.core.schemas import CamelSchema
from stock_hub.db.models.transfers import Transfer


class TransferCreate(CamelSchema):
    """Body of a transfer request.

    Identifier and quantity fields are deliberately untyped: the service
    checks them itself so that every bad field is reported in one response.
    """

    product_id: Any = None
    from_warehouse_id: Any = None
    to_warehouse_id: Any = None
    quantity: Any = None
    note: Any = None


class StockLevel(CamelSchema):
    warehouse_id: int
    new_quantity: int


class StockSummary(CamelSchema):
    from_warehouse: StockLevel
    to_warehouse: StockLevel


class TransferResult(CamelSchema):
    transfer: Transfer
    stock_summary: StockSummary


class TransferFilter(CamelSchema):
    warehouse_id: Optional[Any] = None
    product_id: Optional[Any] = None
    status: Optional[str] = None
    limit: Optional[Any] = None
