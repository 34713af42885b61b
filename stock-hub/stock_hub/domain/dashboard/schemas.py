# stock_hub/domain/dashboard/schemas.py
from typing import List

from stock_hub.core.schemas import CamelSchema


class Kpis(CamelSchema):
    total_inventory_value: float
    total_units: int
    product_count: int
    warehouse_count: int
    low_stock_items: int


class WarehouseQuantity(CamelSchema):
    name: str
    code: str
    quantity: int


class WarehouseValue(CamelSchema):
    name: str
    code: str
    value: float


class ProductQuantity(CamelSchema):
    name: str
    sku: str
    quantity: int


class DashboardSummary(CamelSchema):
    kpis: Kpis
    stock_by_warehouse: List[WarehouseQuantity]
    value_by_warehouse: List[WarehouseValue]
    top_products: List[ProductQuantity]
