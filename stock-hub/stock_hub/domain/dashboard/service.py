# stock_hub/domain/dashboard/service.py
from collections import defaultdict
from decimal import Decimal
from typing import Dict

from stock_hub.db.repositories.catalog import get_products, get_warehouses
from stock_hub.db.repositories.stock import get_stock
from stock_hub.db.store import LedgerStore
from .schemas import DashboardSummary, Kpis, ProductQuantity, WarehouseQuantity, WarehouseValue

LOW_STOCK_THRESHOLD = 10
TOP_PRODUCTS = 10


def dashboard_summary(store: LedgerStore) -> DashboardSummary:
    """Headline numbers for the inventory dashboard.

    Stock rows pointing at a product that no longer exists count towards
    units but not towards value.
    """
    products = get_products(store)
    warehouses = get_warehouses(store)
    stock = get_stock(store)

    unit_cost: Dict[int, Decimal] = {p.id: p.unit_cost for p in products}
    units_by_product: Dict[int, int] = defaultdict(int)
    units_by_warehouse: Dict[int, int] = defaultdict(int)
    value_by_warehouse: Dict[int, Decimal] = defaultdict(Decimal)
    total_value = Decimal("0")

    for record in stock:
        units_by_product[record.product_id] += record.quantity
        units_by_warehouse[record.warehouse_id] += record.quantity
        cost = unit_cost.get(record.product_id)
        if cost is not None:
            value = cost * record.quantity
            total_value += value
            value_by_warehouse[record.warehouse_id] += value

    low_stock_items = sum(
        1 for p in products
        if 0 < units_by_product[p.id] <= LOW_STOCK_THRESHOLD
    )

    top_products = sorted(
        (ProductQuantity(name=p.name, sku=p.sku, quantity=units_by_product[p.id]) for p in products),
        key=lambda item: item.quantity,
        reverse=True,
    )[:TOP_PRODUCTS]

    return DashboardSummary(
        kpis=Kpis(
            total_inventory_value=float(total_value),
            total_units=sum(r.quantity for r in stock),
            product_count=len(products),
            warehouse_count=len(warehouses),
            low_stock_items=low_stock_items,
        ),
        stock_by_warehouse=[
            WarehouseQuantity(name=w.name, code=w.code, quantity=units_by_warehouse[w.id])
            for w in warehouses
        ],
        value_by_warehouse=[
            WarehouseValue(name=w.name, code=w.code, value=float(value_by_warehouse[w.id]))
            for w in warehouses
        ],
        top_products=top_products,
    )
