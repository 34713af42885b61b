# stock_hub/domain/alerts/service.py
import logging
from typing import Dict, List, Optional

from stock_hub.core.clock import utc_now_iso
from stock_hub.core.errors import AlertNotFound
from stock_hub.core.identifiers import new_id, parse_int
from stock_hub.db.models.alerts import Alert, AlertStatus, AlertWarehouse, StockStatus
from stock_hub.db.models.products import Product
from stock_hub.db.models.stock import StockRecord
from stock_hub.db.models.warehouses import Warehouse
from stock_hub.db.repositories.alerts import get_alert_by_id, get_alerts, save_alerts
from stock_hub.db.repositories.catalog import find_warehouse, get_products, get_warehouses
from stock_hub.db.repositories.stock import get_stock
from stock_hub.db.store import LedgerStore
from .classification import classify_stock, recommend_reorder_quantity
from .schemas import AlertFilter, AlertUpdate

logger = logging.getLogger(__name__)

SEVERITY_ORDER = {
    StockStatus.CRITICAL: 0,
    StockStatus.LOW: 1,
    StockStatus.OVERSTOCKED: 2,
}


def sort_alerts(alerts: List[Alert]) -> List[Alert]:
    """Most severe first, then the emptiest product first."""
    return sorted(
        alerts,
        key=lambda a: (SEVERITY_ORDER.get(a.stock_status, len(SEVERITY_ORDER)), a.current_stock),
    )


def _warehouse_breakdown(
    product_stock: List[StockRecord],
    warehouses: List[Warehouse],
) -> List[AlertWarehouse]:
    breakdown = []
    for record in product_stock:
        warehouse = find_warehouse(warehouses, record.warehouse_id)
        breakdown.append(
            AlertWarehouse(
                warehouse_id=record.warehouse_id,
                warehouse_name=warehouse.name if warehouse else "Unknown",
                warehouse_code=warehouse.code if warehouse else "",
                quantity=record.quantity,
            )
        )
    return breakdown


def _build_alert(
    product: Product,
    product_stock: List[StockRecord],
    warehouses: List[Warehouse],
    total_quantity: int,
    stock_status: StockStatus,
    previous: Optional[Alert],
    now: str,
) -> Alert:
    if stock_status == StockStatus.OVERSTOCKED:
        recommended = 0
    else:
        recommended = recommend_reorder_quantity(total_quantity, product.reorder_point)

    return Alert(
        id=previous.id if previous else new_id(),
        product_id=product.id,
        product_name=product.name,
        product_sku=product.sku,
        product_category=product.category,
        reorder_point=product.reorder_point,
        current_stock=total_quantity,
        stock_status=stock_status,
        recommended_reorder_quantity=recommended,
        warehouses=_warehouse_breakdown(product_stock, warehouses),
        status=previous.status if previous else AlertStatus.ACTIVE,
        created_at=previous.created_at if previous else now,
        updated_at=now,
        acknowledged_at=previous.acknowledged_at if previous else None,
        resolved_at=previous.resolved_at if previous else None,
        notes=previous.notes if previous else None,
    )


def regenerate_alerts(store: LedgerStore) -> List[Alert]:
    """Rebuild the alert list from current stock and persist it.

    Each product keeps at most one open alert. An open alert whose stock
    status has not changed is carried over untouched; one whose status
    changed keeps its identity and user-set fields but gets fresh stock
    figures. Resolved and dismissed alerts are never revived: a product
    that is still unhealthy gets a new alert instead. Healthy products drop
    out of the list.
    """
    products = get_products(store)
    stock = get_stock(store)
    warehouses = get_warehouses(store)

    open_alerts: Dict[int, Alert] = {}
    for alert in get_alerts(store):
        if alert.is_open:
            open_alerts[alert.product_id] = alert

    now = utc_now_iso()
    alerts: List[Alert] = []
    for product in products:
        product_stock = [s for s in stock if s.product_id == product.id]
        total_quantity = sum(s.quantity for s in product_stock)
        stock_status = classify_stock(total_quantity, product.reorder_point)
        if stock_status == StockStatus.ADEQUATE:
            continue

        previous = open_alerts.get(product.id)
        if previous is not None and previous.stock_status == stock_status:
            alerts.append(previous)
            continue

        alerts.append(
            _build_alert(product, product_stock, warehouses, total_quantity, stock_status, previous, now)
        )

    save_alerts(store, alerts)
    logger.info("Regenerated alerts: %d products need attention", len(alerts))
    return sort_alerts(alerts)


def list_alerts(store: LedgerStore, filters: AlertFilter) -> List[Alert]:
    if filters.regenerate:
        alerts = regenerate_alerts(store)
    else:
        alerts = get_alerts(store)

    if filters.status:
        alerts = [a for a in alerts if a.status == filters.status]
    if filters.stock_status:
        alerts = [a for a in alerts if a.stock_status == filters.stock_status]
    if filters.product_id is not None:
        product_id = parse_int(filters.product_id)
        alerts = [a for a in alerts if product_id is not None and a.product_id == product_id]

    return sort_alerts(alerts)


def get_alert(store: LedgerStore, alert_id: str) -> Alert:
    alert = get_alert_by_id(store, alert_id)
    if alert is None:
        raise AlertNotFound(alert_id)
    return alert


def update_alert(store: LedgerStore, alert_id: str, changes: AlertUpdate) -> Alert:
    alerts = get_alerts(store)
    index = next((i for i, a in enumerate(alerts) if a.id == alert_id), None)
    if index is None:
        raise AlertNotFound(alert_id)

    alert = alerts[index]
    now = utc_now_iso()
    update = {"updated_at": now}

    if changes.status is not None:
        update["status"] = changes.status
        # first transition only, repeats keep the original time
        if changes.status == AlertStatus.ACKNOWLEDGED and not alert.acknowledged_at:
            update["acknowledged_at"] = now
        if changes.status == AlertStatus.RESOLVED and not alert.resolved_at:
            update["resolved_at"] = now
    if changes.notes_provided:
        update["notes"] = changes.notes

    alerts[index] = alert.model_copy(update=update)
    save_alerts(store, alerts)

    logger.info("Alert %s updated: status=%s", alert_id, alerts[index].status.value)
    return alerts[index]


def dismiss_alert(store: LedgerStore, alert_id: str) -> Alert:
    """Soft delete: the alert stays in the collection as ``dismissed``."""
    return update_alert(store, alert_id, AlertUpdate(status=AlertStatus.DISMISSED))
