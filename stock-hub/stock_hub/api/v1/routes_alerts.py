# stock_hub/api/v1/routes_alerts.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from stock_hub.db.base import get_store
from stock_hub.db.models.alerts import Alert, AlertStatus, StockStatus
from stock_hub.db.store import LedgerStore
from stock_hub.domain.alerts.schemas import AlertFilter, AlertUpdate
from stock_hub.domain.alerts.service import (
    dismiss_alert,
    get_alert,
    list_alerts,
    regenerate_alerts,
    update_alert,
)


router = APIRouter(prefix="/api/v1/alerts", tags=["alerts"])


@router.get("", response_model=List[Alert])
async def list_alerts_endpoint(
    status: Optional[AlertStatus] = None,
    stock_status: Optional[StockStatus] = Query(None, alias="stockStatus"),
    product_id: Optional[str] = Query(None, alias="productId"),
    regenerate: Optional[str] = None,
    store: LedgerStore = Depends(get_store),
):
    filters = AlertFilter(
        status=status,
        stock_status=stock_status,
        product_id=product_id,
        regenerate=regenerate == "true",
    )
    return list_alerts(store, filters)


@router.post("/regenerate", response_model=List[Alert])
async def regenerate_alerts_endpoint(store: LedgerStore = Depends(get_store)):
    return regenerate_alerts(store)


@router.get("/{alert_id}", response_model=Alert)
async def get_alert_endpoint(alert_id: str, store: LedgerStore = Depends(get_store)):
    return get_alert(store, alert_id)


@router.put("/{alert_id}", response_model=Alert)
async def update_alert_endpoint(
    alert_id: str,
    payload: AlertUpdate,
    store: LedgerStore = Depends(get_store),
):
    return update_alert(store, alert_id, payload)


@router.delete("/{alert_id}", response_model=Alert)
async def dismiss_alert_endpoint(alert_id: str, store: LedgerStore = Depends(get_store)):
    return dismiss_alert(store, alert_id)
