# stock_hub/api/v1/routes_dashboard.py
from fastapi import APIRouter, Depends

from stock_hub.db.base import get_store
from stock_hub.db.store import LedgerStore
from stock_hub.domain.dashboard.schemas import DashboardSummary
from stock_hub.domain.dashboard.service import dashboard_summary


router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary)
async def dashboard_summary_endpoint(store: LedgerStore = Depends(get_store)):
    return dashboard_summary(store)
