# stock_hub/api/v1/routes_transfers.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from stock_hub.db.base import get_store
from stock_hub.db.models.transfers import Transfer
from stock_hub.db.store import LedgerStore
from stock_hub.domain.transfers.schemas import TransferCreate, TransferFilter, TransferResult
from stock_hub.domain.transfers.service import execute_transfer, get_transfer, list_transfers


router = APIRouter(prefix="/api/v1/transfers", tags=["transfers"])


@router.post("", response_model=TransferResult, status_code=201)
async def create_transfer_endpoint(
    payload: TransferCreate,
    store: LedgerStore = Depends(get_store),
):
    return execute_transfer(store, payload)


@router.get("", response_model=List[Transfer])
async def list_transfers_endpoint(
    warehouse_id: Optional[str] = Query(None, alias="warehouseId"),
    product_id: Optional[str] = Query(None, alias="productId"),
    status: Optional[str] = None,
    # parsed leniently by the service, junk falls back to the default
    limit: Optional[str] = None,
    store: LedgerStore = Depends(get_store),
):
    filters = TransferFilter(
        warehouse_id=warehouse_id,
        product_id=product_id,
        status=status,
        limit=limit,
    )
    return list_transfers(store, filters)


@router.get("/{transfer_id}", response_model=Transfer)
async def get_transfer_endpoint(
    transfer_id: str,
    store: LedgerStore = Depends(get_store),
):
    return get_transfer(store, transfer_id)
