# stock_hub/domain/transfers/service.py
import logging
from typing import Any, Dict, List

from stock_hub.core.clock import parse_iso, utc_now_iso
from stock_hub.core.errors import (
    DestinationWarehouseNotFound,
    InsufficientStock,
    ProductNotFound,
    SourceWarehouseNotFound,
    TransferNotFound,
    ValidationFailed,
)
from stock_hub.core.identifiers import is_integer, new_id, next_sequential_id, parse_int
from stock_hub.db.models.stock import StockRecord
from stock_hub.db.models.transfers import Transfer, TransferMeta, TransferStatus
from stock_hub.db.repositories.catalog import find_product, find_warehouse, get_products, get_warehouses
from stock_hub.db.repositories.stock import find_stock_index, get_stock, quantity_at, save_stock
from stock_hub.db.repositories.transfers import append_transfer, get_transfer_by_id, get_transfers
from stock_hub.db.store import LedgerStore
from .schemas import StockLevel, StockSummary, TransferCreate, TransferFilter, TransferResult

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 200


def validate_transfer_request(data: TransferCreate) -> None:
    """Raise ``ValidationFailed`` listing every problem with ``data``."""
    errors: List[Dict[str, str]] = []

    if not is_integer(data.product_id):
        errors.append({"field": "productId", "message": "Product ID is required and must be an integer"})
    if not is_integer(data.from_warehouse_id):
        errors.append({"field": "fromWarehouseId", "message": "From warehouse ID is required and must be an integer"})
    if not is_integer(data.to_warehouse_id):
        errors.append({"field": "toWarehouseId", "message": "To warehouse ID is required and must be an integer"})
    if not is_integer(data.quantity) or data.quantity <= 0:
        errors.append({"field": "quantity", "message": "Quantity must be a positive integer"})

    if data.note is not None and not isinstance(data.note, str):
        errors.append({"field": "note", "message": "Note must be a string"})

    # raw comparison, so two missing ids also count as the same warehouse
    if data.from_warehouse_id == data.to_warehouse_id:
        errors.append({"field": "toWarehouseId", "message": "To warehouse must be different from source warehouse"})

    if errors:
        raise ValidationFailed(errors)


def execute_transfer(store: LedgerStore, data: TransferCreate) -> TransferResult:
    validate_transfer_request(data)

    product_id = int(data.product_id)
    from_id = int(data.from_warehouse_id)
    to_id = int(data.to_warehouse_id)
    quantity = int(data.quantity)

    product = find_product(get_products(store), product_id)
    if product is None:
        raise ProductNotFound(product_id)

    warehouses = get_warehouses(store)
    from_warehouse = find_warehouse(warehouses, from_id)
    if from_warehouse is None:
        raise SourceWarehouseNotFound(from_id)
    to_warehouse = find_warehouse(warehouses, to_id)
    if to_warehouse is None:
        raise DestinationWarehouseNotFound(to_id)

    stock = get_stock(store)
    available = quantity_at(stock, product_id, from_id)
    if available < quantity:
        logger.warning(
            "Rejected transfer of product %s from %s to %s: available=%s requested=%s",
            product_id, from_id, to_id, available, quantity,
        )
        raise InsufficientStock(available, quantity)

    source_index = find_stock_index(stock, product_id, from_id)
    # available >= quantity > 0, so the source record exists
    source = stock[source_index]
    remaining = source.quantity - quantity
    if remaining > 0:
        stock[source_index] = source.model_copy(update={"quantity": remaining})
    else:
        del stock[source_index]

    dest_index = find_stock_index(stock, product_id, to_id)
    if dest_index is not None:
        dest = stock[dest_index]
        stock[dest_index] = dest.model_copy(update={"quantity": dest.quantity + quantity})
    else:
        stock.append(
            StockRecord(
                id=next_sequential_id(stock),
                product_id=product_id,
                warehouse_id=to_id,
                quantity=quantity,
            )
        )

    # Stock is the source of truth and is written first; the transfer log
    # is an audit trail appended afterwards.
    save_stock(store, stock)

    note = data.note or None
    transfer = Transfer(
        id=new_id(),
        created_at=utc_now_iso(),
        status=TransferStatus.COMPLETED,
        product_id=product_id,
        from_warehouse_id=from_id,
        to_warehouse_id=to_id,
        quantity=quantity,
        note=note,
        product_name=product.name,
        from_warehouse_name=from_warehouse.name,
        to_warehouse_name=to_warehouse.name,
        meta=TransferMeta(reason=note, reference_no=None),
    )
    append_transfer(store, transfer)

    logger.info(
        "Transfer %s completed: %s x product %s from warehouse %s to %s",
        transfer.id, quantity, product_id, from_id, to_id,
    )

    return TransferResult(
        transfer=transfer,
        stock_summary=StockSummary(
            from_warehouse=StockLevel(
                warehouse_id=from_id,
                new_quantity=quantity_at(stock, product_id, from_id),
            ),
            to_warehouse=StockLevel(
                warehouse_id=to_id,
                new_quantity=quantity_at(stock, product_id, to_id),
            ),
        ),
    )


def resolve_limit(raw: Any) -> int:
    """Default 50, capped at 200; non-numeric and non-positive values use the default."""
    limit = parse_int(raw)
    if limit is None or limit <= 0:
        return DEFAULT_LIST_LIMIT
    return min(limit, MAX_LIST_LIMIT)


def list_transfers(store: LedgerStore, filters: TransferFilter) -> List[Transfer]:
    transfers = get_transfers(store)

    # a non-numeric id matches nothing
    if filters.warehouse_id is not None:
        warehouse_id = parse_int(filters.warehouse_id)
        transfers = [
            t for t in transfers
            if warehouse_id is not None and warehouse_id in (t.from_warehouse_id, t.to_warehouse_id)
        ]
    if filters.product_id is not None:
        product_id = parse_int(filters.product_id)
        transfers = [t for t in transfers if product_id is not None and t.product_id == product_id]
    if filters.status:
        transfers = [t for t in transfers if t.status.value == filters.status]

    # sorted() is stable with reverse=True, ties keep insertion order
    transfers = sorted(transfers, key=lambda t: parse_iso(t.created_at), reverse=True)
    return transfers[:resolve_limit(filters.limit)]


def get_transfer(store: LedgerStore, transfer_id: str) -> Transfer:
    transfer = get_transfer_by_id(store, transfer_id)
    if transfer is None:
        raise TransferNotFound(transfer_id)
    return transfer
