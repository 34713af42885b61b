# stock_hub/db/models/transfers.py
import enum
from typing import Optional

from pydantic import Field

from stock_hub.db.models.common import LedgerModel


class TransferStatus(str, enum.Enum):
    COMPLETED = "completed"
    FAILED = "failed"


class TransferMeta(LedgerModel):
    reason: Optional[str] = None
    reference_no: Optional[str] = None


class Transfer(LedgerModel):
    """Append-only audit entry for one stock movement.

    Product and warehouse names are copied at creation time so that the
    history still reads correctly after later renames or deletions.
    """

    id: str
    created_at: str
    status: TransferStatus = TransferStatus.COMPLETED
    product_id: int
    from_warehouse_id: int
    to_warehouse_id: int
    quantity: int
    note: Optional[str] = None
    product_name: str = ""
    from_warehouse_name: str = ""
    to_warehouse_name: str = ""
    created_by: str = "system"
    meta: TransferMeta = Field(default_factory=TransferMeta)
