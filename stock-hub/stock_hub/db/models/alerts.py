# stock_hub/db/models/alerts.py
import enum
from typing import List, Optional

from stock_hub.db.models.common import LedgerModel


class StockStatus(str, enum.Enum):
    CRITICAL = "critical"
    LOW = "low"
    ADEQUATE = "adequate"
    OVERSTOCKED = "overstocked"


class AlertStatus(str, enum.Enum):
    ACTIVE = "active"
    ACKNOWLEDGED = "acknowledged"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


CLOSED_ALERT_STATUSES = (AlertStatus.RESOLVED, AlertStatus.DISMISSED)


class AlertWarehouse(LedgerModel):
    warehouse_id: int
    warehouse_name: str
    warehouse_code: str
    quantity: int


class Alert(LedgerModel):
    """Stock health alert for one product.

    ``stock_status`` is derived from the ledgers on every regeneration while
    ``status`` is owned by the user (acknowledge, resolve, dismiss).
    """

    id: str
    product_id: int
    product_name: str
    product_sku: str
    product_category: str = ""
    reorder_point: int
    current_stock: int
    stock_status: StockStatus
    recommended_reorder_quantity: int = 0
    warehouses: List[AlertWarehouse] = []
    status: AlertStatus = AlertStatus.ACTIVE
    created_at: str
    updated_at: str
    acknowledged_at: Optional[str] = None
    resolved_at: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status not in CLOSED_ALERT_STATUSES
