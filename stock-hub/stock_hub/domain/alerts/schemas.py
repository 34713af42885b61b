# stock_hub/domain/alerts/schemas.py
from typing import Any, Optional

from stock_hub.core.schemas import CamelSchema
from stock_hub.db.models.alerts import AlertStatus, StockStatus


class AlertUpdate(CamelSchema):
    """Changes to an alert. ``notes`` sent as null clears the notes."""

    status: Optional[AlertStatus] = None
    notes: Optional[str] = None

    @property
    def notes_provided(self) -> bool:
        return "notes" in self.model_fields_set


class AlertFilter(CamelSchema):
    status: Optional[AlertStatus] = None
    stock_status: Optional[StockStatus] = None
    product_id: Optional[Any] = None
    regenerate: bool = False
