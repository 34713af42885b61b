# stock_hub/core/errors.py
from typing import Any, Dict, List, Optional


class StockHubError(Exception):
    """Base class for failures surfaced to API callers.

    Each subclass knows the HTTP status it maps to and how to render its
    response body, so routes can simply let the exception propagate.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationFailed(StockHubError):
    status_code = 400

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class NotFoundError(StockHubError):
    status_code = 404


class ProductNotFound(NotFoundError):
    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class SourceWarehouseNotFound(NotFoundError):
    def __init__(self, warehouse_id: int):
        super().__init__(f"From warehouse with ID {warehouse_id} not found")
        self.warehouse_id = warehouse_id


class DestinationWarehouseNotFound(NotFoundError):
    def __init__(self, warehouse_id: int):
        super().__init__(f"To warehouse with ID {warehouse_id} not found")
        self.warehouse_id = warehouse_id


class TransferNotFound(NotFoundError):
    def __init__(self, transfer_id: str):
        super().__init__("Transfer not found")
        self.transfer_id = transfer_id


class AlertNotFound(NotFoundError):
    def __init__(self, alert_id: str):
        super().__init__("Alert not found")
        self.alert_id = alert_id


class BusinessError(StockHubError):
    status_code = 409


class InsufficientStock(BusinessError):
    def __init__(self, available: int, requested: int):
        super().__init__(
            f"Insufficient stock. Available: {available}, Requested: {requested}"
        )
        self.available = available
        self.requested = requested

    def to_body(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "available": self.available,
            "requested": self.requested,
        }


class StorageFailure(StockHubError):
    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

    def to_body(self) -> Dict[str, Any]:
        # storage details stay in the logs
        return {"message": "Internal server error"}
