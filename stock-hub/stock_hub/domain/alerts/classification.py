# stock_hub/domain/alerts/classification.py
import math

from stock_hub.db.models.alerts import StockStatus

CRITICAL_PERCENT = 25
LOW_PERCENT = 50
ADEQUATE_PERCENT = 150
REORDER_TARGET_FACTOR = 1.5


def classify_stock(total_quantity: int, reorder_point: int) -> StockStatus:
    """Classify total on-hand stock against the product's reorder point.

    Empty stock is critical before any percentage is computed. A zero
    reorder point makes any positive stock overstocked.
    """
    if total_quantity == 0:
        return StockStatus.CRITICAL

    if reorder_point == 0:
        percentage = math.inf
    else:
        percentage = total_quantity / reorder_point * 100

    if percentage <= CRITICAL_PERCENT:
        return StockStatus.CRITICAL
    if percentage <= LOW_PERCENT:
        return StockStatus.LOW
    if percentage <= ADEQUATE_PERCENT:
        return StockStatus.ADEQUATE
    return StockStatus.OVERSTOCKED


def recommend_reorder_quantity(total_quantity: int, reorder_point: int) -> int:
    """Units needed to bring stock up to 150% of the reorder point."""
    target = math.ceil(reorder_point * REORDER_TARGET_FACTOR)
    return max(0, target - total_quantity)
