"""Stock status thresholds and reorder recommendations."""

import pytest

from stock_hub.db.models.alerts import StockStatus
from stock_hub.domain.alerts.classification import classify_stock, recommend_reorder_quantity


class TestClassifyStock:

    @pytest.mark.parametrize("reorder_point", [1, 8, 100, 5000])
    def test_empty_stock_is_critical(self, reorder_point):
        assert classify_stock(0, reorder_point) == StockStatus.CRITICAL

    @pytest.mark.parametrize("total, expected", [
        (1, StockStatus.CRITICAL),
        (25, StockStatus.CRITICAL),
        (26, StockStatus.LOW),
        (50, StockStatus.LOW),
        (51, StockStatus.ADEQUATE),
        (100, StockStatus.ADEQUATE),
        (150, StockStatus.ADEQUATE),
        (151, StockStatus.OVERSTOCKED),
    ])
    def test_boundaries(self, total, expected):
        assert classify_stock(total, 100) == expected

    def test_quarter_of_small_reorder_point_is_critical(self):
        assert classify_stock(2, 8) == StockStatus.CRITICAL
        assert classify_stock(3, 8) == StockStatus.LOW

    def test_zero_reorder_point_with_stock_is_overstocked(self):
        assert classify_stock(5, 0) == StockStatus.OVERSTOCKED


class TestRecommendReorderQuantity:

    def test_fills_up_to_one_and_a_half_reorder_points(self):
        assert recommend_reorder_quantity(40, 100) == 110

    def test_rounds_target_up(self):
        assert recommend_reorder_quantity(0, 25) == 38

    def test_never_negative(self):
        assert recommend_reorder_quantity(400, 100) == 0
