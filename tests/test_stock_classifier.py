"""Tests for the stock classifier."""
import pytest

from src.models.product import Product, StockFlag
from src.services.stock_classifier import classify


@pytest.mark.parametrize(
    "stock, threshold, expected",
    [
        (0, 5, StockFlag.OUT_OF_STOCK),
        (-3, 5, StockFlag.OUT_OF_STOCK),
        (3, 5, StockFlag.LOW_STOCK),
        (5, 5, StockFlag.LOW_STOCK),
        (6, 5, StockFlag.IN_STOCK),
        (1, 0, StockFlag.IN_STOCK),
    ],
)
def test_classify(stock, threshold, expected):
    assert classify(stock, threshold) == expected


def test_product_exposes_stock_flag(make_product):
    product = Product.from_dict(make_product(1, stock=2, lowStockThreshold=5))
    assert product.stock_flag == StockFlag.LOW_STOCK
