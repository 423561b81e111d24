"""Stock-level flag for a product."""
from src.models.product import StockFlag


def classify(stock: int, low_stock_threshold: int) -> StockFlag:
    """Map a stock count and its low-stock threshold to a StockFlag.

    Rules are checked in order: nothing (or negative) on hand is
    Out of Stock, at or below the threshold is Low Stock, anything
    else is In Stock.
    """
    if stock <= 0:
        return StockFlag.OUT_OF_STOCK
    if stock <= low_stock_threshold:
        return StockFlag.LOW_STOCK
    return StockFlag.IN_STOCK
