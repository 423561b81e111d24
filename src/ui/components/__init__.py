"""Reusable UI components."""
from src.ui.components.stats_card import stats_card
from src.ui.components.helpers import avatar_color, format_money, product_thumbnail

__all__ = ["stats_card", "avatar_color", "format_money", "product_thumbnail"]
