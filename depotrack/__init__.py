"""Warehouse bookkeeping: products, staff, shipping, storage fees and shelf placement."""

__version__ = "0.1.0"
__all__ = ["product", "staff", "shelving", "warehouse"]