"""Inventory API.

Product catalogue with stock tracking: CRUD over products, guarded stock
adjustments and a low-stock report, served over FastAPI with SQLModel storage.
"""

__version__ = "0.1.0"
