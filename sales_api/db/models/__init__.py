"""
Database models.
"""

from sales_api.db.models.category import Category
from sales_api.db.models.sale import Sale

__all__ = [
    "Category",
    "Sale",
]
