"""
Database model for sales.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, func

from sales_api.db.session import Base


def utcnow() -> datetime:
    """Naive UTC timestamp, the clock for every ``created_at`` the application writes."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Sale(Base):
    """
    A single recorded sale. Rows are immutable once inserted.
    """

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    value = Column(Numeric(10, 2), nullable=False)
    # server_default only covers rows inserted outside the application
    created_at = Column(DateTime, nullable=False, default=utcnow, server_default=func.now())
