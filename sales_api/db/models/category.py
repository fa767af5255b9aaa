"""
Database model for categories.
"""

from sqlalchemy import Column, Integer, Text

from sales_api.db.session import Base


class Category(Base):
    """
    Database model for categories.
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
