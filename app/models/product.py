from sqlalchemy import Column, Integer, String

from app.core.constants import PRODUCT_TABLE
from app.database.base import Base


class Product(Base):
    __tablename__ = PRODUCT_TABLE
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String)
    quantity = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    description = Column(String)

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r})"


__all__ = ["Product"]
