import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, Integer, String, Text, Numeric, DateTime
from sqlalchemy.orm import relationship
from marketmate.db.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("low_stock_threshold >= 0", name="ck_products_threshold_non_negative"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(Text, nullable=False)
    description = Column(Text)
    category = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    low_stock_threshold = Column(Integer, nullable=False, default=10)
    # Local wall-clock time; dashboard windows are computed in local time too
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now)

    # Relationships
    sales = relationship("Sale", back_populates="product", passive_deletes="all")
