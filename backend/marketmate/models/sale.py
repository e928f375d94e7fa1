from datetime import datetime

from sqlalchemy import CheckConstraint, Column, Integer, String, Text, Numeric, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from marketmate.db.database import Base
from marketmate.models.product import generate_id


class Sale(Base):
    __tablename__ = "sales"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_sales_quantity_positive"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    product_id = Column(
        String(36), ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(Text, nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.now, index=True)

    # Relationships
    product = relationship("Product", back_populates="sales")
