from sqlalchemy import Column, ForeignKey, String, DateTime, Numeric
from sqlalchemy.orm import relationship
from storefront.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    billing_name = Column(String(100), nullable=False)
    billing_phone = Column(String(30), nullable=False)
    billing_address = Column(String(500), nullable=False)
    order_date = Column(DateTime(timezone=True), nullable=False)
    delivered_date = Column(DateTime(timezone=True), nullable=True)
    payment_status = Column(String(30), nullable=False, default="NOTPAID")  # NOTPAID, PAID
    order_status = Column(String(30), nullable=False, default="PENDING")  # PENDING, DISPATCHED, DELIVERED
    order_amount = Column(Numeric(12, 2), nullable=False)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )
