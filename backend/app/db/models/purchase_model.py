# backend/app/db/models/purchase_model.py
"""
Este archivo contiene el modelo de solicitud de compra para la aplicación.

Los items se guardan como una instantánea JSON inmutable del carrito en el
momento de la compra (product_id, name, price, quantity, total).
"""

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.database import Base
from app.db.models.product_model import JSONType


class PurchaseRequest(Base):
    __tablename__ = "purchase_requests"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    purchase_id = Column(String(50), unique=True, nullable=False, index=True)
    items = Column(JSONType, nullable=False, default=list)
    total_price = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default='pending')
    discord_notified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="purchase_requests")

    def __repr__(self):
        return f"<PurchaseRequest(id={self.id}, purchase_id='{self.purchase_id}', status='{self.status}')>"
