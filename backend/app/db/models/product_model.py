# backend/app/db/models/product_model.py
from sqlalchemy import Column, Integer, String, ForeignKey, Text, Numeric, Boolean, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from app.db.database import Base

# JSONB en PostgreSQL, JSON genérico en el resto de motores (tests con SQLite)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(Text, nullable=True)
    specifications = Column(JSONType, nullable=False, default=dict)
    stock = Column(Integer, nullable=False, default=0)

    # Rebajas gestionadas desde el panel de administración
    sale_active = Column(Boolean, nullable=False, default=False)
    sale_percentage = Column(Integer, nullable=False, default=0)
    sale_price = Column(Numeric(10, 2), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    subcategory = relationship("Subcategory", back_populates="products")

    @property
    def effective_price(self) -> float:
        """Precio que paga el cliente: el rebajado si hay una rebaja activa."""
        if self.sale_active and self.sale_price is not None:
            return float(self.sale_price)
        return float(self.price) if self.price is not None else 0.0

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
