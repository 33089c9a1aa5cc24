# backend/app/db/models/category_model.py
"""
Se encarga de definir los modelos de categoría y subcategoría para la aplicación.

El catálogo tiene dos niveles fijos: Categoría > Subcategoría > Producto.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.database import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    subcategories = relationship(
        "Subcategory",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Category(id={self.id}, slug='{self.slug}')>"


class Subcategory(Base):
    __tablename__ = "subcategories"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    category = relationship("Category", back_populates="subcategories")
    products = relationship(
        "Product",
        back_populates="subcategory",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        # Un mismo slug puede repetirse bajo categorías distintas
        UniqueConstraint('category_id', 'slug', name='uq_subcategory_category_slug'),
    )

    def __repr__(self):
        return f"<Subcategory(id={self.id}, category_id={self.category_id}, slug='{self.slug}')>"
