# backend/app/schemas/product_schema.py
"""
Esquemas Pydantic para el modelo Product.

Se encarga de definir los esquemas de creación, actualización, respuesta
y rebajas de productos.
"""

from datetime import datetime
from typing import Optional, Any, Dict
from pydantic import BaseModel, validator, Field, ConfigDict, computed_field
import json

# Umbral del aviso "Only N left!" del escaparate
LOW_STOCK_BADGE = 5


def _parse_specifications(value):
    """Permite que las especificaciones se reciban como un string JSON y lo parsea."""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            raise ValueError("Invalid JSON in specifications")
    if value is not None and not isinstance(value, dict):
        raise ValueError("Specifications must be a JSON object")
    return value


# ========================================
# ESQUEMA BASE
# ========================================

class ProductBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de producto."""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    image_url: Optional[str] = None
    subcategory_id: int
    specifications: Dict[str, Any] = {}
    stock: int = Field(..., ge=0)


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ProductCreate(ProductBase):
    """Esquema para crear un nuevo producto."""

    @validator('specifications', pre=True, allow_reuse=True)
    def parse_specifications(cls, value):
        if value is None:
            return {}
        return _parse_specifications(value)


class ProductUpdate(BaseModel):
    """Esquema para actualizar un producto. Todos los campos son opcionales."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = None
    subcategory_id: Optional[int] = None
    specifications: Optional[Dict[str, Any]] = None
    stock: Optional[int] = Field(None, ge=0)

    @validator('specifications', pre=True, allow_reuse=True)
    def parse_specifications_optional(cls, value):
        """Validador de especificaciones para actualizaciones parciales."""
        if value is None:
            return None
        return _parse_specifications(value)


class SaleCreate(BaseModel):
    """Porcentaje de descuento de una rebaja."""
    percentage: int = Field(..., ge=1, le=99)


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class ProductResponse(ProductBase):
    """
    Esquema de respuesta para un producto, con los campos de rebaja
    y los derivados que usa el escaparate.
    """
    id: int
    sale_active: bool = False
    sale_percentage: int = 0
    sale_price: Optional[float] = None
    effective_price: float
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def low_stock(self) -> bool:
        return self.stock <= LOW_STOCK_BADGE and not self.sale_active

    @computed_field
    @property
    def out_of_stock(self) -> bool:
        return self.stock == 0
