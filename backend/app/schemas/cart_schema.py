# backend/app/schemas/cart_schema.py
"""
Esquemas Pydantic para la gestión del carrito de la compra.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class CartItemCreate(BaseModel):
    """Esquema para añadir un producto al carrito."""
    product_id: int
    quantity: int = Field(default=1, ge=1)


class CartItemUpdate(BaseModel):
    """Nueva cantidad de una línea. Cero o menos elimina la línea."""
    quantity: int


class CartProduct(BaseModel):
    """Datos del producto que acompañan a cada línea del carrito."""
    id: int
    name: str
    price: float
    image_url: Optional[str] = None
    stock: int
    available: bool = True


class CartItemResponse(BaseModel):
    """Una línea del carrito con su producto y el subtotal."""
    id: int
    user_id: int
    product_id: int
    quantity: int
    created_at: Optional[datetime] = None
    product: CartProduct
    total: float


class Cart(BaseModel):
    """Esquema que representa el estado completo del carrito."""
    items: List[CartItemResponse]
    item_count: int
    total_price: float


class CartCount(BaseModel):
    """Número de unidades en el carrito (icono de la cabecera)."""
    count: int
