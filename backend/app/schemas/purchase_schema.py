# backend/app/schemas/purchase_schema.py
"""
Se encarga de definir los esquemas Pydantic para las solicitudes de compra.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime
import enum


class PurchaseStatus(str, enum.Enum):
    """Define los posibles estados de una solicitud de compra."""
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PurchaseItem(BaseModel):
    """Línea congelada de la compra: copia del producto en el momento del checkout."""
    product_id: int = Field(..., description="ID del producto")
    name: str = Field(..., description="Nombre del producto al comprar")
    price: float = Field(..., description="Precio unitario al momento de la compra", ge=0)
    quantity: int = Field(..., description="Cantidad comprada", gt=0)
    total: float = Field(..., description="price * quantity", ge=0)


class PurchaseRequest(BaseModel):
    """Esquema completo de respuesta para una solicitud de compra."""
    id: int
    user_id: Optional[int] = None
    purchase_id: str
    items: List[PurchaseItem] = []
    total_price: float
    status: PurchaseStatus
    discord_notified: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PurchaseBuyer(BaseModel):
    email: str


class AdminPurchaseRequest(PurchaseRequest):
    """Solicitud de compra vista desde el panel, con el email del comprador."""
    user: PurchaseBuyer
