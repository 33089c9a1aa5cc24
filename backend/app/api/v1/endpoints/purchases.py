"""
Endpoints de solicitudes de compra del lado del cliente: checkout e historial.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.api import deps
from app.schemas.purchase_schema import PurchaseRequest
from app.services.purchase_service import purchase_service

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(deps.get_current_owner)])

@router.post("/{user_id}/purchases", response_model=PurchaseRequest, status_code=status.HTTP_201_CREATED)
async def create_purchase_request(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    """
    Convierte el carrito en una solicitud de compra pendiente.

    Descuenta el stock, avisa a los administradores y vacía el carrito.
    El pago se completa después fuera de la tienda.
    """
    logger.info(f"🧾 COMPRA: Usuario {user_id} inicia checkout")
    purchase = await purchase_service.create_purchase_request(db, user_id)
    logger.info(f"✅ COMPRA: Solicitud {purchase.purchase_id} creada")
    return purchase


@router.get("/{user_id}/purchases", response_model=List[PurchaseRequest])
async def read_purchase_history(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    """Historial de compras del usuario, las más recientes primero."""
    return await purchase_service.get_user_history(db, user_id)
