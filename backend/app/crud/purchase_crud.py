# backend/app/crud/purchase_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo PurchaseRequest.

Este módulo proporciona funciones para crear solicitudes de compra, generar su
identificador legible y actualizar su estado. La creación no hace commit: la
orquestación (stock, notificaciones, carrito) vive en purchase_service.
"""

import random
import string
import time
from typing import List, Optional, Dict, Any
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.purchase_model import PurchaseRequest
from app.schemas.purchase_schema import PurchaseStatus

_PURCHASE_ID_ALPHABET = string.ascii_uppercase + string.digits


def generate_purchase_id() -> str:
    """
    Genera un identificador legible con el formato PUR-<milisegundos>-<9 caracteres base36>.

    Ejemplo: PUR-1718000000000-K3J9Z0QWE
    """
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_PURCHASE_ID_ALPHABET, k=9))
    return f"PUR-{millis}-{suffix}"


async def create_purchase_request(
    db: AsyncSession,
    user_id: int,
    items: List[Dict[str, Any]],
    total_price: float,
) -> PurchaseRequest:
    """
    Añade una solicitud de compra a la sesión (estado pending) y hace flush
    para obtener su ID. El commit lo realiza quien llama.
    """
    db_purchase = PurchaseRequest(
        user_id=user_id,
        purchase_id=generate_purchase_id(),
        items=items,
        total_price=total_price,
        status=PurchaseStatus.PENDING.value,
        discord_notified=False,
    )
    db.add(db_purchase)
    await db.flush()
    return db_purchase


async def get_purchase_request(db: AsyncSession, purchase_request_id: int) -> Optional[PurchaseRequest]:
    """
    Obtiene una solicitud de compra por su ID numérico de forma asíncrona.
    """
    result = await db.execute(select(PurchaseRequest).filter(PurchaseRequest.id == purchase_request_id))
    return result.scalars().first()


async def get_purchase_requests(db: AsyncSession, status: Optional[PurchaseStatus] = None) -> List[PurchaseRequest]:
    """Todas las solicitudes de compra, las más recientes primero."""
    query = select(PurchaseRequest)
    if status is not None:
        query = query.filter(PurchaseRequest.status == status.value)
    query = query.order_by(PurchaseRequest.created_at.desc(), PurchaseRequest.id.desc())
    result = await db.execute(query)
    return result.scalars().all()


async def get_purchase_requests_by_user(db: AsyncSession, user_id: int) -> List[PurchaseRequest]:
    """
    Obtiene el historial de compras de un usuario de forma asíncrona.
    """
    query = (
        select(PurchaseRequest)
        .filter(PurchaseRequest.user_id == user_id)
        .order_by(PurchaseRequest.created_at.desc(), PurchaseRequest.id.desc())
    )
    result = await db.execute(query)
    return result.scalars().all()


def set_status(db_purchase: PurchaseRequest, status: PurchaseStatus) -> PurchaseRequest:
    """Cambia el estado en memoria; el commit lo realiza quien llama."""
    db_purchase.status = status.value
    return db_purchase


async def mark_discord_notified(db: AsyncSession, db_purchase: PurchaseRequest) -> PurchaseRequest:
    db_purchase.discord_notified = True
    await db.commit()
    await db.refresh(db_purchase)
    return db_purchase
