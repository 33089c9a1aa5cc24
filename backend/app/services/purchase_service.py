# backend/app/services/purchase_service.py
"""
Servicio de solicitudes de compra.

Flujo de una compra:
1. El carrito del usuario se congela en una instantánea (producto, nombre, precio,
   cantidad, total) y se crea la solicitud con estado 'pending' y un identificador
   legible PUR-<timestamp>-<aleatorio>.
2. Se descuenta el stock de cada producto (sin bajar de cero).
3. Se avisa a los administradores (tabla de notificaciones y, si está configurado, Discord).
4. El pago se completa fuera de la aplicación; un administrador marca la solicitud
   como 'completed' o la cancela ('cancelled'), lo que devuelve el stock.

pending → completed | cancelled. Ambos estados son finales.
"""

import logging
from typing import Any, Dict, List

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.core.config import settings
from app.crud import cart_crud, notification_crud, purchase_crud, stock_crud, user_crud
from app.db.models.purchase_model import PurchaseRequest
from app.schemas.purchase_schema import PurchaseStatus
from app.services.cart_service import cart_service
from app.services.discord_service import discord_notifier
from app.services.settings_service import settings_service

logger = logging.getLogger(__name__)


class PurchaseService:

    def __init__(self, notifier=discord_notifier):
        self.notifier = notifier

    # ========================================
    # CREACIÓN (CHECKOUT)
    # ========================================

    async def create_purchase_request(self, db: AsyncSession, user_id: int) -> PurchaseRequest:
        """
        Convierte el carrito del usuario en una solicitud de compra.

        El pedido, los descuentos de stock, los avisos y el vaciado del carrito
        se confirman en un único commit.
        """
        user = await user_crud.get_user(db, user_id=user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with id {user_id} not found.")

        lines = await cart_service.get_cart_lines(db, user_id)
        if not lines:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cart is empty")

        items: List[Dict[str, Any]] = []
        for line in lines:
            if not line.product.available:
                logger.warning(f"Producto {line.product_id} del carrito de {user_id} ya no existe; se omite")
                continue
            items.append({
                "product_id": line.product_id,
                "name": line.product.name,
                "price": line.product.price,
                "quantity": line.quantity,
                "total": round(line.product.price * line.quantity, 2),
            })

        if not items:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cart has no available products")

        total_price = round(sum(item["total"] for item in items), 2)
        purchase = await purchase_crud.create_purchase_request(db, user_id=user_id, items=items, total_price=total_price)

        threshold = await settings_service.get_low_stock_threshold(db)
        for item in items:
            new_stock = await stock_crud.deduct_stock(db, product_id=item["product_id"], quantity=item["quantity"])
            if new_stock is None:
                logger.warning(f"No se pudo descontar stock del producto {item['product_id']}: no existe")
                continue
            if new_stock <= threshold:
                notification_crud.add_notification(
                    db,
                    type="low_stock",
                    title="Low Stock",
                    message=f"{item['name']} has {new_stock} units left",
                )

        notification_crud.add_notification(
            db,
            type="new_purchase",
            title="New Purchase Request",
            message=f"New purchase request {purchase.purchase_id} for {settings.CURRENCY_SYMBOL}{total_price:.2f} from user ID {user_id}",
        )

        await cart_crud.clear_cart(db, user_id=user_id, commit=False)
        await db.commit()
        await db.refresh(purchase)
        logger.info(f"Solicitud {purchase.purchase_id} creada para el usuario {user_id} ({total_price:.2f})")

        if self.notifier.enabled:
            payload = self.notifier.build_purchase_message(purchase.purchase_id, total_price, user.email, items)
            if await self.notifier.send(payload):
                purchase = await purchase_crud.mark_discord_notified(db, purchase)

        return purchase

    # ========================================
    # CONSULTAS
    # ========================================

    async def get_purchase(self, db: AsyncSession, purchase_request_id: int) -> PurchaseRequest:
        purchase = await purchase_crud.get_purchase_request(db, purchase_request_id=purchase_request_id)
        if not purchase:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Purchase request not found")
        return purchase

    async def get_user_history(self, db: AsyncSession, user_id: int) -> List[PurchaseRequest]:
        if not await user_crud.get_user(db, user_id=user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with id {user_id} not found.")
        return await purchase_crud.get_purchase_requests_by_user(db, user_id=user_id)

    async def get_all_with_users(self, db: AsyncSession, status_filter: PurchaseStatus = None) -> List[Dict[str, Any]]:
        """
        Todas las solicitudes con el email del comprador ("Unknown User" si ya no existe).
        """
        purchases = await purchase_crud.get_purchase_requests(db, status=status_filter)
        user_ids = list({p.user_id for p in purchases if p.user_id is not None})
        users = await user_crud.get_users_by_ids(db, user_ids)
        emails = {user.id: user.email for user in users}

        return [
            {
                "id": p.id,
                "user_id": p.user_id,
                "purchase_id": p.purchase_id,
                "items": p.items,
                "total_price": float(p.total_price),
                "status": p.status,
                "discord_notified": p.discord_notified,
                "created_at": p.created_at,
                "user": {"email": emails.get(p.user_id, "Unknown User")},
            }
            for p in purchases
        ]

    # ========================================
    # TRANSICIONES DE ESTADO
    # ========================================

    def _ensure_pending(self, purchase: PurchaseRequest) -> None:
        if purchase.status != PurchaseStatus.PENDING.value:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Purchase request {purchase.purchase_id} is already {purchase.status}",
            )

    async def complete_purchase(self, db: AsyncSession, purchase_request_id: int) -> PurchaseRequest:
        """
        Marca la compra como completada. El stock ya se descontó al crearla.
        """
        purchase = await self.get_purchase(db, purchase_request_id)
        self._ensure_pending(purchase)

        purchase_crud.set_status(purchase, PurchaseStatus.COMPLETED)
        notification_crud.add_notification(
            db,
            type="purchase_completed",
            title="Purchase Completed",
            message=f"Purchase request ID {purchase.id} has been marked as completed",
        )
        await db.commit()
        await db.refresh(purchase)
        logger.info(f"Solicitud {purchase.purchase_id} completada")
        return purchase

    async def cancel_purchase(self, db: AsyncSession, purchase_request_id: int) -> PurchaseRequest:
        """
        Cancela la compra y devuelve al stock las cantidades de la instantánea.
        """
        purchase = await self.get_purchase(db, purchase_request_id)
        self._ensure_pending(purchase)

        for item in purchase.items or []:
            new_stock = await stock_crud.restore_stock(db, product_id=item["product_id"], quantity=item["quantity"])
            if new_stock is None:
                logger.warning(f"No se pudo restaurar stock del producto {item['product_id']}: no existe")

        purchase_crud.set_status(purchase, PurchaseStatus.CANCELLED)
        notification_crud.add_notification(
            db,
            type="purchase_cancelled",
            title="Purchase Cancelled",
            message=f"Purchase request {purchase.purchase_id} has been cancelled and stock restored",
        )
        await db.commit()
        await db.refresh(purchase)
        logger.info(f"Solicitud {purchase.purchase_id} cancelada, stock restaurado")
        return purchase


purchase_service = PurchaseService()
