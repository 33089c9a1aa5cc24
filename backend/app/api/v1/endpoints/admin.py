"""
Endpoints del panel de administración.

Todas las rutas de este router requieren un usuario administrador (cabecera X-User-Id).

Secciones:
- Solicitudes de compra: listado, completar, cancelar
- Notificaciones: listado, marcar como leídas
- Usuarios: listado y gestión del rol de administrador
- Ajustes de la tienda: valores sueltos, rarezas y métodos de pago
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, List, Optional
import logging

from app.api import deps
from app.crud import notification_crud
from app.schemas.notification_schema import NotificationResponse, NotificationsMarked
from app.schemas.purchase_schema import AdminPurchaseRequest, PurchaseRequest, PurchaseStatus
from app.schemas.settings_schema import PaymentMethods, RarityColors, SettingResponse, SettingUpdate
from app.schemas.user_schema import UserResponse
from app.services.auth_service import auth_service
from app.services.purchase_service import purchase_service
from app.services.settings_service import settings_service

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(deps.get_current_admin)])

# ========================================
# SOLICITUDES DE COMPRA
# ========================================

@router.get("/purchases", response_model=List[AdminPurchaseRequest])
async def read_purchase_requests(
    db: AsyncSession = Depends(deps.get_db),
    status_filter: Optional[PurchaseStatus] = None,
):
    """Todas las solicitudes, las más recientes primero, con el email del comprador."""
    return await purchase_service.get_all_with_users(db, status_filter=status_filter)


@router.post("/purchases/{purchase_request_id}/complete", response_model=PurchaseRequest)
async def complete_purchase_request(
    purchase_request_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    logger.info(f"✅ COMPRA: Completando solicitud {purchase_request_id}")
    return await purchase_service.complete_purchase(db, purchase_request_id)


@router.post("/purchases/{purchase_request_id}/cancel", response_model=PurchaseRequest)
async def cancel_purchase_request(
    purchase_request_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    """Cancela una solicitud pendiente y devuelve el stock."""
    logger.info(f"↩️ COMPRA: Cancelando solicitud {purchase_request_id}")
    return await purchase_service.cancel_purchase(db, purchase_request_id)

# ========================================
# NOTIFICACIONES
# ========================================

@router.get("/notifications", response_model=List[NotificationResponse])
async def read_notifications(
    db: AsyncSession = Depends(deps.get_db),
    unread_only: bool = False,
):
    return await notification_crud.get_notifications(db, unread_only=unread_only)


@router.post("/notifications/read-all", response_model=NotificationsMarked)
async def mark_all_notifications_read(
    db: AsyncSession = Depends(deps.get_db),
):
    updated = await notification_crud.mark_all_as_read(db)
    logger.info(f"🔔 AVISOS: {updated} marcados como leídos")
    return NotificationsMarked(updated=updated)


@router.post("/notifications/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    db_notification = await notification_crud.get_notification(db, notification_id=notification_id)
    if not db_notification:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return await notification_crud.mark_as_read(db, db_notification)

# ========================================
# USUARIOS Y ROLES
# ========================================

@router.get("/users", response_model=List[UserResponse])
async def read_users(
    db: AsyncSession = Depends(deps.get_db),
):
    return await auth_service.list_users(db)


@router.post("/users/{user_id}/make-admin", response_model=UserResponse)
async def make_admin(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    logger.info(f"🔐 ROLES: Usuario {user_id} pasa a administrador")
    return await auth_service.make_admin(db, user_id)


@router.post("/users/{user_id}/remove-admin", response_model=UserResponse)
async def remove_admin(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    logger.info(f"🔐 ROLES: Usuario {user_id} deja de ser administrador")
    return await auth_service.remove_admin(db, user_id)

# ========================================
# AJUSTES DE LA TIENDA
# ========================================

@router.get("/settings", response_model=Dict[str, str])
async def read_settings(
    db: AsyncSession = Depends(deps.get_db),
):
    return await settings_service.get_all(db)


@router.put("/settings/rarity-colors", response_model=RarityColors)
async def update_rarity_colors(
    rarity_in: RarityColors,
    db: AsyncSession = Depends(deps.get_db),
):
    """Guarda los colores de cada rareza y su orden de presentación."""
    return await settings_service.update_rarity_colors(db, rarity_in)


@router.put("/settings/payment-methods", response_model=PaymentMethods)
async def update_payment_methods(
    methods_in: PaymentMethods,
    db: AsyncSession = Depends(deps.get_db),
):
    """Activa o desactiva métodos de pago; los no enviados conservan su estado."""
    return await settings_service.update_payment_methods(db, methods_in)


@router.put("/settings/{key}", response_model=SettingResponse)
async def update_setting(
    key: str,
    setting_in: SettingUpdate,
    db: AsyncSession = Depends(deps.get_db),
):
    """Crea o actualiza un ajuste (store_name, currency_symbol, low_stock_threshold...)."""
    return await settings_service.update_setting(db, key=key, value=setting_in.value)
