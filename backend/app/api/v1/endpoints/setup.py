"""
Alta inicial del administrador de la tienda.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.api import deps
from app.schemas.user_schema import AdminSetup, UserResponse
from app.services.auth_service import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post(
    "/admin",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(deps.verify_admin_token)],
)
async def setup_admin(
    *,
    db: AsyncSession = Depends(deps.get_db),
    setup_in: Optional[AdminSetup] = Body(default=None),
) -> UserResponse:
    """
    Crea o actualiza la cuenta de administrador.

    Requiere la cabecera X-Admin-Token. Sin cuerpo se usan el email y la
    contraseña por defecto de la configuración.
    """
    setup_in = setup_in or AdminSetup()
    logger.info("🔐 SETUP: Preparando cuenta de administrador")
    return await auth_service.setup_admin(db=db, email=setup_in.email, password=setup_in.password)
