"""
Endpoints de registro e inicio de sesión.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.api import deps
from app.schemas.user_schema import UserCreate, UserCredentials, UserResponse
from app.services.auth_service import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    *,
    db: AsyncSession = Depends(deps.get_db),
    user_in: UserCreate,
) -> UserResponse:
    """Registra un nuevo usuario (409 si el email ya existe)."""
    logger.info(f"👤 AUTH: Registro de {user_in.email}")
    return await auth_service.sign_up(db=db, email=user_in.email, password=user_in.password)


@router.post("/signin", response_model=UserResponse)
async def sign_in(
    *,
    db: AsyncSession = Depends(deps.get_db),
    credentials: UserCredentials,
) -> UserResponse:
    """
    Comprueba las credenciales y devuelve el usuario.

    El cliente conserva este objeto y envía su id en la cabecera X-User-Id.
    """
    return await auth_service.sign_in(db=db, email=credentials.email, password=credentials.password)
