# backend/app/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza todas las dependencias que pueden ser inyectadas
en los endpoints de la API: la sesión de base de datos y la identificación
del usuario que hace la petición.

Identificación del usuario:
- No hay sesiones ni tokens. El cliente conserva el objeto de usuario devuelto
  por /auth/signin y lo envía en la cabecera X-User-Id.
- Las rutas /users/{user_id} solo las puede usar ese mismo usuario o un administrador.
- Las rutas de administración exigen que ese usuario tenga is_admin = True.
- El alta inicial del administrador se protege con la cabecera X-Admin-Token.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.db.database import AsyncSessionLocal
from app.core.config import settings
from app.crud import user_crud
from app.db.models.user_model import User

logger = logging.getLogger(__name__)

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with AsyncSessionLocal() as session:
        yield session


async def get_current_user(
    x_user_id: Optional[int] = Header(default=None),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Devuelve el usuario indicado en la cabecera X-User-Id.
    """
    if x_user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id header")

    user = await user_crud.get_user(db, user_id=x_user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")
    return user

async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        logger.warning(f"Acceso de administración denegado al usuario {current_user.id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required")
    return current_user

def verify_admin_token(x_admin_token: Optional[str] = Header(default=None)) -> None:
    """
    Valida la cabecera X-Admin-Token contra ADMIN_TOKEN.
    """
    if not x_admin_token or x_admin_token != settings.ADMIN_TOKEN:
        logger.warning("Intento de alta de administrador con token inválido")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid admin token")

async def get_current_owner(user_id: int, current_user: User = Depends(get_current_user)) -> User:
    """
    Permite el acceso a los recursos de /users/{user_id} solo al propio
    usuario o a un administrador.
    """
    if current_user.id != user_id and not current_user.is_admin:
        logger.warning(f"Usuario {current_user.id} intentó acceder a los recursos del usuario {user_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to access this user's resources")
    return current_user
