# backend/app/services/auth_service.py
"""
Servicio de autenticación y gestión de roles.

No hay sesiones ni tokens: el inicio de sesión devuelve el objeto de usuario
y el cliente lo conserva en memoria.
"""

import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.core.config import settings
from app.core.security import get_password_hash, verify_password
from app.crud import user_crud
from app.db.models.user_model import User

logger = logging.getLogger(__name__)


class AuthService:

    async def sign_up(self, db: AsyncSession, email: str, password: str) -> User:
        """
        Registra un usuario con la contraseña hasheada (bcrypt).
        """
        if await user_crud.get_user_by_email(db, email=email):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

        try:
            user = await user_crud.create_user(db, email=email, password_hash=get_password_hash(password))
        except IntegrityError:
            await db.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

        logger.info(f"Usuario registrado: {user.email} (id={user.id})")
        return user

    async def sign_in(self, db: AsyncSession, email: str, password: str) -> User:
        """
        Vuelve a leer el usuario por email y compara la contraseña con el hash.
        El error es el mismo para email desconocido y contraseña incorrecta.
        """
        user = await user_crud.get_user_by_email(db, email=email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Intento de inicio de sesión fallido para {email}")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
        return user

    async def setup_admin(self, db: AsyncSession, email: Optional[str] = None, password: Optional[str] = None) -> User:
        """
        Crea (o actualiza) la cuenta de administrador inicial.

        Si el email ya existe se le asigna la nueva contraseña y el rol de administrador.
        """
        email = email or settings.DEFAULT_ADMIN_EMAIL
        password_hash = get_password_hash(password or settings.DEFAULT_ADMIN_PASSWORD)

        user = await user_crud.get_user_by_email(db, email=email)
        if user:
            await user_crud.set_password(db, user, password_hash)
            user = await user_crud.set_admin(db, user, True)
        else:
            user = await user_crud.create_user(db, email=email, password_hash=password_hash, is_admin=True)

        logger.info(f"Cuenta de administrador preparada: {user.email}")
        return user

    # ========================================
    # ROLES
    # ========================================

    async def list_users(self, db: AsyncSession) -> List[User]:
        return await user_crud.get_users(db)

    async def get_user(self, db: AsyncSession, user_id: int) -> User:
        user = await user_crud.get_user(db, user_id=user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with id {user_id} not found.")
        return user

    async def make_admin(self, db: AsyncSession, user_id: int) -> User:
        user = await self.get_user(db, user_id)
        return await user_crud.set_admin(db, user, True)

    async def remove_admin(self, db: AsyncSession, user_id: int) -> User:
        user = await self.get_user(db, user_id)
        if user.is_admin and await user_crud.count_admins(db) <= 1:
            logger.warning(f"Intento de quitar el rol al último administrador ({user_id})")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Cannot remove the last administrator")
        return await user_crud.set_admin(db, user, False)


auth_service = AuthService()
