# backend/app/crud/user_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo User.

Este módulo proporciona funciones para crear, buscar y cambiar el rol de usuarios.
"""

from typing import List, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.user_model import User


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).filter(User.id == user_id))
    return result.scalars().first()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Busca un usuario por su dirección de correo electrónico de forma asíncrona.
    """
    result = await db.execute(select(User).filter(User.email == email))
    return result.scalars().first()


async def get_users(db: AsyncSession) -> List[User]:
    """Todos los usuarios, los más recientes primero."""
    result = await db.execute(select(User).order_by(User.created_at.desc(), User.id.desc()))
    return result.scalars().all()


async def get_users_by_ids(db: AsyncSession, user_ids: List[int]) -> List[User]:
    if not user_ids:
        return []
    result = await db.execute(select(User).filter(User.id.in_(user_ids)))
    return result.scalars().all()


async def create_user(db: AsyncSession, email: str, password_hash: str, is_admin: bool = False) -> User:
    db_user = User(email=email, password_hash=password_hash, is_admin=is_admin)
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    return db_user


async def count_admins(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(User.id)).filter(User.is_admin.is_(True)))
    return result.scalar_one()


async def set_admin(db: AsyncSession, db_user: User, is_admin: bool) -> User:
    db_user.is_admin = is_admin
    await db.commit()
    await db.refresh(db_user)
    return db_user


async def set_password(db: AsyncSession, db_user: User, password_hash: str) -> User:
    db_user.password_hash = password_hash
    await db.commit()
    await db.refresh(db_user)
    return db_user
