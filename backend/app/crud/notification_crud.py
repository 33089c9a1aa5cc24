# backend/app/crud/notification_crud.py
"""
Operaciones CRUD para el modelo Notification (registro de avisos para administradores).
"""

from typing import List, Optional
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.notification_model import Notification


def add_notification(db: AsyncSession, type: str, title: str, message: str) -> Notification:
    """Añade un aviso a la sesión; se persiste con el commit de quien llama."""
    db_notification = Notification(type=type, title=title, message=message, is_read=False)
    db.add(db_notification)
    return db_notification


async def get_notifications(db: AsyncSession, unread_only: bool = False) -> List[Notification]:
    query = select(Notification)
    if unread_only:
        query = query.filter(Notification.is_read.is_(False))
    query = query.order_by(Notification.created_at.desc(), Notification.id.desc())
    result = await db.execute(query)
    return result.scalars().all()


async def get_notification(db: AsyncSession, notification_id: int) -> Optional[Notification]:
    result = await db.execute(select(Notification).filter(Notification.id == notification_id))
    return result.scalars().first()


async def mark_as_read(db: AsyncSession, db_notification: Notification) -> Notification:
    db_notification.is_read = True
    await db.commit()
    await db.refresh(db_notification)
    return db_notification


async def mark_all_as_read(db: AsyncSession) -> int:
    result = await db.execute(
        update(Notification).where(Notification.is_read.is_(False)).values(is_read=True)
    )
    await db.commit()
    return result.rowcount or 0
