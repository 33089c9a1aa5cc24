# backend/app/crud/image_crud.py
"""
Operaciones CRUD para las imágenes subidas desde el panel de administración.
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.image_model import UploadedImage


async def create_images(db: AsyncSession, rows: List[dict]) -> List[UploadedImage]:
    """Guarda todas las imágenes en una única transacción."""
    db_images = [UploadedImage(**fields) for fields in rows]
    db.add_all(db_images)
    await db.commit()
    for db_image in db_images:
        await db.refresh(db_image)
    return db_images


async def get_images(db: AsyncSession) -> List[UploadedImage]:
    result = await db.execute(
        select(UploadedImage).order_by(UploadedImage.created_at.desc(), UploadedImage.id.desc())
    )
    return result.scalars().all()


async def get_image(db: AsyncSession, image_id: int) -> Optional[UploadedImage]:
    result = await db.execute(select(UploadedImage).filter(UploadedImage.id == image_id))
    return result.scalars().first()


async def delete_image(db: AsyncSession, image_id: int) -> Optional[UploadedImage]:
    db_image = await get_image(db, image_id)
    if db_image:
        await db.delete(db_image)
        await db.commit()
    return db_image
