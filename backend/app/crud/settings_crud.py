# backend/app/crud/settings_crud.py
"""
Operaciones CRUD para la tabla clave/valor admin_settings.
"""

from typing import Dict, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.settings_model import AdminSetting


async def get_settings_map(db: AsyncSession) -> Dict[str, str]:
    """Lee toda la tabla en un diccionario clave → valor."""
    result = await db.execute(select(AdminSetting))
    return {row.setting_key: row.setting_value for row in result.scalars().all()}


async def get_setting(db: AsyncSession, key: str) -> Optional[AdminSetting]:
    result = await db.execute(select(AdminSetting).filter(AdminSetting.setting_key == key))
    return result.scalars().first()


async def upsert_setting(db: AsyncSession, key: str, value: str) -> AdminSetting:
    """
    Actualiza el valor de una clave existente o la inserta si no existe.
    """
    db_setting = await get_setting(db, key)
    if db_setting:
        db_setting.setting_value = value
    else:
        db_setting = AdminSetting(setting_key=key, setting_value=value)
        db.add(db_setting)
    await db.commit()
    await db.refresh(db_setting)
    return db_setting
