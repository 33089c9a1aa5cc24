"""
Ajustes públicos de la tienda, leídos por el escaparate en cada carga de página.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict

from app.api import deps
from app.schemas.settings_schema import PaymentMethods, RarityColors
from app.services.settings_service import settings_service

router = APIRouter()

@router.get("/", response_model=Dict[str, str])
async def read_settings(db: AsyncSession = Depends(deps.get_db)):
    """Mapa completo clave → valor."""
    return await settings_service.get_all(db)


@router.get("/rarity-colors", response_model=RarityColors)
async def read_rarity_colors(db: AsyncSession = Depends(deps.get_db)):
    return await settings_service.get_rarity_colors(db)


@router.get("/payment-methods", response_model=PaymentMethods)
async def read_payment_methods(db: AsyncSession = Depends(deps.get_db)):
    return await settings_service.get_payment_methods(db)
