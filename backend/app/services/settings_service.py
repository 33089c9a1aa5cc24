# backend/app/services/settings_service.py
"""
Servicio de ajustes de la tienda.

Los ajustes se leen completos en un diccionario clave → valor y se escriben
clave a clave. Los valores estructurados se guardan como JSON serializado:
- rarity_colors: {"legendary": "#F59E0B", ...}
- rarity_order: ["common", "rare", "legendary"]
- payment_methods: {"paypal": true, "crypto": false, ...}
"""

import json
import logging
from typing import Dict, List

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.core.config import settings
from app.crud import settings_crud
from app.schemas.settings_schema import HEX_COLOR_RE, PAYMENT_METHOD_KEYS, PaymentMethods, RarityColors

logger = logging.getLogger(__name__)

RARITY_COLORS_KEY = "rarity_colors"
RARITY_ORDER_KEY = "rarity_order"
PAYMENT_METHODS_KEY = "payment_methods"
LOW_STOCK_THRESHOLD_KEY = "low_stock_threshold"

# Claves con formato propio; solo se escriben desde sus rutas dedicadas
STRUCTURED_KEYS = (RARITY_COLORS_KEY, RARITY_ORDER_KEY, PAYMENT_METHODS_KEY)


def _load_json(raw: str, default):
    if not raw:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Valor JSON inválido en ajustes: {raw!r}")
        return default


class SettingsService:

    async def get_all(self, db: AsyncSession) -> Dict[str, str]:
        return await settings_crud.get_settings_map(db)

    async def update_setting(self, db: AsyncSession, key: str, value: str) -> Dict[str, str]:
        key = key.strip()
        if not key:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Setting key cannot be empty")

        if key in STRUCTURED_KEYS:
            logger.warning(f"Escritura genérica rechazada para el ajuste estructurado {key}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"'{key}' must be updated through /admin/settings/rarity-colors or /admin/settings/payment-methods",
            )

        if key == LOW_STOCK_THRESHOLD_KEY and value:
            try:
                if int(value) < 0:
                    raise ValueError(value)
            except ValueError:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="low_stock_threshold must be a non-negative integer",
                )

        db_setting = await settings_crud.upsert_setting(db, key=key, value=value)
        logger.info(f"Ajuste actualizado: {key} = {value}")
        return {"key": db_setting.setting_key, "value": db_setting.setting_value}

    async def get_low_stock_threshold(self, db: AsyncSession) -> int:
        """Umbral de stock bajo configurado en el panel, o el valor por defecto."""
        db_setting = await settings_crud.get_setting(db, LOW_STOCK_THRESHOLD_KEY)
        if db_setting and db_setting.setting_value:
            try:
                return int(db_setting.setting_value)
            except ValueError:
                logger.warning(f"low_stock_threshold no numérico: {db_setting.setting_value!r}")
        return settings.LOW_STOCK_THRESHOLD

    # ========================================
    # RAREZAS
    # ========================================

    async def get_rarity_colors(self, db: AsyncSession) -> RarityColors:
        """
        Devuelve colores y orden. Las rarezas que no aparecen en el orden
        guardado se añaden al final. Las entradas guardadas que no tienen
        un formato válido se ignoran.
        """
        values = await settings_crud.get_settings_map(db)
        stored_colors = _load_json(values.get(RARITY_COLORS_KEY, ""), {})
        stored_order = _load_json(values.get(RARITY_ORDER_KEY, ""), [])

        colors = {}
        if isinstance(stored_colors, dict):
            for name, color in stored_colors.items():
                key = str(name).strip().lower()
                if key and isinstance(color, str) and HEX_COLOR_RE.match(color):
                    colors[key] = color
        order = []
        if isinstance(stored_order, list):
            order = [name.strip().lower() for name in stored_order if isinstance(name, str)]

        return RarityColors(colors=colors, order=self._complete_order(colors, order))

    async def update_rarity_colors(self, db: AsyncSession, rarity: RarityColors) -> RarityColors:
        order = self._complete_order(rarity.colors, rarity.order)
        await settings_crud.upsert_setting(db, RARITY_COLORS_KEY, json.dumps(rarity.colors))
        await settings_crud.upsert_setting(db, RARITY_ORDER_KEY, json.dumps(order))
        return RarityColors(colors=rarity.colors, order=order)

    def _complete_order(self, colors: Dict[str, str], order: List[str]) -> List[str]:
        ordered = [name for name in order if name in colors]
        ordered += [name for name in colors if name not in ordered]
        return ordered

    # ========================================
    # MÉTODOS DE PAGO
    # ========================================

    async def get_payment_methods(self, db: AsyncSession) -> PaymentMethods:
        values = await settings_crud.get_settings_map(db)
        stored = _load_json(values.get(PAYMENT_METHODS_KEY, ""), {})
        if not isinstance(stored, dict):
            logger.warning(f"payment_methods no es un objeto JSON: {stored!r}")
            stored = {}
        return PaymentMethods(methods={key: bool(stored.get(key, False)) for key in PAYMENT_METHOD_KEYS})

    async def update_payment_methods(self, db: AsyncSession, methods: PaymentMethods) -> PaymentMethods:
        current = await self.get_payment_methods(db)
        merged = {**current.methods, **methods.methods}
        await settings_crud.upsert_setting(db, PAYMENT_METHODS_KEY, json.dumps(merged))
        return PaymentMethods(methods=merged)


settings_service = SettingsService()
