# backend/app/schemas/settings_schema.py
"""
Esquemas Pydantic para los ajustes de la tienda.

Los ajustes se almacenan como texto; los estructurados (rarezas y métodos de pago)
tienen su propio esquema y se serializan a JSON antes de guardarse.
"""

import re
from typing import Dict, List
from pydantic import BaseModel, Field, validator

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

# Métodos de pago que el panel permite activar
PAYMENT_METHOD_KEYS = ("paypal", "crypto", "gift_cards", "bank_transfer", "cash_app")


class SettingUpdate(BaseModel):
    """Nuevo valor para una clave de ajustes."""
    value: str = ""


class SettingResponse(BaseModel):
    key: str
    value: str


class RarityColors(BaseModel):
    """Colores por rareza y orden de presentación."""
    colors: Dict[str, str] = {}
    order: List[str] = []

    @validator('colors', pre=True, allow_reuse=True)
    def normalize_colors(cls, value):
        normalized = {}
        for name, color in (value or {}).items():
            key = str(name).strip().lower()
            if not key:
                raise ValueError("Rarity name cannot be empty")
            if not HEX_COLOR_RE.match(str(color)):
                raise ValueError(f"Invalid color for rarity '{key}': {color}")
            normalized[key] = color
        return normalized

    @validator('order', pre=True, allow_reuse=True)
    def normalize_order(cls, value):
        return [str(name).strip().lower() for name in (value or [])]


class PaymentMethods(BaseModel):
    """Estado activado/desactivado de cada método de pago."""
    methods: Dict[str, bool] = Field(default_factory=dict)

    @validator('methods', allow_reuse=True)
    def known_methods(cls, value):
        unknown = [key for key in value if key not in PAYMENT_METHOD_KEYS]
        if unknown:
            raise ValueError(f"Unknown payment methods: {', '.join(unknown)}")
        return value
