# backend/app/schemas/category_schema.py

"""
Esquemas Pydantic para los modelos Category y Subcategory.

Los esquemas definen la estructura de datos que fluye a través de la API:
- Validación automática de tipos de datos
- Serialización/deserialización JSON
- Documentación automática en OpenAPI/Swagger
- Separación entre modelo de base de datos y API

Patrón de esquemas utilizado:
- XBase: Propiedades comunes compartidas
- XCreate: Para crear nuevos registros (POST)
- XResponse: Para respuestas de la API (GET)

El slug es opcional al crear; si no se envía se deriva del nombre.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# ========================================
# CATEGORÍAS
# ========================================

class CategoryBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de categoría."""
    name: str = Field(..., min_length=1, max_length=255)


class CategoryCreate(CategoryBase):
    """Esquema para crear una nueva categoría."""
    slug: Optional[str] = Field(None, max_length=255)


class CategoryResponse(CategoryBase):
    """Esquema para las respuestas de la API al leer categorías."""
    id: int
    slug: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ========================================
# SUBCATEGORÍAS
# ========================================

class SubcategoryBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de subcategoría."""
    name: str = Field(..., min_length=1, max_length=255)
    category_id: int


class SubcategoryCreate(SubcategoryBase):
    """Esquema para crear una nueva subcategoría bajo una categoría existente."""
    slug: Optional[str] = Field(None, max_length=255)


class SubcategoryResponse(SubcategoryBase):
    """Esquema para las respuestas de la API al leer subcategorías."""
    id: int
    slug: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
