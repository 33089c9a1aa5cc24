# backend/app/schemas/image_schema.py
"""
Se encarga de definir los esquemas Pydantic para las imágenes subidas desde el panel.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

# ========================================
# ESQUEMA BASE
# ========================================

class UploadedImageBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de imagen."""
    name: str
    original_name: str
    original_width: int
    original_height: int
    resized_width: int
    resized_height: int
    file_size: Optional[int] = None
    mime_type: Optional[str] = None


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class UploadedImageResponse(UploadedImageBase):
    """Esquema para las respuestas de la API al leer imágenes."""
    id: int
    url: str  # data URL en base64, usable directamente como image_url de un producto
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)  # Permite que Pydantic lea datos directamente desde modelos SQLAlchemy
