# backend/app/services/image_service.py
"""
Servicio de imágenes subidas desde el panel de administración.

Cada imagen se redimensiona al tamaño pedido (por defecto 400x400), se convierte
a PNG y se guarda en la base de datos como data URL en base64, de forma que la
URL resultante puede usarse directamente como image_url de un producto.
"""

import base64
import io
import logging
import random
import string
import time
from typing import List, Optional, Tuple

from fastapi import HTTPException
from PIL import Image, UnidentifiedImageError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.core.config import settings
from app.crud import image_crud
from app.db.models.image_model import UploadedImage

logger = logging.getLogger(__name__)

OUTPUT_FORMAT = "PNG"
OUTPUT_MIME_TYPE = "image/png"


def build_image_name(original_name: str) -> str:
    """<milisegundos>_<9 caracteres aleatorios>_<nombre original>"""
    millis = int(time.time() * 1000)
    random_id = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"{millis}_{random_id}_{original_name}"


class ImageService:

    def _validate_size(self, width: int, height: int) -> None:
        limit = settings.IMAGE_MAX_DIMENSION
        if not (0 < width <= limit and 0 < height <= limit):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Width and height must be between 1 and {limit}",
            )

    def resize_image(self, data: bytes, width: int, height: int):
        """
        Abre la imagen y la redimensiona exactamente a width x height.

        Returns:
            (bytes PNG, ancho original, alto original)
        """
        try:
            with Image.open(io.BytesIO(data)) as image:
                original_width, original_height = image.size
                if image.mode not in ("RGB", "RGBA"):
                    image = image.convert("RGBA")
                resized = image.resize((width, height), Image.LANCZOS)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.warning(f"No se pudo leer la imagen: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not read image file")

        buffer = io.BytesIO()
        resized.save(buffer, format=OUTPUT_FORMAT)
        return buffer.getvalue(), original_width, original_height

    def prepare_image(
        self,
        filename: str,
        content_type: Optional[str],
        data: bytes,
        width: int,
        height: int,
        created_by: Optional[int] = None,
    ) -> dict:
        """Valida y redimensiona un archivo; devuelve los campos de la fila a guardar."""
        if not content_type or not content_type.startswith("image/"):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{filename} is not an image file")

        png_bytes, original_width, original_height = self.resize_image(data, width, height)
        encoded = base64.b64encode(png_bytes).decode("ascii")
        return {
            "name": build_image_name(filename),
            "original_name": filename,
            "url": f"data:{OUTPUT_MIME_TYPE};base64,{encoded}",
            "original_width": original_width,
            "original_height": original_height,
            "resized_width": width,
            "resized_height": height,
            "file_size": len(png_bytes),
            "mime_type": OUTPUT_MIME_TYPE,
            "created_by": created_by,
        }

    async def upload_images(
        self,
        db: AsyncSession,
        uploads: List[Tuple[str, Optional[str], bytes]],
        width: Optional[int] = None,
        height: Optional[int] = None,
        created_by: Optional[int] = None,
    ) -> List[UploadedImage]:
        """
        Procesa todos los archivos (nombre, content type, bytes) antes de guardar
        ninguno. Si uno falla no se guarda ninguna imagen.
        """
        width = width or settings.IMAGE_DEFAULT_WIDTH
        height = height or settings.IMAGE_DEFAULT_HEIGHT
        self._validate_size(width, height)

        rows = [
            self.prepare_image(filename, content_type, data, width, height, created_by)
            for filename, content_type, data in uploads
        ]
        db_images = await image_crud.create_images(db, rows)
        for db_image in db_images:
            logger.info(
                f"Imagen {db_image.name} guardada "
                f"({db_image.original_width}x{db_image.original_height} -> {width}x{height})"
            )
        return db_images

    async def get_images(self, db: AsyncSession) -> List[UploadedImage]:
        return await image_crud.get_images(db)

    async def delete_image(self, db: AsyncSession, image_id: int) -> UploadedImage:
        db_image = await image_crud.delete_image(db, image_id=image_id)
        if not db_image:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found")
        return db_image


image_service = ImageService()
