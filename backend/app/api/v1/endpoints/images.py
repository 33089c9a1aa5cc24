"""
Subida de imágenes desde el panel de administración.
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from app.api import deps
from app.db.models.user_model import User
from app.schemas.image_schema import UploadedImageResponse
from app.services.image_service import image_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/", response_model=List[UploadedImageResponse], status_code=status.HTTP_201_CREATED)
async def upload_images(
    files: List[UploadFile] = File(...),
    width: Optional[int] = Form(default=None),
    height: Optional[int] = Form(default=None),
    db: AsyncSession = Depends(deps.get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    """
    Redimensiona y guarda una o varias imágenes (por defecto 400x400).

    Todos los archivos se validan y procesan antes de guardar ninguno:
    si uno no es una imagen legible se rechaza la petición completa.
    """
    uploads = []
    for upload in files:
        data = await upload.read()
        logger.info(f"🖼️ IMAGEN: Procesando {upload.filename} ({len(data)} bytes)")
        uploads.append((upload.filename or "image", upload.content_type, data))

    return await image_service.upload_images(
        db, uploads, width=width, height=height, created_by=current_admin.id
    )


@router.get("/", response_model=List[UploadedImageResponse], dependencies=[Depends(deps.get_current_admin)])
async def read_images(db: AsyncSession = Depends(deps.get_db)):
    return await image_service.get_images(db)


@router.delete("/{image_id}", response_model=UploadedImageResponse, dependencies=[Depends(deps.get_current_admin)])
async def delete_image(image_id: int, db: AsyncSession = Depends(deps.get_db)):
    logger.info(f"🗑️ IMAGEN: Eliminando imagen {image_id}")
    return await image_service.delete_image(db, image_id=image_id)
