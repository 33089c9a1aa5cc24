"""
Endpoints REST para operaciones de categorías.

La lectura es pública (escaparate); la creación y el borrado requieren un administrador.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.api import deps
from app.schemas import category_schema
from app.services.category_service import category_service

router = APIRouter()

@router.post(
    "/",
    response_model=category_schema.CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(deps.get_current_admin)],
)
async def create_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_in: category_schema.CategoryCreate
) -> category_schema.CategoryResponse:
    """Crea una nueva categoría. Sin slug, se deriva del nombre."""
    return await category_service.create_new_category(db=db, category_in=category_in)

@router.delete(
    "/{category_id}",
    response_model=category_schema.CategoryResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
async def delete_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: int,
) -> category_schema.CategoryResponse:
    """Elimina una categoría junto con sus subcategorías."""
    return await category_service.delete_existing_category(db=db, category_id=category_id)

@router.get("/slug/{slug}", response_model=category_schema.CategoryResponse)
async def read_category_by_slug(
    *,
    db: AsyncSession = Depends(deps.get_db),
    slug: str,
) -> category_schema.CategoryResponse:
    return await category_service.get_category_by_slug(db=db, slug=slug)

@router.get("/{category_id}/subcategories", response_model=List[category_schema.SubcategoryResponse])
async def read_category_subcategories(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: int,
) -> List[category_schema.SubcategoryResponse]:
    """Subcategorías de una categoría, ordenadas por nombre."""
    return await category_service.get_subcategories(db=db, category_id=category_id)

@router.get("/{category_id}", response_model=category_schema.CategoryResponse)
async def read_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: int,
) -> category_schema.CategoryResponse:
    """Obtiene los detalles de una categoría específica por su ID."""
    return await category_service.get_category_by_id(db=db, category_id=category_id)

@router.get("/", response_model=List[category_schema.CategoryResponse])
async def read_categories(
    db: AsyncSession = Depends(deps.get_db),
) -> List[category_schema.CategoryResponse]:
    """Obtiene todas las categorías ordenadas por nombre."""
    return await category_service.get_all_categories(db=db)
