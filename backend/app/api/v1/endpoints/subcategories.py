"""
Endpoints REST para subcategorías y los productos que contienen.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.api import deps
from app.schemas import category_schema, product_schema
from app.services.category_service import category_service
from app.services.product_service import product_service

router = APIRouter()

@router.post(
    "/",
    response_model=category_schema.SubcategoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(deps.get_current_admin)],
)
async def create_subcategory(
    *,
    db: AsyncSession = Depends(deps.get_db),
    subcategory_in: category_schema.SubcategoryCreate,
) -> category_schema.SubcategoryResponse:
    """Crea una subcategoría bajo una categoría existente."""
    return await category_service.create_new_subcategory(db=db, subcategory_in=subcategory_in)

@router.delete(
    "/{subcategory_id}",
    response_model=category_schema.SubcategoryResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
async def delete_subcategory(
    *,
    db: AsyncSession = Depends(deps.get_db),
    subcategory_id: int,
) -> category_schema.SubcategoryResponse:
    return await category_service.delete_existing_subcategory(db=db, subcategory_id=subcategory_id)

@router.get("/{subcategory_id}/products", response_model=List[product_schema.ProductResponse])
async def read_subcategory_products(
    *,
    db: AsyncSession = Depends(deps.get_db),
    subcategory_id: int,
    sort_by: str = "newest",
) -> List[product_schema.ProductResponse]:
    """Productos de una subcategoría (404 si la subcategoría no existe)."""
    await category_service.get_subcategory_by_id(db=db, subcategory_id=subcategory_id)
    return await product_service.get_all_products(db=db, limit=1000, subcategory_id=subcategory_id, sort_by=sort_by)

@router.get("/{subcategory_id}", response_model=category_schema.SubcategoryResponse)
async def read_subcategory(
    *,
    db: AsyncSession = Depends(deps.get_db),
    subcategory_id: int,
) -> category_schema.SubcategoryResponse:
    return await category_service.get_subcategory_by_id(db=db, subcategory_id=subcategory_id)

@router.get("/", response_model=List[category_schema.SubcategoryResponse])
async def read_subcategories(
    db: AsyncSession = Depends(deps.get_db),
    category_id: Optional[int] = Query(default=None),
) -> List[category_schema.SubcategoryResponse]:
    """Lista las subcategorías, opcionalmente filtradas por categoría."""
    return await category_service.get_subcategories(db=db, category_id=category_id)
