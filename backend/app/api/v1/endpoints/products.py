# backend/app/api/v1/endpoints/products.py

"""
Endpoints REST para operaciones CRUD, filtros y rebajas de productos.
"""

from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from app.api import deps
from app.schemas import product_schema
from app.services.product_service import product_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post(
    "/",
    response_model=product_schema.ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(deps.get_current_admin)],
)
async def create_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_in: product_schema.ProductCreate,
) -> product_schema.ProductResponse:
    """Crea un nuevo producto en el catálogo."""
    logger.info(f"🆕 PRODUCTO: Creando producto '{product_in.name}'")
    product = await product_service.create_new_product(db=db, product_in=product_in)
    logger.info(f"✅ PRODUCTO: Creado exitosamente ID {product.id}")
    return product


@router.patch(
    "/{product_id}",
    response_model=product_schema.ProductResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
@router.put(
    "/{product_id}",
    response_model=product_schema.ProductResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
async def update_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
    product_in: product_schema.ProductUpdate,
) -> product_schema.ProductResponse:
    """Actualiza un producto existente. Solo se modifican los campos enviados."""
    logger.info(f"🔄 PRODUCTO: Actualizando producto ID {product_id}")
    product = await product_service.update_existing_product(db=db, product_id=product_id, product_in=product_in)
    logger.info(f"✅ PRODUCTO: Actualizado exitosamente ID {product_id}")
    return product


@router.delete(
    "/{product_id}",
    response_model=product_schema.ProductResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
async def delete_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> product_schema.ProductResponse:
    """Elimina un producto del catálogo."""
    logger.info(f"🗑️ PRODUCTO: Eliminando producto ID {product_id}")
    product = await product_service.delete_existing_product(db=db, product_id=product_id)
    logger.info(f"✅ PRODUCTO: Eliminado exitosamente ID {product_id}")
    return product


@router.post(
    "/{product_id}/sale",
    response_model=product_schema.ProductResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
async def add_product_sale(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
    sale_in: product_schema.SaleCreate,
) -> product_schema.ProductResponse:
    """Pone un producto en rebaja con el porcentaje indicado (1-99)."""
    logger.info(f"🏷️ REBAJA: {sale_in.percentage}% al producto ID {product_id}")
    return await product_service.add_sale(db=db, product_id=product_id, percentage=sale_in.percentage)


@router.delete(
    "/{product_id}/sale",
    response_model=product_schema.ProductResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
async def remove_product_sale(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> product_schema.ProductResponse:
    """Quita la rebaja de un producto."""
    logger.info(f"🏷️ REBAJA: Retirada del producto ID {product_id}")
    return await product_service.remove_sale(db=db, product_id=product_id)


@router.get("/{product_id}", response_model=product_schema.ProductResponse)
async def read_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> product_schema.ProductResponse:
    """Obtiene los detalles de un producto por ID."""
    logger.debug(f"🔍 PRODUCTO: Buscando producto ID {product_id}")
    return await product_service.get_product_by_id(db=db, product_id=product_id)


@router.get("/", response_model=List[product_schema.ProductResponse])
async def read_products(
    db: AsyncSession = Depends(deps.get_db),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    subcategory_id: Optional[int] = None,
    category_id: Optional[int] = None,
    name: Optional[str] = None,
    sort_by: str = "newest",
) -> List[product_schema.ProductResponse]:
    """
    Obtiene una lista filtrada y ordenada de productos.

    sort_by: newest (por defecto), name, price, stock o category.
    """
    logger.debug(f"📋 PRODUCTOS: Listando con filtros - skip={skip}, limit={limit}, sort_by={sort_by}")

    products = await product_service.get_all_products(
        db=db, skip=skip, limit=limit, subcategory_id=subcategory_id,
        category_id=category_id, name_like=name, sort_by=sort_by,
    )

    logger.debug(f"📋 PRODUCTOS: Encontrados {len(products)} resultados")
    return products
