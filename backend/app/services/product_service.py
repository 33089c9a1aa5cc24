# backend/app/services/product_service.py

"""
Capa de servicios para operaciones de negocio relacionadas con productos.

Esta capa implementa el patrón Service Layer para el dominio de productos,
orquestando operaciones CRUD y aplicando las reglas del catálogo.

Responsabilidades principales:
- Validar que la subcategoría de un producto existe
- Validar criterios de ordenación y límites de paginación
- Gestionar rebajas (activar/desactivar, precio rebajado)
"""

from typing import List, Optional
import logging

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.db.models.product_model import Product
from app.crud import product_crud, category_crud
from app.schemas import product_schema

# Configurar logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Servicio para operaciones de negocio relacionadas con productos.

    Características principales:
    - Gestión de la relación obligatoria con subcategorías
    - Validación de especificaciones (objeto JSON)
    - Rebajas por porcentaje
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_product_by_id(self, db: AsyncSession, product_id: int) -> Product:
        product = await product_crud.get_product(db, product_id=product_id)
        if not product:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        return product

    async def get_all_products(
        self,
        db: AsyncSession,
        skip: int = 0,
        limit: int = 100,
        subcategory_id: Optional[int] = None,
        category_id: Optional[int] = None,
        name_like: Optional[str] = None,
        sort_by: str = "newest",
    ) -> List[Product]:
        """
        Obtiene una lista filtrada de productos con lógica de negocio aplicada.
        """
        if sort_by not in product_crud.SORT_OPTIONS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid sort option '{sort_by}'. Use one of: {', '.join(product_crud.SORT_OPTIONS)}.",
            )

        # Validación de límites de paginación (regla de negocio)
        max_limit = 1000  # Prevenir consultas excesivamente grandes
        if limit > max_limit:
            limit = max_limit

        if name_like is not None:
            name_like = name_like.strip() or None

        return await product_crud.get_products(
            db, skip=skip, limit=limit, subcategory_id=subcategory_id, category_id=category_id,
            name_like=name_like, sort_by=sort_by,
        )

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def _ensure_subcategory(self, db: AsyncSession, subcategory_id: int) -> None:
        subcategory = await category_crud.get_subcategory(db, subcategory_id=subcategory_id)
        if not subcategory:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Subcategory with id {subcategory_id} not found.",
            )

    async def create_new_product(self, db: AsyncSession, product_in: product_schema.ProductCreate) -> Product:
        await self._ensure_subcategory(db, product_in.subcategory_id)
        product = await product_crud.create_product(db, product_data=product_in)
        logger.info(f"Producto {product.id} '{product.name}' creado con stock {product.stock}")
        return product

    async def update_existing_product(self, db: AsyncSession, product_id: int, product_in: product_schema.ProductUpdate) -> Product:
        """
        Actualización parcial: solo se modifican los campos enviados.
        """
        db_product = await self.get_product_by_id(db, product_id)
        update_data = product_in.model_dump(exclude_unset=True)

        for field in ("name", "price", "stock", "subcategory_id", "specifications"):
            if field in update_data and update_data[field] is None:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Field '{field}' cannot be null.",
                )

        if "subcategory_id" in update_data:
            await self._ensure_subcategory(db, update_data["subcategory_id"])

        return await product_crud.update_product(db, db_product, update_data)

    async def delete_existing_product(self, db: AsyncSession, product_id: int) -> Product:
        await self.get_product_by_id(db, product_id)
        return await product_crud.delete_product(db, product_id=product_id)

    # ========================================
    # REBAJAS
    # ========================================

    async def add_sale(self, db: AsyncSession, product_id: int, percentage: int) -> Product:
        db_product = await self.get_product_by_id(db, product_id)
        return await product_crud.set_sale(db, db_product, percentage)

    async def remove_sale(self, db: AsyncSession, product_id: int) -> Product:
        db_product = await self.get_product_by_id(db, product_id)
        return await product_crud.clear_sale(db, db_product)

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

product_service = ProductService()
