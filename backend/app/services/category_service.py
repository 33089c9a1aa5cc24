# backend/app/services/category_service.py
"""
Servicio para operaciones de negocio relacionadas con categorías y subcategorías.

Este servicio se encarga de gestionar la lógica de negocio del catálogo de dos
niveles: generación de slugs, validación de duplicados y verificación de que
la categoría padre existe antes de crear una subcategoría.
"""

import re
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.db.models.category_model import Category, Subcategory
from app.crud import category_crud
from app.schemas import category_schema
from fastapi import HTTPException
from starlette import status

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def create_slug(name: str) -> str:
    """
    Convierte un nombre en slug: minúsculas, cada tramo de caracteres no
    alfanuméricos se sustituye por un guion y se eliminan los guiones extremos.

    Ejemplo: "Rare Items & Gear" -> "rare-items-gear"
    """
    return _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")


class CategoryService:
    """
    Servicio para operaciones de negocio relacionadas con categorías.

    Características:
    - Slug derivado del nombre cuando no se proporciona
    - Validación de slugs duplicados
    - Verificación de integridad referencial categoría-subcategoría
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_all_categories(self, db: AsyncSession) -> List[Category]:
        return await category_crud.get_categories(db)

    async def get_category_by_id(self, db: AsyncSession, category_id: int) -> Category:
        category = await category_crud.get_category(db, category_id=category_id)
        if not category:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Category with id {category_id} not found.")
        return category

    async def get_category_by_slug(self, db: AsyncSession, slug: str) -> Category:
        category = await category_crud.get_category_by_slug(db, slug=slug)
        if not category:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Category '{slug}' not found.")
        return category

    async def get_subcategories(self, db: AsyncSession, category_id: Optional[int] = None) -> List[Subcategory]:
        """
        Obtiene las subcategorías, opcionalmente las de una categoría padre.

        Si se filtra por categoría, la categoría debe existir.
        """
        if category_id is not None:
            await self.get_category_by_id(db, category_id)
        return await category_crud.get_subcategories(db, category_id=category_id)

    async def get_subcategory_by_id(self, db: AsyncSession, subcategory_id: int) -> Subcategory:
        subcategory = await category_crud.get_subcategory(db, subcategory_id=subcategory_id)
        if not subcategory:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Subcategory with id {subcategory_id} not found.")
        return subcategory

    # ========================================
    # OPERACIONES DE ESCRITURA CON LÓGICA DE NEGOCIO
    # ========================================

    def _resolve_slug(self, name: str, slug: Optional[str]) -> str:
        resolved = create_slug(slug) if slug else create_slug(name)
        if not resolved:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Cannot derive a slug from the given name; provide one explicitly.",
            )
        return resolved

    async def create_new_category(self, db: AsyncSession, category_in: category_schema.CategoryCreate) -> Category:
        """
        Crea una nueva categoría validando que el slug no esté en uso.
        """
        slug = self._resolve_slug(category_in.name, category_in.slug)

        existing = await category_crud.get_category_by_slug(db, slug=slug)
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Category with slug '{slug}' already exists.",
            )

        return await category_crud.create_category(db=db, name=category_in.name.strip(), slug=slug)

    async def delete_existing_category(self, db: AsyncSession, category_id: int) -> Category:
        """
        Elimina una categoría. Sus subcategorías y productos se eliminan en cascada.
        """
        await self.get_category_by_id(db, category_id)
        return await category_crud.delete_category(db, category_id=category_id)

    async def create_new_subcategory(self, db: AsyncSession, subcategory_in: category_schema.SubcategoryCreate) -> Subcategory:
        """
        Crea una nueva subcategoría bajo una categoría existente.
        """
        parent = await category_crud.get_category(db, category_id=subcategory_in.category_id)
        if not parent:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Parent category with id {subcategory_in.category_id} not found.",
            )

        slug = self._resolve_slug(subcategory_in.name, subcategory_in.slug)
        existing = await category_crud.get_subcategory_by_slug(db, category_id=parent.id, slug=slug)
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Subcategory '{slug}' already exists under category '{parent.slug}'.",
            )

        return await category_crud.create_subcategory(
            db=db, category_id=parent.id, name=subcategory_in.name.strip(), slug=slug
        )

    async def delete_existing_subcategory(self, db: AsyncSession, subcategory_id: int) -> Subcategory:
        await self.get_subcategory_by_id(db, subcategory_id)
        return await category_crud.delete_subcategory(db, subcategory_id=subcategory_id)

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

category_service = CategoryService()
