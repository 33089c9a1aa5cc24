# backend/app/crud/category_crud.py

"""
Operaciones CRUD para los modelos Category y Subcategory.

Este módulo implementa las operaciones de Create, Read y Delete del catálogo
de dos niveles, proporcionando una capa de abstracción entre los servicios
y la base de datos.

Funcionalidades principales:
- Consultas básicas por ID y por slug
- Navegación padre/hijo (categoría → subcategorías)
- Listados ordenados por nombre, como los muestra el escaparate
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.category_model import Category, Subcategory

# ========================================
# CATEGORÍAS - LECTURA
# ========================================

async def get_category(db: AsyncSession, category_id: int) -> Optional[Category]:
    """
    Obtiene una categoría por su ID.

    Args:
        db: Sesión de SQLAlchemy
        category_id: ID único de la categoría

    Returns:
        Objeto Category si existe, None si no se encuentra
    """
    result = await db.execute(select(Category).filter(Category.id == category_id))
    return result.scalars().first()


async def get_category_by_slug(db: AsyncSession, slug: str) -> Optional[Category]:
    """
    Obtiene una categoría por su slug.

    El escaparate navega por slug (pestaña activa = slug de la primera categoría),
    por lo que el slug es único en toda la tabla.
    """
    result = await db.execute(select(Category).filter(Category.slug == slug))
    return result.scalars().first()


async def get_categories(db: AsyncSession) -> List[Category]:
    """Obtiene todas las categorías ordenadas por nombre."""
    result = await db.execute(select(Category).order_by(Category.name))
    return result.scalars().all()


# ========================================
# CATEGORÍAS - ESCRITURA
# ========================================

async def create_category(db: AsyncSession, name: str, slug: str) -> Category:
    """
    Crea una nueva categoría en la base de datos.

    Es importante validar duplicados de slug antes de llamar esta función.
    """
    db_category = Category(name=name, slug=slug)
    db.add(db_category)
    await db.commit()  # Persiste en la base de datos
    await db.refresh(db_category)  # Recarga el objeto con datos actualizados de la BD
    return db_category


async def delete_category(db: AsyncSession, category_id: int) -> Optional[Category]:
    """
    Elimina una categoría de la base de datos.

    Efectos colaterales (manejados por las foreign keys con ON DELETE CASCADE):
        - Subcategorías de la categoría: eliminadas
        - Productos de esas subcategorías: eliminados
    """
    db_category = await get_category(db, category_id)
    if db_category:
        await db.delete(db_category)
        await db.commit()
    return db_category


# ========================================
# SUBCATEGORÍAS
# ========================================

async def get_subcategory(db: AsyncSession, subcategory_id: int) -> Optional[Subcategory]:
    result = await db.execute(select(Subcategory).filter(Subcategory.id == subcategory_id))
    return result.scalars().first()


async def get_subcategory_by_slug(db: AsyncSession, category_id: int, slug: str) -> Optional[Subcategory]:
    """Busca una subcategoría por slug dentro de una categoría concreta."""
    result = await db.execute(
        select(Subcategory).filter(Subcategory.category_id == category_id, Subcategory.slug == slug)
    )
    return result.scalars().first()


async def get_subcategories(db: AsyncSession, category_id: Optional[int] = None) -> List[Subcategory]:
    """
    Obtiene las subcategorías ordenadas por nombre, opcionalmente solo
    las de una categoría padre.
    """
    query = select(Subcategory)
    if category_id is not None:
        query = query.filter(Subcategory.category_id == category_id)
    result = await db.execute(query.order_by(Subcategory.name))
    return result.scalars().all()


async def create_subcategory(db: AsyncSession, category_id: int, name: str, slug: str) -> Subcategory:
    db_subcategory = Subcategory(category_id=category_id, name=name, slug=slug)
    db.add(db_subcategory)
    await db.commit()
    await db.refresh(db_subcategory)
    return db_subcategory


async def delete_subcategory(db: AsyncSession, subcategory_id: int) -> Optional[Subcategory]:
    """Elimina una subcategoría; sus productos caen en cascada."""
    db_subcategory = await get_subcategory(db, subcategory_id)
    if db_subcategory:
        await db.delete(db_subcategory)
        await db.commit()
    return db_subcategory
