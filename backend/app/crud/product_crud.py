# backend/app/crud/product_crud.py

"""
Operaciones CRUD para el modelo Product.

Este módulo implementa las operaciones de Create, Read, Update, Delete para productos,
siendo el corazón del sistema de catálogo.

Funcionalidades principales:
- Filtrado por subcategoría, categoría y nombre
- Ordenación por nombre, precio, stock, categoría o fecha de alta
- Gestión de especificaciones en formato JSON
- Rebajas (porcentaje y precio rebajado)
"""

from typing import List, Optional, Dict, Any
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.category_model import Category, Subcategory
from app.db.models.product_model import Product
from app.schemas import product_schema

import logging

logger = logging.getLogger(__name__)

# Criterios de ordenación admitidos por los listados
SORT_OPTIONS = ("newest", "name", "price", "stock", "category")

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_product(db: AsyncSession, product_id: int) -> Optional[Product]:
    """Obtiene un producto por su ID de forma asíncrona."""
    result = await db.execute(select(Product).filter(Product.id == product_id))
    return result.scalars().first()


async def get_products_by_ids(db: AsyncSession, product_ids: List[int]) -> List[Product]:
    """Obtiene una lista de productos a partir de una lista de IDs de forma asíncrona."""
    if not product_ids:
        return []
    result = await db.execute(select(Product).filter(Product.id.in_(product_ids)))
    return result.scalars().all()


async def get_products(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 100,
    subcategory_id: Optional[int] = None,
    category_id: Optional[int] = None,
    name_like: Optional[str] = None,
    sort_by: str = "newest",
) -> List[Product]:
    """
    Obtiene una lista filtrada, ordenada y paginada de productos de forma asíncrona.
    """
    query = select(Product)

    if category_id is not None or sort_by == "category":
        query = query.join(Subcategory, Product.subcategory_id == Subcategory.id).join(
            Category, Subcategory.category_id == Category.id
        )

    if subcategory_id is not None:
        query = query.filter(Product.subcategory_id == subcategory_id)
    if category_id is not None:
        query = query.filter(Subcategory.category_id == category_id)
    if name_like:
        query = query.filter(Product.name.ilike(f"%{name_like}%"))

    if sort_by == "name":
        query = query.order_by(Product.name)
    elif sort_by == "price":
        query = query.order_by(Product.price, Product.id)
    elif sort_by == "stock":
        query = query.order_by(Product.stock, Product.id)
    elif sort_by == "category":
        query = query.order_by(Category.name, Product.id)
    else:
        query = query.order_by(Product.created_at.desc(), Product.id.desc())

    result = await db.execute(query.offset(skip).limit(limit))
    return result.scalars().all()


# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_product(db: AsyncSession, product_data: product_schema.ProductCreate) -> Product:
    """Crea un nuevo producto en la base de datos de forma asíncrona."""
    db_product = Product(
        subcategory_id=product_data.subcategory_id,
        name=product_data.name,
        description=product_data.description,
        price=product_data.price,
        image_url=product_data.image_url,
        specifications=product_data.specifications or {},
        stock=product_data.stock,
        sale_active=False,
        sale_percentage=0,
    )
    db.add(db_product)
    await db.commit()
    await db.refresh(db_product)
    return db_product


async def update_product(db: AsyncSession, db_product: Product, update_data: Dict[str, Any]) -> Product:
    """
    Actualiza un producto existente de forma asíncrona.

    Si cambia el precio de un producto rebajado se recalcula el precio rebajado.
    """
    for key, value in update_data.items():
        setattr(db_product, key, value)

    if "price" in update_data and db_product.sale_active:
        db_product.sale_price = calculate_sale_price(update_data["price"], db_product.sale_percentage)

    await db.commit()
    await db.refresh(db_product)
    return db_product


async def delete_product(db: AsyncSession, product_id: int) -> Optional[Product]:
    """Elimina un producto de la base de datos de forma asíncrona."""
    db_product = await get_product(db, product_id)
    if db_product:
        await db.delete(db_product)
        await db.commit()
    return db_product


# ========================================
# REBAJAS
# ========================================

def calculate_sale_price(price, percentage: int) -> Decimal:
    """Precio con el descuento aplicado, redondeado a céntimos."""
    discounted = Decimal(str(price)) * (Decimal(100) - Decimal(percentage)) / Decimal(100)
    return discounted.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


async def set_sale(db: AsyncSession, db_product: Product, percentage: int) -> Product:
    db_product.sale_active = True
    db_product.sale_percentage = percentage
    db_product.sale_price = calculate_sale_price(db_product.price, percentage)
    await db.commit()
    await db.refresh(db_product)
    logger.info(f"Rebaja del {percentage}% aplicada al producto {db_product.id}")
    return db_product


async def clear_sale(db: AsyncSession, db_product: Product) -> Product:
    db_product.sale_active = False
    db_product.sale_percentage = 0
    db_product.sale_price = None
    await db.commit()
    await db.refresh(db_product)
    return db_product
