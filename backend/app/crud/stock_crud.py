# backend/app/crud/stock_crud.py
"""
Operaciones de stock sobre el modelo Product.

Este módulo ajusta el stock de un producto al crear o cancelar una solicitud
de compra. Cada ajuste lee la fila con bloqueo (SELECT ... FOR UPDATE) y
escribe el nuevo valor; el commit lo hace la transacción de nivel superior.
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.product_model import Product


async def _get_locked_product(db: AsyncSession, product_id: int) -> Optional[Product]:
    query = (
        select(Product)
        .filter(Product.id == product_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    return result.scalars().first()


async def deduct_stock(db: AsyncSession, product_id: int, quantity: int) -> Optional[int]:
    """
    Descuenta una cantidad del stock de un producto, sin bajar de cero.

    Returns:
        El nuevo stock, o None si el producto ya no existe.
    """
    product = await _get_locked_product(db, product_id)
    if product is None:
        return None

    product.stock = max(0, product.stock - quantity)
    # El commit se gestionará en la transacción de nivel superior que llama a esta función.
    await db.flush()
    return product.stock


async def restore_stock(db: AsyncSession, product_id: int, quantity: int) -> Optional[int]:
    """
    Devuelve al stock la cantidad de una compra cancelada.

    Returns:
        El nuevo stock, o None si el producto ya no existe.
    """
    product = await _get_locked_product(db, product_id)
    if product is None:
        return None

    product.stock = product.stock + quantity
    await db.flush()
    return product.stock
