# backend/app/crud/cart_crud.py
"""
Operaciones CRUD para el modelo CartItem.

Una fila por par (usuario, producto). Las funciones de escritura hacen commit
salvo clear_cart(commit=False), que usa el checkout dentro de su propia transacción.
"""

from typing import List, Optional
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.cart_model import CartItem


async def get_cart_item(db: AsyncSession, item_id: int) -> Optional[CartItem]:
    result = await db.execute(select(CartItem).filter(CartItem.id == item_id))
    return result.scalars().first()


async def get_cart_item_by_product(db: AsyncSession, user_id: int, product_id: int) -> Optional[CartItem]:
    """Busca la línea existente de un producto en el carrito de un usuario."""
    result = await db.execute(
        select(CartItem).filter(CartItem.user_id == user_id, CartItem.product_id == product_id)
    )
    return result.scalars().first()


async def get_cart_items(db: AsyncSession, user_id: int) -> List[CartItem]:
    result = await db.execute(
        select(CartItem).filter(CartItem.user_id == user_id).order_by(CartItem.id)
    )
    return result.scalars().all()


async def count_cart_units(db: AsyncSession, user_id: int) -> int:
    """Suma de cantidades del carrito de un usuario."""
    total = await db.scalar(select(func.sum(CartItem.quantity)).filter(CartItem.user_id == user_id))
    return total or 0


async def add_cart_item(db: AsyncSession, user_id: int, product_id: int, quantity: int) -> CartItem:
    db_item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
    db.add(db_item)
    await db.commit()
    await db.refresh(db_item)
    return db_item


async def set_quantity(db: AsyncSession, db_item: CartItem, quantity: int) -> CartItem:
    db_item.quantity = quantity
    await db.commit()
    await db.refresh(db_item)
    return db_item


async def delete_cart_item(db: AsyncSession, db_item: CartItem) -> None:
    await db.delete(db_item)
    await db.commit()


async def clear_cart(db: AsyncSession, user_id: int, commit: bool = True) -> int:
    """Vacía el carrito de un usuario y devuelve el número de líneas borradas."""
    result = await db.execute(delete(CartItem).where(CartItem.user_id == user_id))
    if commit:
        await db.commit()
    return result.rowcount or 0
