# backend/app/api/v1/endpoints/cart.py
"""
Este archivo contiene los endpoints para el carrito de compras.

Se encarga de gestionar las operaciones de agregar productos, cambiar cantidades,
eliminar productos y obtener el contenido del carrito de un usuario.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.api import deps
from app.schemas.cart_schema import Cart, CartCount, CartItemCreate, CartItemUpdate
from app.services.cart_service import cart_service

logger = logging.getLogger(__name__)

# Router para el carrito de compras; solo el propio usuario o un administrador
router = APIRouter(dependencies=[Depends(deps.get_current_owner)])

@router.get("/{user_id}/cart", response_model=Cart)
async def get_cart(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    """
    Obtiene el contenido completo del carrito con el número de unidades y el total.
    """
    return await cart_service.get_cart_contents(db, user_id)


@router.get("/{user_id}/cart/count", response_model=CartCount)
async def get_cart_count(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    """Suma de las cantidades de todas las líneas del carrito."""
    return CartCount(count=await cart_service.get_cart_count(db, user_id))


@router.post("/{user_id}/cart/items", status_code=status.HTTP_201_CREATED, response_model=Cart)
async def add_item_to_cart(
    user_id: int,
    item: CartItemCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    """
    Añade un producto al carrito de un usuario, verificando el stock disponible.
    """
    logger.info(f"🛒 CARRITO: Usuario {user_id} añade {item.quantity} x producto {item.product_id}")
    await cart_service.add_product_to_cart(db, user_id, item.product_id, item.quantity)
    return await cart_service.get_cart_contents(db, user_id)


@router.patch("/{user_id}/cart/items/{item_id}", response_model=Cart)
async def update_cart_item(
    user_id: int,
    item_id: int,
    item: CartItemUpdate,
    db: AsyncSession = Depends(deps.get_db),
):
    """
    Cambia la cantidad de una línea. Con cantidad 0 o menor la línea se elimina.
    """
    await cart_service.update_item_quantity(db, user_id, item_id, item.quantity)
    return await cart_service.get_cart_contents(db, user_id)


@router.delete("/{user_id}/cart/items/{item_id}", response_model=Cart)
async def remove_cart_item(
    user_id: int,
    item_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    """
    Elimina una línea del carrito.
    """
    await cart_service.remove_item(db, user_id, item_id)
    return await cart_service.get_cart_contents(db, user_id)


@router.delete("/{user_id}/cart", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cart(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db),
):
    """
    Vacía completamente el carrito de un usuario.
    """
    removed = await cart_service.clear_cart(db, user_id)
    logger.info(f"🛒 CARRITO: Usuario {user_id} vacía el carrito ({removed} líneas)")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
