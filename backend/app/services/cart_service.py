# backend/app/services/cart_service.py
"""
Servicio de Carrito de Compras para la aplicación.

Este servicio se encarga de gestionar el carrito de compras de un usuario,
persistido en la tabla cart_items (una línea por usuario y producto).
"""
import logging
from typing import Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.crud import cart_crud, product_crud, user_crud
from app.db.models.cart_model import CartItem
from app.db.models.product_model import Product
from app.schemas.cart_schema import Cart, CartItemResponse, CartProduct

logger = logging.getLogger(__name__)


class CartService:
    """
    Servicio para gestionar el carrito de compras de un usuario.
    """

    async def _ensure_user(self, db: AsyncSession, user_id: int) -> None:
        if not await user_crud.get_user(db, user_id=user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with id {user_id} not found.")

    async def _get_owned_item(self, db: AsyncSession, user_id: int, item_id: int) -> CartItem:
        item = await cart_crud.get_cart_item(db, item_id=item_id)
        if not item or item.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cart item not found")
        return item

    def _check_stock(self, product: Product, quantity: int) -> None:
        if quantity > product.stock:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Not enough stock for {product.name}. Requested: {quantity}, available: {product.stock}",
            )

    async def add_product_to_cart(self, db: AsyncSession, user_id: int, product_id: int, quantity: int = 1) -> CartItem:
        """
        Añade un producto al carrito de un usuario.
        Si el producto ya existe, incrementa la cantidad en lugar de duplicar la línea.
        """
        await self._ensure_user(db, user_id)
        product = await product_crud.get_product(db, product_id=product_id)
        if not product:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        if product.stock == 0:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"{product.name} is out of stock")

        existing = await cart_crud.get_cart_item_by_product(db, user_id=user_id, product_id=product_id)
        if existing:
            new_quantity = existing.quantity + quantity
            self._check_stock(product, new_quantity)
            return await cart_crud.set_quantity(db, existing, new_quantity)

        self._check_stock(product, quantity)
        return await cart_crud.add_cart_item(db, user_id=user_id, product_id=product_id, quantity=quantity)

    async def update_item_quantity(self, db: AsyncSession, user_id: int, item_id: int, quantity: int) -> Optional[CartItem]:
        """
        Fija la cantidad de una línea. Con cantidad cero o negativa la línea se elimina
        y se devuelve None.
        """
        item = await self._get_owned_item(db, user_id, item_id)
        if quantity <= 0:
            await cart_crud.delete_cart_item(db, item)
            return None

        product = await product_crud.get_product(db, product_id=item.product_id)
        if product:
            self._check_stock(product, quantity)
        return await cart_crud.set_quantity(db, item, quantity)

    async def remove_item(self, db: AsyncSession, user_id: int, item_id: int) -> None:
        item = await self._get_owned_item(db, user_id, item_id)
        await cart_crud.delete_cart_item(db, item)

    async def clear_cart(self, db: AsyncSession, user_id: int) -> int:
        """
        Vacía completamente el carrito de un usuario.
        """
        return await cart_crud.clear_cart(db, user_id=user_id)

    async def get_cart_count(self, db: AsyncSession, user_id: int) -> int:
        return await cart_crud.count_cart_units(db, user_id=user_id)

    async def get_cart_lines(self, db: AsyncSession, user_id: int) -> List[CartItemResponse]:
        """
        Obtiene las líneas del carrito combinadas con los datos actuales de cada producto.
        Si un producto ya no existe se muestra un marcador "Unknown Product" con precio 0.
        """
        items = await cart_crud.get_cart_items(db, user_id=user_id)
        if not items:
            return []

        products = await product_crud.get_products_by_ids(db, [item.product_id for item in items])
        products_by_id: Dict[int, Product] = {product.id: product for product in products}

        lines = []
        for item in items:
            product = products_by_id.get(item.product_id)
            if product:
                cart_product = CartProduct(
                    id=product.id,
                    name=product.name,
                    price=product.effective_price,
                    image_url=product.image_url,
                    stock=product.stock,
                )
            else:
                cart_product = CartProduct(id=item.product_id, name="Unknown Product", price=0.0, image_url="", stock=0, available=False)

            lines.append(
                CartItemResponse(
                    id=item.id,
                    user_id=item.user_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    created_at=item.created_at,
                    product=cart_product,
                    total=round(cart_product.price * item.quantity, 2),
                )
            )
        return lines

    async def get_cart_contents(self, db: AsyncSession, user_id: int) -> Cart:
        """
        Obtiene todos los productos y sus cantidades del carrito de un usuario,
        con el total de unidades y el precio total.
        """
        await self._ensure_user(db, user_id)
        lines = await self.get_cart_lines(db, user_id)
        return Cart(
            items=lines,
            item_count=sum(line.quantity for line in lines),
            total_price=round(sum(line.total for line in lines), 2),
        )


cart_service = CartService()
