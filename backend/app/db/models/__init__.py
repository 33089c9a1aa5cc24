# Importa todos los modelos para que SQLAlchemy los registre en Base.metadata

from app.db.models.category_model import Category, Subcategory
from app.db.models.product_model import Product
from app.db.models.user_model import User
from app.db.models.cart_model import CartItem
from app.db.models.purchase_model import PurchaseRequest
from app.db.models.notification_model import Notification
from app.db.models.settings_model import AdminSetting
from app.db.models.image_model import UploadedImage

__all__ = [
    "Category",
    "Subcategory",
    "Product",
    "User",
    "CartItem",
    "PurchaseRequest",
    "Notification",
    "AdminSetting",
    "UploadedImage",
]
