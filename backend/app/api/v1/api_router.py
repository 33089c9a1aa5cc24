# backend/app/api/v1/api_router.py
"""
Este archivo contiene el router principal para la API versión 1.

Se encarga de registrar y configurar todos los routers de la versión 1 de la API.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from app.api.v1.endpoints import (
    admin,
    auth,
    cart,
    categories,
    images,
    products,
    purchases,
    settings,
    setup,
    subcategories,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL V1
# ========================================

# Crear router principal para la versión 1 de la API
# Este router actuará como contenedor para todos los sub-routers de la v1
api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE AUTENTICACIÓN
# Registro e inicio de sesión (bcrypt)
api_router_v1.include_router(
    auth.router,                    # Router con endpoints de autenticación
    prefix="/auth",                 # Prefijo: /api/v1/auth
    tags=["Auth"]                   # Tag para documentación OpenAPI/Swagger
)

# ROUTER DE ALTA INICIAL
# Crea la cuenta de administrador, protegido por X-Admin-Token
api_router_v1.include_router(
    setup.router,
    prefix="/setup",
    tags=["Setup"]
)

# ROUTER DE CATEGORÍAS
# Catálogo jerárquico: categoría → subcategoría → producto
api_router_v1.include_router(
    categories.router,
    prefix="/categories",
    tags=["Categories"]
)

api_router_v1.include_router(
    subcategories.router,
    prefix="/subcategories",
    tags=["Subcategories"]
)

# ROUTER DE PRODUCTOS
# Maneja operaciones CRUD, filtros, ordenación y rebajas
api_router_v1.include_router(
    products.router,
    prefix="/products",
    tags=["Products"]
)

# ROUTER DEL CARRITO Y DE LAS COMPRAS
# Ambos cuelgan del usuario: /users/{user_id}/cart y /users/{user_id}/purchases
api_router_v1.include_router(
    cart.router,
    prefix="/users",
    tags=["Cart"]
)

api_router_v1.include_router(
    purchases.router,
    prefix="/users",
    tags=["Purchases"]
)

# ROUTER DE AJUSTES PÚBLICOS
api_router_v1.include_router(
    settings.router,
    prefix="/settings",
    tags=["Settings"]
)

# ROUTERS DEL PANEL DE ADMINISTRACIÓN
api_router_v1.include_router(
    admin.router,
    prefix="/admin",
    tags=["Admin"]
)

api_router_v1.include_router(
    images.router,
    prefix="/admin/images",
    tags=["Admin Images"]
)
