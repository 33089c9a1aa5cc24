"""
Fixtures comunes de la batería de tests.

Los tests usan una base de datos SQLite temporal (aiosqlite). Las variables de
entorno se fijan antes de importar la aplicación, porque el motor de base de
datos se crea al importar app.db.database.
"""

import os
import tempfile
from pathlib import Path

_TEST_DB_DIR = tempfile.mkdtemp(prefix="gamestore-tests-")
os.environ["DATABASE_URI"] = f"sqlite+aiosqlite:///{Path(_TEST_DB_DIR) / 'gamestore_test.db'}"
os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ["DISCORD_WEBHOOK_URL"] = ""

import httpx
import pytest
from sqlalchemy import event

from app.db import models  # noqa: F401
from app.db.database import Base, engine
from app.main import app

ADMIN_TOKEN = os.environ["ADMIN_TOKEN"]
API = "/api/v1"


def user_headers(user):
    """Cabecera de identificación para el usuario dado."""
    return {"X-User-Id": str(user["id"])}


@event.listens_for(engine.sync_engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no aplica ON DELETE CASCADE sin este pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest.fixture
async def client(database):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def admin_user(client):
    response = await client.post(f"{API}/setup/admin", headers={"X-Admin-Token": ADMIN_TOKEN})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def admin_headers(admin_user):
    return user_headers(admin_user)


@pytest.fixture
async def customer(client):
    response = await client.post(
        f"{API}/auth/signup",
        json={"email": "player@gamestore.com", "password": "secret123"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def category(client, admin_headers):
    response = await client.post(f"{API}/categories/", json={"name": "Steam Keys"}, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def subcategory(client, admin_headers, category):
    response = await client.post(
        f"{API}/subcategories/",
        json={"name": "Action Games", "category_id": category["id"]},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def create_product(client, admin_headers, subcategory):
    """Devuelve una función que crea productos en la subcategoría de prueba."""

    async def _create(name="Elden Ring Key", price=59.99, stock=10, **extra):
        payload = {
            "name": name,
            "price": price,
            "stock": stock,
            "subcategory_id": extra.pop("subcategory_id", subcategory["id"]),
            **extra,
        }
        response = await client.post(f"{API}/products/", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def add_to_cart(client):
    async def _add(user_id, product_id, quantity=1):
        return await client.post(
            f"{API}/users/{user_id}/cart/items",
            json={"product_id": product_id, "quantity": quantity},
            headers={"X-User-Id": str(user_id)},
        )

    return _add
