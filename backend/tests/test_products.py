from decimal import Decimal

import pytest

from app.crud.product_crud import calculate_sale_price

from conftest import API


@pytest.mark.parametrize(
    "price, percentage, expected",
    [
        (59.99, 20, Decimal("47.99")),
        (10, 50, Decimal("5.00")),
        (0.99, 99, Decimal("0.01")),
        (19.99, 15, Decimal("16.99")),
    ],
)
def test_calculate_sale_price(price, percentage, expected):
    assert calculate_sale_price(price, percentage) == expected


async def test_create_product_defaults(create_product):
    product = await create_product(name="Hades Key", price=24.5, stock=7)

    assert product["sale_active"] is False
    assert product["sale_percentage"] == 0
    assert product["sale_price"] is None
    assert product["effective_price"] == 24.5
    assert product["specifications"] == {}
    assert product["out_of_stock"] is False


async def test_create_product_accepts_specifications_as_json_string(create_product):
    product = await create_product(specifications='{"platform": "PC", "region": "EU"}')
    assert product["specifications"] == {"platform": "PC", "region": "EU"}


async def test_create_product_rejects_invalid_specifications(client, admin_headers, subcategory):
    payload = {"name": "Bad", "price": 1, "stock": 1, "subcategory_id": subcategory["id"], "specifications": "[1, 2"}
    response = await client.post(f"{API}/products/", json=payload, headers=admin_headers)
    assert response.status_code == 422


async def test_create_product_unknown_subcategory(client, admin_headers, database):
    payload = {"name": "Lost", "price": 1, "stock": 1, "subcategory_id": 999}
    response = await client.post(f"{API}/products/", json=payload, headers=admin_headers)
    assert response.status_code == 404


async def test_create_product_requires_admin(client, customer, subcategory):
    payload = {"name": "Sneaky", "price": 1, "stock": 1, "subcategory_id": subcategory["id"]}
    response = await client.post(f"{API}/products/", json=payload, headers={"X-User-Id": str(customer["id"])})
    assert response.status_code == 403


async def test_get_product_not_found(client, database):
    response = await client.get(f"{API}/products/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


async def test_list_products_filters(client, admin_headers, category, create_product):
    other_category = await client.post(f"{API}/categories/", json={"name": "Xbox"}, headers=admin_headers)
    other_sub = await client.post(
        f"{API}/subcategories/",
        json={"name": "Game Pass", "category_id": other_category.json()["id"]},
        headers=admin_headers,
    )
    await create_product(name="Elden Ring Key")
    await create_product(name="Dark Souls III Key")
    await create_product(name="Game Pass Ultimate", subcategory_id=other_sub.json()["id"])

    by_category = await client.get(f"{API}/products/", params={"category_id": category["id"]})
    by_subcategory = await client.get(f"{API}/products/", params={"subcategory_id": other_sub.json()["id"]})
    by_name = await client.get(f"{API}/products/", params={"name": "RING"})

    assert {p["name"] for p in by_category.json()} == {"Elden Ring Key", "Dark Souls III Key"}
    assert [p["name"] for p in by_subcategory.json()] == ["Game Pass Ultimate"]
    assert [p["name"] for p in by_name.json()] == ["Elden Ring Key"]


async def test_list_products_sorting(client, create_product):
    await create_product(name="Bravo", price=30, stock=1)
    await create_product(name="Alpha", price=10, stock=9)
    await create_product(name="Charlie", price=20, stock=5)

    by_name = await client.get(f"{API}/products/", params={"sort_by": "name"})
    by_price = await client.get(f"{API}/products/", params={"sort_by": "price"})
    by_stock = await client.get(f"{API}/products/", params={"sort_by": "stock"})
    newest = await client.get(f"{API}/products/")

    assert [p["name"] for p in by_name.json()] == ["Alpha", "Bravo", "Charlie"]
    assert [p["name"] for p in by_price.json()] == ["Alpha", "Charlie", "Bravo"]
    assert [p["name"] for p in by_stock.json()] == ["Bravo", "Charlie", "Alpha"]
    assert [p["name"] for p in newest.json()] == ["Charlie", "Alpha", "Bravo"]


async def test_list_products_invalid_sort(client, database):
    response = await client.get(f"{API}/products/", params={"sort_by": "popularity"})
    assert response.status_code == 400


async def test_partial_update(client, admin_headers, create_product):
    product = await create_product(name="Celeste", price=19.99, stock=4, description="Climb")

    response = await client.patch(f"{API}/products/{product['id']}", json={"stock": 12}, headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["stock"] == 12
    assert body["name"] == "Celeste"
    assert body["description"] == "Climb"


async def test_update_rejects_null_required_field(client, admin_headers, create_product):
    product = await create_product()
    response = await client.patch(f"{API}/products/{product['id']}", json={"name": None}, headers=admin_headers)
    assert response.status_code == 400


async def test_delete_product(client, admin_headers, create_product):
    product = await create_product()

    response = await client.delete(f"{API}/products/{product['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert (await client.get(f"{API}/products/{product['id']}")).status_code == 404


async def test_sale_lifecycle(client, admin_headers, create_product):
    product = await create_product(price=59.99)

    on_sale = await client.post(f"{API}/products/{product['id']}/sale", json={"percentage": 20}, headers=admin_headers)
    assert on_sale.status_code == 200
    body = on_sale.json()
    assert body["sale_active"] is True
    assert body["sale_percentage"] == 20
    assert body["sale_price"] == 47.99
    assert body["effective_price"] == 47.99

    repriced = await client.patch(f"{API}/products/{product['id']}", json={"price": 100}, headers=admin_headers)
    assert repriced.json()["sale_price"] == 80.0

    removed = await client.delete(f"{API}/products/{product['id']}/sale", headers=admin_headers)
    body = removed.json()
    assert body["sale_active"] is False
    assert body["sale_percentage"] == 0
    assert body["sale_price"] is None
    assert body["effective_price"] == 100.0


@pytest.mark.parametrize("percentage", [0, 100, -5])
async def test_sale_percentage_bounds(client, admin_headers, create_product, percentage):
    product = await create_product()
    response = await client.post(
        f"{API}/products/{product['id']}/sale", json={"percentage": percentage}, headers=admin_headers
    )
    assert response.status_code == 422


async def test_low_stock_flag(client, admin_headers, create_product):
    scarce = await create_product(name="Scarce", stock=3)
    plenty = await create_product(name="Plenty", stock=50)
    empty = await create_product(name="Empty", stock=0)

    assert scarce["low_stock"] is True
    assert plenty["low_stock"] is False
    assert empty["low_stock"] is True
    assert empty["out_of_stock"] is True

    on_sale = await client.post(f"{API}/products/{scarce['id']}/sale", json={"percentage": 10}, headers=admin_headers)
    assert on_sale.json()["low_stock"] is False
