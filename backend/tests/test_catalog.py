import pytest

from app.services.category_service import create_slug

from conftest import API


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Steam Keys", "steam-keys"),
        ("  PlayStation  Gift Cards! ", "playstation-gift-cards"),
        ("Xbox/Live -- Codes", "xbox-live-codes"),
        ("Ünïcode Game", "n-code-game"),
        ("---", ""),
    ],
)
def test_create_slug(name, expected):
    assert create_slug(name) == expected


async def test_create_category_derives_slug(client, admin_headers):
    response = await client.post(f"{API}/categories/", json={"name": "Gift Cards"}, headers=admin_headers)

    assert response.status_code == 201
    assert response.json()["slug"] == "gift-cards"


async def test_create_category_requires_admin(client, customer):
    response = await client.post(
        f"{API}/categories/", json={"name": "Gift Cards"}, headers={"X-User-Id": str(customer["id"])}
    )
    assert response.status_code == 403


async def test_duplicate_category_slug_conflicts(client, admin_headers, category):
    response = await client.post(f"{API}/categories/", json={"name": "steam keys"}, headers=admin_headers)
    assert response.status_code == 409


async def test_category_name_without_slug_characters_is_rejected(client, admin_headers):
    response = await client.post(f"{API}/categories/", json={"name": "!!!"}, headers=admin_headers)
    assert response.status_code == 400


async def test_list_categories_ordered_by_name(client, admin_headers):
    for name in ("Xbox", "Gift Cards", "Steam Keys"):
        await client.post(f"{API}/categories/", json={"name": name}, headers=admin_headers)

    response = await client.get(f"{API}/categories/")

    assert [c["name"] for c in response.json()] == ["Gift Cards", "Steam Keys", "Xbox"]


async def test_get_category_by_id_and_slug(client, category):
    by_id = await client.get(f"{API}/categories/{category['id']}")
    by_slug = await client.get(f"{API}/categories/slug/steam-keys")
    missing = await client.get(f"{API}/categories/slug/nothing-here")

    assert by_id.json()["name"] == "Steam Keys"
    assert by_slug.json()["id"] == category["id"]
    assert missing.status_code == 404


async def test_subcategory_requires_existing_parent(client, admin_headers, database):
    response = await client.post(
        f"{API}/subcategories/", json={"name": "Orphans", "category_id": 999}, headers=admin_headers
    )
    assert response.status_code == 404


async def test_subcategories_of_category(client, admin_headers, category, subcategory):
    other = await client.post(f"{API}/categories/", json={"name": "Xbox"}, headers=admin_headers)
    await client.post(
        f"{API}/subcategories/", json={"name": "Game Pass", "category_id": other.json()["id"]}, headers=admin_headers
    )

    nested = await client.get(f"{API}/categories/{category['id']}/subcategories")
    filtered = await client.get(f"{API}/subcategories/", params={"category_id": category["id"]})
    everything = await client.get(f"{API}/subcategories/")

    assert [s["slug"] for s in nested.json()] == ["action-games"]
    assert [s["slug"] for s in filtered.json()] == ["action-games"]
    assert len(everything.json()) == 2


async def test_same_subcategory_slug_under_one_category_conflicts(client, admin_headers, category, subcategory):
    response = await client.post(
        f"{API}/subcategories/", json={"name": "Action  Games", "category_id": category["id"]}, headers=admin_headers
    )
    assert response.status_code == 409


async def test_subcategory_products(client, subcategory, create_product):
    await create_product(name="Doom Eternal", stock=3)

    response = await client.get(f"{API}/subcategories/{subcategory['id']}/products")
    missing = await client.get(f"{API}/subcategories/999/products")

    assert [p["name"] for p in response.json()] == ["Doom Eternal"]
    assert missing.status_code == 404


async def test_delete_category_removes_children(client, admin_headers, category, subcategory, create_product):
    product = await create_product()

    response = await client.delete(f"{API}/categories/{category['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert (await client.get(f"{API}/subcategories/{subcategory['id']}")).status_code == 404
    assert (await client.get(f"{API}/products/{product['id']}")).status_code == 404


async def test_delete_subcategory(client, admin_headers, subcategory):
    response = await client.delete(f"{API}/subcategories/{subcategory['id']}", headers=admin_headers)
    again = await client.delete(f"{API}/subcategories/{subcategory['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert again.status_code == 404
