from app.crud import settings_crud
from app.db.database import AsyncSessionLocal

from conftest import API


async def test_public_settings_start_empty(client, database):
    response = await client.get(f"{API}/settings/")

    assert response.status_code == 200
    assert response.json() == {}


async def test_upsert_setting(client, admin_headers):
    created = await client.put(f"{API}/admin/settings/store_name", json={"value": "Pixel Vault"}, headers=admin_headers)
    updated = await client.put(f"{API}/admin/settings/store_name", json={"value": "GameStore"}, headers=admin_headers)
    await client.put(f"{API}/admin/settings/currency_symbol", json={"value": "$"}, headers=admin_headers)

    assert created.json() == {"key": "store_name", "value": "Pixel Vault"}
    assert updated.json() == {"key": "store_name", "value": "GameStore"}
    public = await client.get(f"{API}/settings/")
    assert public.json() == {"store_name": "GameStore", "currency_symbol": "$"}


async def test_update_setting_requires_admin(client, customer):
    response = await client.put(
        f"{API}/admin/settings/store_name", json={"value": "Hacked"}, headers={"X-User-Id": str(customer["id"])}
    )
    assert response.status_code == 403


async def test_low_stock_threshold_must_be_numeric(client, admin_headers):
    bad = await client.put(f"{API}/admin/settings/low_stock_threshold", json={"value": "lots"}, headers=admin_headers)
    negative = await client.put(f"{API}/admin/settings/low_stock_threshold", json={"value": "-1"}, headers=admin_headers)
    good = await client.put(f"{API}/admin/settings/low_stock_threshold", json={"value": "3"}, headers=admin_headers)

    assert bad.status_code == 400
    assert negative.status_code == 400
    assert good.status_code == 200


async def test_rarity_colors(client, admin_headers):
    payload = {
        "colors": {" Legendary ": "#F59E0B", "common": "#9CA3AF", "Rare": "#3B82F6"},
        "order": ["rare", "LEGENDARY", "mythic"],
    }

    response = await client.put(f"{API}/admin/settings/rarity-colors", json=payload, headers=admin_headers)

    assert response.status_code == 200
    expected = {
        "colors": {"legendary": "#F59E0B", "common": "#9CA3AF", "rare": "#3B82F6"},
        "order": ["rare", "legendary", "common"],
    }
    assert response.json() == expected
    assert (await client.get(f"{API}/settings/rarity-colors")).json() == expected


async def test_rarity_colors_reject_invalid_hex(client, admin_headers):
    payload = {"colors": {"epic": "purple"}, "order": []}
    response = await client.put(f"{API}/admin/settings/rarity-colors", json=payload, headers=admin_headers)
    assert response.status_code == 422


async def test_payment_methods_merge(client, admin_headers):
    initial = await client.get(f"{API}/settings/payment-methods")
    assert initial.json()["methods"] == {
        "paypal": False,
        "crypto": False,
        "gift_cards": False,
        "bank_transfer": False,
        "cash_app": False,
    }

    await client.put(f"{API}/admin/settings/payment-methods", json={"methods": {"paypal": True}}, headers=admin_headers)
    response = await client.put(
        f"{API}/admin/settings/payment-methods", json={"methods": {"crypto": True}}, headers=admin_headers
    )

    methods = response.json()["methods"]
    assert methods["paypal"] is True
    assert methods["crypto"] is True
    assert methods["cash_app"] is False


async def test_payment_methods_reject_unknown_keys(client, admin_headers):
    response = await client.put(
        f"{API}/admin/settings/payment-methods", json={"methods": {"barter": True}}, headers=admin_headers
    )
    assert response.status_code == 422


async def test_structured_keys_rejected_by_generic_update(client, admin_headers):
    for key in ("rarity_colors", "rarity_order", "payment_methods"):
        response = await client.put(f"{API}/admin/settings/{key}", json={"value": "[1, 2]"}, headers=admin_headers)
        assert response.status_code == 400, key

    assert (await client.get(f"{API}/settings/")).json() == {}


async def test_corrupt_structured_settings_are_ignored_on_read(client, database):
    async with AsyncSessionLocal() as db:
        await settings_crud.upsert_setting(db, "rarity_colors", '{"legendary": "red", "Rare": "#3B82F6", "epic": 7}')
        await settings_crud.upsert_setting(db, "rarity_order", '["rare", 3, "legendary"]')
        await settings_crud.upsert_setting(db, "payment_methods", "[1, 2]")

    colors = await client.get(f"{API}/settings/rarity-colors")
    methods = await client.get(f"{API}/settings/payment-methods")

    assert colors.status_code == 200
    assert colors.json() == {"colors": {"rare": "#3B82F6"}, "order": ["rare"]}
    assert methods.status_code == 200
    assert not any(methods.json()["methods"].values())
