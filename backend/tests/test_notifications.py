from conftest import API, user_headers


async def _place_orders(client, customer, create_product, add_to_cart, count):
    product = await create_product(stock=50)
    for _ in range(count):
        await add_to_cart(customer["id"], product["id"], 1)
        await client.post(f"{API}/users/{customer['id']}/purchases", headers=user_headers(customer))


async def test_notifications_start_empty(client, admin_headers):
    response = await client.get(f"{API}/admin/notifications", headers=admin_headers)
    assert response.json() == []


async def test_mark_one_as_read(client, admin_headers, customer, create_product, add_to_cart):
    await _place_orders(client, customer, create_product, add_to_cart, 2)
    notifications = (await client.get(f"{API}/admin/notifications", headers=admin_headers)).json()
    assert all(n["is_read"] is False for n in notifications)

    response = await client.post(f"{API}/admin/notifications/{notifications[0]['id']}/read", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["is_read"] is True
    unread = await client.get(f"{API}/admin/notifications", params={"unread_only": True}, headers=admin_headers)
    assert [n["id"] for n in unread.json()] == [notifications[1]["id"]]


async def test_mark_all_as_read_returns_count(client, admin_headers, customer, create_product, add_to_cart):
    await _place_orders(client, customer, create_product, add_to_cart, 3)

    first = await client.post(f"{API}/admin/notifications/read-all", headers=admin_headers)
    second = await client.post(f"{API}/admin/notifications/read-all", headers=admin_headers)

    assert first.json() == {"updated": 3}
    assert second.json() == {"updated": 0}
    unread = await client.get(f"{API}/admin/notifications", params={"unread_only": True}, headers=admin_headers)
    assert unread.json() == []


async def test_mark_unknown_notification(client, admin_headers):
    response = await client.post(f"{API}/admin/notifications/999/read", headers=admin_headers)
    assert response.status_code == 404


async def test_notifications_require_admin(client, customer):
    response = await client.get(f"{API}/admin/notifications", headers={"X-User-Id": str(customer["id"])})
    assert response.status_code == 403
