from app.core.security import get_password_hash, verify_password

from conftest import ADMIN_TOKEN, API


def test_password_hash_roundtrip():
    hashed = get_password_hash("secret123")
    assert hashed != "secret123"
    assert hashed.startswith("$2b$")
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


async def test_signup_returns_user_without_password(client):
    response = await client.post(f"{API}/auth/signup", json={"email": "new@gamestore.com", "password": "secret123"})

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "new@gamestore.com"
    assert body["is_admin"] is False
    assert "password" not in body
    assert "password_hash" not in body


async def test_signup_duplicate_email_conflicts(client, customer):
    response = await client.post(f"{API}/auth/signup", json={"email": customer["email"], "password": "another123"})

    assert response.status_code == 409
    assert response.json()["detail"] == "Email already registered"


async def test_signup_rejects_invalid_email(client):
    response = await client.post(f"{API}/auth/signup", json={"email": "not-an-email", "password": "secret123"})
    assert response.status_code == 422


async def test_signin_with_valid_credentials(client, customer):
    response = await client.post(f"{API}/auth/signin", json={"email": "player@gamestore.com", "password": "secret123"})

    assert response.status_code == 200
    assert response.json()["id"] == customer["id"]


async def test_signin_failures_share_the_same_error(client, customer):
    wrong_password = await client.post(f"{API}/auth/signin", json={"email": "player@gamestore.com", "password": "nope"})
    unknown_email = await client.post(f"{API}/auth/signin", json={"email": "ghost@gamestore.com", "password": "secret123"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json()["detail"] == unknown_email.json()["detail"] == "Invalid credentials"


async def test_setup_admin_requires_token(client):
    missing = await client.post(f"{API}/setup/admin")
    wrong = await client.post(f"{API}/setup/admin", headers={"X-Admin-Token": "guess"})

    assert missing.status_code == 403
    assert wrong.status_code == 403


async def test_setup_admin_uses_defaults_and_can_sign_in(client, admin_user):
    assert admin_user["email"] == "admin@gamestore.com"
    assert admin_user["is_admin"] is True

    response = await client.post(f"{API}/auth/signin", json={"email": "admin@gamestore.com", "password": "admin123"})
    assert response.status_code == 200
    assert response.json()["is_admin"] is True


async def test_setup_admin_promotes_existing_user(client, customer):
    response = await client.post(
        f"{API}/setup/admin",
        json={"email": customer["email"], "password": "newpass123"},
        headers={"X-Admin-Token": ADMIN_TOKEN},
    )

    assert response.status_code == 201
    assert response.json()["id"] == customer["id"]
    assert response.json()["is_admin"] is True

    signin = await client.post(f"{API}/auth/signin", json={"email": customer["email"], "password": "newpass123"})
    assert signin.status_code == 200


async def test_admin_routes_require_user_header(client):
    response = await client.get(f"{API}/admin/users")
    assert response.status_code == 401


async def test_admin_routes_reject_unknown_user(client, database):
    response = await client.get(f"{API}/admin/users", headers={"X-User-Id": "999"})
    assert response.status_code == 401


async def test_admin_routes_reject_regular_users(client, customer):
    response = await client.get(f"{API}/admin/users", headers={"X-User-Id": str(customer["id"])})
    assert response.status_code == 403


async def test_make_and_remove_admin(client, admin_headers, customer):
    promoted = await client.post(f"{API}/admin/users/{customer['id']}/make-admin", headers=admin_headers)
    assert promoted.status_code == 200
    assert promoted.json()["is_admin"] is True

    customer_headers = {"X-User-Id": str(customer["id"])}
    assert (await client.get(f"{API}/admin/users", headers=customer_headers)).status_code == 200

    demoted = await client.post(f"{API}/admin/users/{customer['id']}/remove-admin", headers=admin_headers)
    assert demoted.json()["is_admin"] is False
    assert (await client.get(f"{API}/admin/users", headers=customer_headers)).status_code == 403


async def test_cannot_remove_last_admin(client, admin_user, admin_headers):
    response = await client.post(f"{API}/admin/users/{admin_user['id']}/remove-admin", headers=admin_headers)

    assert response.status_code == 409
    assert (await client.get(f"{API}/admin/users", headers=admin_headers)).status_code == 200


async def test_make_admin_unknown_user(client, admin_headers):
    response = await client.post(f"{API}/admin/users/999/make-admin", headers=admin_headers)
    assert response.status_code == 404


async def test_list_users(client, admin_headers, customer):
    response = await client.get(f"{API}/admin/users", headers=admin_headers)

    emails = {user["email"] for user in response.json()}
    assert emails == {"admin@gamestore.com", "player@gamestore.com"}
