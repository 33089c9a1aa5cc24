import base64
import io

from PIL import Image

from conftest import API


def _png_bytes(width=800, height=600, color=(200, 30, 30)):
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


def _decode_data_url(url):
    header, encoded = url.split(",", 1)
    assert header == "data:image/png;base64"
    return Image.open(io.BytesIO(base64.b64decode(encoded)))


async def test_upload_resizes_to_default_size(client, admin_headers, admin_user):
    files = {"files": ("cover.png", _png_bytes(), "image/png")}

    response = await client.post(f"{API}/admin/images/", files=files, headers=admin_headers)

    assert response.status_code == 201, response.text
    [image] = response.json()
    assert image["original_name"] == "cover.png"
    assert image["name"].endswith("_cover.png")
    assert (image["original_width"], image["original_height"]) == (800, 600)
    assert (image["resized_width"], image["resized_height"]) == (400, 400)
    assert image["mime_type"] == "image/png"
    assert image["created_by"] == admin_user["id"]
    assert _decode_data_url(image["url"]).size == (400, 400)


async def test_upload_custom_size_and_several_files(client, admin_headers):
    files = [
        ("files", ("a.png", _png_bytes(100, 100), "image/png")),
        ("files", ("b.jpg", _jpeg_bytes(), "image/jpeg")),
    ]

    response = await client.post(
        f"{API}/admin/images/", files=files, data={"width": "64", "height": "32"}, headers=admin_headers
    )

    assert response.status_code == 201, response.text
    images = response.json()
    assert [i["original_name"] for i in images] == ["a.png", "b.jpg"]
    assert all((i["resized_width"], i["resized_height"]) == (64, 32) for i in images)
    assert _decode_data_url(images[1]["url"]).size == (64, 32)


def _jpeg_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (120, 90), (10, 120, 10)).save(buffer, format="JPEG")
    return buffer.getvalue()


async def test_upload_rejects_non_images(client, admin_headers):
    files = {"files": ("notes.txt", b"not an image", "text/plain")}

    response = await client.post(f"{API}/admin/images/", files=files, headers=admin_headers)

    assert response.status_code == 400
    assert (await client.get(f"{API}/admin/images/", headers=admin_headers)).json() == []


async def test_upload_rejects_corrupt_image(client, admin_headers):
    files = {"files": ("broken.png", b"\x89PNG garbage", "image/png")}
    response = await client.post(f"{API}/admin/images/", files=files, headers=admin_headers)
    assert response.status_code == 400


async def test_upload_rejects_oversized_target(client, admin_headers):
    files = {"files": ("cover.png", _png_bytes(10, 10), "image/png")}
    response = await client.post(f"{API}/admin/images/", files=files, data={"width": "5000"}, headers=admin_headers)
    assert response.status_code == 400


async def test_upload_requires_admin(client, customer):
    files = {"files": ("cover.png", _png_bytes(10, 10), "image/png")}
    response = await client.post(f"{API}/admin/images/", files=files, headers={"X-User-Id": str(customer["id"])})
    assert response.status_code == 403


async def test_list_and_delete_images(client, admin_headers):
    for name in ("first.png", "second.png"):
        await client.post(
            f"{API}/admin/images/", files={"files": (name, _png_bytes(10, 10), "image/png")}, headers=admin_headers
        )

    listed = (await client.get(f"{API}/admin/images/", headers=admin_headers)).json()
    assert [i["original_name"] for i in listed] == ["second.png", "first.png"]

    deleted = await client.delete(f"{API}/admin/images/{listed[0]['id']}", headers=admin_headers)
    missing = await client.delete(f"{API}/admin/images/{listed[0]['id']}", headers=admin_headers)

    assert deleted.status_code == 200
    assert missing.status_code == 404
    remaining = (await client.get(f"{API}/admin/images/", headers=admin_headers)).json()
    assert [i["original_name"] for i in remaining] == ["first.png"]


async def test_corrupt_file_rejects_whole_upload(client, admin_headers):
    files = [
        ("files", ("good.png", _png_bytes(20, 20), "image/png")),
        ("files", ("broken.png", b"\x89PNG garbage", "image/png")),
    ]

    response = await client.post(f"{API}/admin/images/", files=files, headers=admin_headers)

    assert response.status_code == 400
    assert (await client.get(f"{API}/admin/images/", headers=admin_headers)).json() == []


async def test_upload_rejects_decompression_bomb(client, admin_headers, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    files = {"files": ("huge.png", _png_bytes(100, 100), "image/png")}

    response = await client.post(f"{API}/admin/images/", files=files, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Could not read image file"
