# test/test_products_api.py
import pytest


async def add_product(client, name="Widget", price=9.5, stock=3):
    resp = await client.post(
        "/api/products", json={"name": name, "price": price, "stock": stock}
    )
    assert resp.status_code == 201
    return resp.json()["data"]


@pytest.mark.asyncio
async def test_create_and_list_products_in_insertion_order(client):
    first = await add_product(client, "First")
    second = await add_product(client, "Second", price=0, stock=0)

    resp = await client.get("/api/products")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [p["id"] for p in data] == [first["id"], second["id"]]
    assert data[1]["price"] == 0
    assert data[1]["stock"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"price": 1, "stock": 1},
        {"name": " ", "price": 1, "stock": 1},
        {"name": "x", "stock": 1},
        {"name": "x", "price": 1},
    ],
)
async def test_create_product_requires_all_fields(client, payload):
    resp = await client.post("/api/products", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {
        "success": False,
        "error": "Name, price and stock are required",
    }


@pytest.mark.asyncio
async def test_negative_stock_is_rejected(client):
    resp = await client.post(
        "/api/products", json={"name": "x", "price": 1, "stock": -1}
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_patch_changes_stock_only(client):
    product = await add_product(client)

    resp = await client.patch(
        f"/api/products/{product['id']}", json={"stock": 42, "name": "Renamed"}
    )
    assert resp.status_code == 200
    updated = resp.json()["data"]
    assert updated["stock"] == 42
    assert updated["name"] == "Widget"
    assert updated["price"] == 9.5


@pytest.mark.asyncio
async def test_patch_without_stock_is_400(client):
    product = await add_product(client)
    resp = await client.patch(f"/api/products/{product['id']}", json={})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Stock is required"


@pytest.mark.asyncio
async def test_missing_product_is_404(client):
    missing = "c" * 24
    for method, kwargs in (
        ("GET", {}),
        ("PATCH", {"json": {"stock": 1}}),
        ("DELETE", {}),
    ):
        resp = await client.request(method, f"/api/products/{missing}", **kwargs)
        assert resp.status_code == 404, method
        assert resp.json() == {"success": False, "error": "Product not found"}


@pytest.mark.asyncio
async def test_delete_product(client):
    product = await add_product(client)

    resp = await client.delete(f"/api/products/{product['id']}")
    assert resp.json() == {"success": True, "message": "Product deleted successfully"}

    resp = await client.get(f"/api/products/{product['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_product_storage_failure_is_500(client, broken_storage):
    resp = await client.get("/api/products")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to fetch products"}
