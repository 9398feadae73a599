import pytest

from fitstore.core.bootstrap import DEFAULT_CATALOG, seed_products
from fitstore.models.activity import Activity, ActivityType
from fitstore.models.product import Product


pytestmark = pytest.mark.asyncio

API = "/api"


async def _user_headers(client) -> dict[str, str]:
    resp = await client.post(
        f"{API}/signup",
        json={"name": "Shopper", "email": "shopper@fitstore.io", "password": "secret12"},
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


async def test_products_are_public(client, products):
    resp = await client.get(f"{API}/products")
    assert resp.status_code == 200
    items = resp.json()
    assert [p["id"] for p in items] == ["P1", "P2", "P3"]
    assert items[0] == {
        "id": "P1",
        "name": "Jump Rope",
        "company": "FlexFit",
        "type": "equipment",
        "price": 30.0,
        "weight": "0.3 kg",
        "img": "rope.png",
    }


async def test_bill_small_cart(client, products):
    headers = await _user_headers(client)
    resp = await client.post(f"{API}/cart/bill", json={"items": [{"id": "P1", "qty": 2}]}, headers=headers)
    body = resp.json()
    assert resp.status_code == 200, resp.text
    assert body["subtotal"] == 60
    assert body["shipping"] == 5
    assert body["tax"] == 7.2
    assert body["total"] == 72.2
    assert body["details"][0]["lineTotal"] == 60

    checkout = await Activity.get(type=ActivityType.CHECKOUT)
    assert checkout.email == "shopper@fitstore.io"
    assert checkout.details == {"subtotal": 60.0, "shipping": 5.0, "tax": 7.2, "total": 72.2, "itemsCount": 1}


async def test_bill_free_shipping_over_100(client, products):
    headers = await _user_headers(client)
    resp = await client.post(f"{API}/cart/bill", json={"items": [{"id": "P2", "qty": 2}]}, headers=headers)
    body = resp.json()
    assert body["subtotal"] == 150
    assert body["shipping"] == 0
    assert body["total"] == 168


async def test_admin_can_bill_under_admin_email(client, products, admin_headers, admin_credentials):
    resp = await client.post(f"{API}/cart/bill", json={"items": [{"id": "P3", "qty": 1}]}, headers=admin_headers)
    assert resp.status_code == 200
    checkout = await Activity.get(type=ActivityType.CHECKOUT)
    assert checkout.email == admin_credentials["email"]


async def test_unknown_product_rejects_request(client, products):
    headers = await _user_headers(client)
    resp = await client.post(
        f"{API}/cart/bill",
        json={"items": [{"id": "P1", "qty": 1}, {"id": "GHOST", "qty": 1}]},
        headers=headers,
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"
    assert await Activity.filter(type=ActivityType.CHECKOUT).count() == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"items": []},
        {"items": [{"id": "P1", "qty": 0}]},
        {"items": [{"id": "P1", "qty": -2}]},
        {},
    ],
)
async def test_bad_cart_payloads(client, products, payload):
    headers = await _user_headers(client)
    resp = await client.post(f"{API}/cart/bill", json=payload, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_seed_inserts_catalog_once(db):
    inserted = await seed_products()
    assert inserted == len(DEFAULT_CATALOG)
    assert await seed_products() == 0
    assert await Product.all().count() == len(DEFAULT_CATALOG)
