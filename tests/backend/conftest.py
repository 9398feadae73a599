import os
import uuid
from decimal import Decimal

TEST_DB_URL = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = TEST_DB_URL

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from fitstore.config import settings
from fitstore.core import db as db_module
from fitstore.core.security import hash_password
from fitstore.main import app
from fitstore.models.product import Product
from fitstore.models.user import User


db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL

API = settings.API_PREFIX


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Fresh schema without an HTTP client, for service-level tests.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    # Use ASGITransport without lifespan parameter (not supported in all httpx versions)
    try:
        transport = ASGITransport(app=app, lifespan="off")
    except TypeError:
        # Fallback for httpx versions that don't support lifespan parameter
        transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest.fixture
def admin_credentials() -> dict[str, str]:
    return {"email": settings.admin_email, "password": settings.admin_password}


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create regular users directly via ORM.
    """

    async def _create_user(password: str = "UserPass!23", email: str | None = None, name: str = "Test User") -> tuple[User, str]:
        user = await User.create(
            name=name,
            email=email or f"{uuid.uuid4().hex[:6]}@fitstore.io",
            password_hash=hash_password(password),
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def products():
    """
    A small catalog: P1 at 30.00, P2 at 75.00, P3 at 19.99.
    """
    rows = [
        Product(id="P1", name="Jump Rope", company="FlexFit", type="equipment", price=Decimal("30.00"), weight="0.3 kg", img="rope.png"),
        Product(id="P2", name="Whey Protein", company="NutriMax", type="supplement", price=Decimal("75.00"), weight="2 kg", img="whey.png"),
        Product(id="P3", name="Shaker Bottle", company="NutriMax", type="equipment", price=Decimal("19.99"), weight="0.2 kg", img=None),
    ]
    await Product.bulk_create(rows)
    return rows


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post(f"{API}/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def admin_headers(auth_header_factory, admin_credentials):
    return await auth_header_factory(admin_credentials["email"], admin_credentials["password"])
