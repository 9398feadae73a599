# fitstore/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _origins(raw: str | None) -> list[str]:
    if not raw:
        return [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Fitness Store API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Every REST route is mounted under this prefix (the storefront calls /api/...)
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = _origins(os.getenv("CORS_ORIGINS"))

    # Persistence location
    database_url: str = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")

    # Token signing
    jwt_secret: str = os.getenv("JWT_SECRET", "devsecret")
    jwt_alg: str = os.getenv("JWT_ALG", "HS256")
    access_token_expire_hours: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "12"))

    # Administrator credential (not a stored user)
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@fitnessmvp.com")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Create missing tables at startup instead of relying on Aerich migrations
    generate_schemas: bool = os.getenv("DB_GENERATE_SCHEMAS", "true").lower() in ("true", "1", "yes")

    # Insert the default catalog on first startup
    seed_products: bool = os.getenv("SEED_PRODUCTS", "true").lower() in ("true", "1", "yes")


settings = Settings()  # Instantiate configuration
