# fitstore/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitstore.config import settings
from fitstore.core.bootstrap import seed_products
from fitstore.core.db import init_db, close_db
from fitstore.core.errors import register_exception_handlers

from fitstore.api.routers import auth, profile, cart, admin

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (bearer tokens travel in the Authorization header)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    await init_db(generate_schemas=settings.generate_schemas)
    # Ensure the storefront has something to sell on first run
    await seed_products()
    logger.info("[startup] %s ready, routes under %s", settings.APP_NAME, settings.API_PREFIX)


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()


# REST
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(profile.router, prefix=settings.API_PREFIX)
app.include_router(cart.router, prefix=settings.API_PREFIX)
app.include_router(admin.router, prefix=settings.API_PREFIX)


@app.get("/healthz")
def healthz():
    return {"ok": True}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("fitstore.main:app", host=settings.host, port=settings.port)
