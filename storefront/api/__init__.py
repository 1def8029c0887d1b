# storefront/api/__init__.py
from fastapi import FastAPI

from storefront.api.errors import register_exception_handlers
from storefront.api.routers import carts, health, orders, users


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(carts.router)
    app.include_router(orders.router)

    return app
