"""
Pytest configuration and fixtures.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import storefront.data.models  # noqa: F401
from storefront.api import create_app
from storefront.api.deps import get_lock_service, get_notification_service
from storefront.data.database import Base, get_db, make_engine
from storefront.data.models.product import ProductModel
from storefront.data.models.user import UserModel
from storefront.domain.schemas import CreateOrderIn
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.cart_service import CartService
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.services.order_service import OrderService
from storefront.utils.providers import new_id

FIXED_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Returns start, start + step, start + 2 * step, ... on each call."""

    def __init__(self, start: datetime = FIXED_NOW, step: timedelta = timedelta(minutes=1)):
        self.current = start - step
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.set.return_value = True
    client.eval.return_value = 1
    return client


@pytest.fixture
def lock_service(redis_client):
    return LockService(client=redis_client)


@pytest.fixture
def notifier():
    return MagicMock(spec=NotificationService)


@pytest.fixture
def cart_service(db, lock_service):
    return CartService(db=db, lock_service=lock_service, clock=lambda: FIXED_NOW)


@pytest.fixture
def order_service(db, lock_service, notifier):
    return OrderService(
        db=db,
        lock_service=lock_service,
        notification_service=notifier,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def make_user(db):
    def _make(name: str = "Alice"):
        return UserRepo(db).create_user(
            UserModel(id=new_id(), name=name, email=f"{name.lower()}-{new_id()[:8]}@example.com")
        )

    return _make


@pytest.fixture
def make_product(db):
    def _make(discounted_price: str = "100.00", price: str | None = None, title: str = "Phone"):
        return ProductRepo(db).create_product(
            ProductModel(
                id=new_id(),
                title=title,
                price=Decimal(price or discounted_price),
                discounted_price=Decimal(discounted_price),
            )
        )

    return _make


@pytest.fixture
def user(make_user):
    return make_user("Alice")


@pytest.fixture
def product(make_product):
    return make_product("100.00", price="120.00", title="P1")


@pytest.fixture
def order_request():
    def _build(user_id: str, cart_id: str, **overrides):
        data = dict(
            user_id=user_id,
            cart_id=cart_id,
            billing_name="Alice Smith",
            billing_phone="+48 600 100 200",
            billing_address="1 Market Street",
        )
        data.update(overrides)
        return CreateOrderIn(**data)

    return _build


@pytest.fixture
def cart_of(db):
    def _get(user_id: str):
        return CartRepo(db).get_cart_by_user(user_id)

    return _get


@pytest.fixture
def client(db, lock_service, notifier):
    app = create_app()
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    app.dependency_overrides[get_notification_service] = lambda: notifier
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def step_clock():
    return StepClock()
