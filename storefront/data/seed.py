# storefront/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.data.models.category import CategoryModel
from storefront.data.models.product import ProductModel
from storefront.data.models.user import UserModel
from storefront.repos.product_repo import ProductRepo
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger
from storefront.utils.providers import new_id

logger = get_logger(__name__)

DEMO_USER_EMAIL = "demo@storefront.local"


def seed(db: Session) -> bool:
    """Insert a demo catalog and user. Only seeds an empty product table."""
    products = ProductRepo(db)
    if products.has_products():
        return False

    category = products.create_category(
        CategoryModel(id=new_id(), title="Electronics", description="Phones, laptops and accessories")
    )
    products.create_product(
        ProductModel(
            id=new_id(),
            title="Wireless Keyboard",
            price=Decimal("199.99"),
            discounted_price=Decimal("149.99"),
            category_id=category.id,
        )
    )
    products.create_product(
        ProductModel(
            id=new_id(),
            title="USB-C Monitor",
            price=Decimal("899.00"),
            discounted_price=Decimal("799.00"),
            category_id=category.id,
        )
    )

    users = UserRepo(db)
    if not users.get_user_by_email(DEMO_USER_EMAIL):
        users.create_user(UserModel(id=new_id(), name="Demo User", email=DEMO_USER_EMAIL))

    logger.info("Seeded demo catalog")
    return True
