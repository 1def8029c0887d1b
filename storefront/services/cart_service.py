from datetime import datetime
from decimal import Decimal
from typing import Callable

from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import ConflictError, InvalidArgumentError, NotFoundError
from storefront.domain.schemas import CartOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.lock_service import LockService
from storefront.utils.logging import get_logger
from storefront.utils.providers import new_id, utc_now

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla koszyka usera.
    commands (add, remove, clear) modyfikuja stan pod lockiem usera
    query (get) tylko odczyt
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ):
        self.repo = CartRepo(db)
        self.users = UserRepo(db)
        self.products = ProductRepo(db)
        self.lock_service = lock_service
        self.clock = clock
        self.id_factory = id_factory

    #query - odczyt
    def get_cart_by_user(self, user_id: str) -> CartOut:
        cart = self._require_cart_of_user(user_id)
        return CartOut.model_validate(cart)

    #commands
    def add_item_to_cart(self, user_id: str, product_id: str, quantity: int) -> CartOut:
        # Walidacje
        if quantity <= 0:
            raise InvalidArgumentError("Requested quantity is not valid")

        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found with given id")

        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found with given id")

        logger.info("Adding item to cart", user_id=user_id, product_id=product_id, quantity=quantity)

        with self.lock_service.hold_cart_lock(user_id):
            try:
                cart, created = self.repo.get_or_create_cart(
                    user_id,
                    lambda: CartModel(
                        id=self.id_factory(),
                        user_id=user_id,
                        created_at=self.clock(),
                        version=1,
                    ),
                )
                if created:
                    logger.info(f"Created cart {cart.id} for user {user_id}")

                total_price = Decimal(quantity) * product.discounted_price

                # Jesli produkt juz jest w koszyku to nadpisz ilosc, nie dodawaj
                existing_item = next(
                    (i for i in cart.items if i.product_id == product_id), None
                )
                if existing_item:
                    existing_item.quantity = quantity
                    existing_item.total_price = total_price
                else:
                    cart.items.append(
                        CartItemModel(
                            product=product,
                            product_id=product_id,
                            quantity=quantity,
                            total_price=total_price,
                        )
                    )

                cart.user_id = user.id
                self.repo.save_cart(cart)
                self._bump_version(cart)
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

        logger.debug("Updated cart items", cart_id=cart.id, items=len(cart.items))
        return CartOut.model_validate(cart)

    def remove_item_from_cart(self, user_id: str, cart_item_id: int) -> None:
        logger.info("Removing item from cart", user_id=user_id, cart_item_id=cart_item_id)

        with self.lock_service.hold_cart_lock(user_id):
            item = self.repo.get_cart_item(cart_item_id)
            # pozycja z cudzego koszyka wyglada jak nieistniejaca
            if not item or item.cart.user_id != user_id:
                raise NotFoundError("Cart item not found")

            cart = item.cart
            try:
                cart.items.remove(item)
                self.repo.save_cart(cart)
                self._bump_version(cart)
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

    def clear_cart(self, user_id: str) -> None:
        logger.info("Clearing cart", user_id=user_id)

        with self.lock_service.hold_cart_lock(user_id):
            cart = self._require_cart_of_user(user_id)
            try:
                cart.items.clear()
                self.repo.save_cart(cart)
                self._bump_version(cart)
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

    def _require_cart_of_user(self, user_id: str) -> CartModel:
        if not self.users.get_user(user_id):
            raise NotFoundError("User not found with given id")

        cart = self.repo.get_cart_by_user(user_id)
        if not cart:
            raise NotFoundError("Cart of given user not found")
        return cart

    def _bump_version(self, cart: CartModel) -> None:
        # Optimistic locking, np update set version 2 where id 1 and version 1
        old_version = cart.version
        rowcount = self.repo.update_cart_version(
            cart_id=cart.id,
            old_version=old_version,
            new_data={"version": old_version + 1},
        )
        if rowcount == 0:
            logger.warning("Cart version conflict", cart_id=cart.id, version=old_version)
            raise ConflictError("Cart was modified by another operation")
