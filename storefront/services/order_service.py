# storefront/services/order_service.py
from datetime import datetime
from decimal import Decimal
from typing import Callable, List

from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import ConflictError, InvalidArgumentError, NotFoundError
from storefront.domain.schemas import CreateOrderIn, OrderOut, PageOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.utils.logging import get_logger
from storefront.utils.pagination import build_page
from storefront.utils.providers import new_id, utc_now

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Separacja od CartService, koszyk jest tu tylko zrodlem pozycji.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ):
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)
        self.users = UserRepo(db)
        self.lock_service = lock_service
        self.notification_service = notification_service
        self.clock = clock
        self.id_factory = id_factory

    def create_order(self, payload: CreateOrderIn) -> OrderOut:
        """
        Use Case: Tworzenie zamówienia z koszyka.

        1. Weryfikuje usera i koszyk (niepusty)
        2. Kopiuje pozycje koszyka do zamowienia i liczy order_amount
        3. Zapisuje zamowienie i czysci koszyk w jednej transakcji
        4. Wysyła powiadomienie (async)
        """
        user = self.users.get_user(payload.user_id)
        if not user:
            raise NotFoundError("User not found with given id")

        with self.lock_service.hold_cart_lock(payload.user_id):
            cart = self.carts.get_cart(payload.cart_id)
            if not cart or cart.user_id != user.id:
                raise NotFoundError("Cart not found with given id")

            if len(cart.items) < 1:
                raise InvalidArgumentError("Invalid number of items in cart")

            order = OrderModel(
                id=self.id_factory(),
                user_id=user.id,
                billing_name=payload.billing_name,
                billing_phone=payload.billing_phone,
                billing_address=payload.billing_address,
                order_date=self.clock(),
                delivered_date=None,
                payment_status=payload.payment_status,
                order_status=payload.order_status,
            )

            order_amount = Decimal("0.00")
            for cart_item in cart.items:
                # cena liczona na nowo w chwili zamowienia
                total_price = Decimal(cart_item.quantity) * cart_item.product.discounted_price
                order.items.append(
                    OrderItemModel(
                        product=cart_item.product,
                        product_id=cart_item.product_id,
                        quantity=cart_item.quantity,
                        total_price=total_price,
                    )
                )
                order_amount += total_price
            order.order_amount = order_amount

            # zamowienie + czyszczenie koszyka = jedna transakcja
            try:
                self.repo.save_order(order)
                cart.items.clear()
                self.carts.save_cart(cart)

                old_version = cart.version
                rowcount = self.carts.update_cart_version(
                    cart_id=cart.id,
                    old_version=old_version,
                    new_data={"version": old_version + 1},
                )
                if rowcount == 0:
                    raise ConflictError("Cart was modified by another operation")

                self.carts.commit()
            except Exception:
                logger.warning("Order placement rolled back", user_id=payload.user_id, cart_id=payload.cart_id)
                self.carts.rollback()
                raise

        logger.info(f"Order {order.id} created from cart {cart.id}, amount {order.order_amount}")

        self.notification_service.send_order_notification(user.id, order.id, order.order_amount)

        return OrderOut.model_validate(order)

    def remove_order(self, order_id: str) -> None:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Given order id not found")

        try:
            self.repo.delete_order(order)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Order {order_id} removed")

    #query
    def get_orders_of_user(self, user_id: str) -> List[OrderOut]:
        if not self.users.get_user(user_id):
            raise NotFoundError("User not found with given id")

        return [OrderOut.model_validate(o) for o in self.repo.get_orders_by_user(user_id)]

    def get_orders(
        self,
        page_number: int,
        page_size: int,
        sort_by: str,
        sort_dir: str,
    ) -> PageOut:
        if page_number < 0:
            raise InvalidArgumentError("Page number must not be negative")
        if page_size <= 0:
            raise InvalidArgumentError("Page size must be greater than 0")

        descending = sort_dir.lower() == "desc"
        rows, total = self.repo.get_orders_page(page_number, page_size, sort_by, descending)

        return build_page(PageOut[OrderOut], rows, total, page_number, page_size, OrderOut.model_validate)
