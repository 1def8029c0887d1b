# storefront/repos/cart_repo.py
from typing import Any, Callable, Dict, Tuple

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel


class CartRepo:
    """
    Dostep do koszykow i ich pozycji.
    Metody nie commituja, transakcja jest po stronie serwisu.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, cart_id: str) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def get_cart_by_user(self, user_id: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalars().first()

    def get_or_create_cart(
        self,
        user_id: str,
        factory: Callable[[], CartModel],
    ) -> Tuple[CartModel, bool]:
        """Return the user's cart, or a new pending one built by ``factory``.

        The second element tells whether the cart was created by this call.
        """
        cart = self.get_cart_by_user(user_id)
        if cart:
            return cart, False

        cart = factory()
        self.db.add(cart)
        return cart, True

    def get_cart_item(self, cart_item_id: int) -> CartItemModel | None:
        return self.db.get(CartItemModel, cart_item_id)

    def save_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def update_cart_version(
        self,
        cart_id: str,
        old_version: int,
        new_data: Dict[str, Any],
    ) -> int:
        #update carts set version = old + 1 where id = :id and version = :old
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(**new_data)
        )
        return result.rowcount

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
