#storefront/api/routers/carts.py
from fastapi import APIRouter, Depends

from storefront.api.deps import get_cart_service
from storefront.domain.schemas import AddItemToCartIn, CartOut, MessageOut
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.post("/{user_id}", response_model=CartOut)
def add_item_to_cart(
    user_id: str,
    payload: AddItemToCartIn,
    svc: CartService = Depends(get_cart_service),
):
    return svc.add_item_to_cart(
        user_id=user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.delete("/{user_id}/items/{item_id}", response_model=MessageOut)
def remove_item_from_cart(
    user_id: str,
    item_id: int,
    svc: CartService = Depends(get_cart_service),
):
    svc.remove_item_from_cart(user_id, item_id)
    return MessageOut(message="Item is removed", success=True, status=200)


@router.delete("/{user_id}", response_model=MessageOut)
def clear_cart(user_id: str, svc: CartService = Depends(get_cart_service)):
    svc.clear_cart(user_id)
    return MessageOut(message="Cart is now blank", success=True, status=200)


@router.get("/{user_id}", response_model=CartOut)
def get_cart(user_id: str, svc: CartService = Depends(get_cart_service)):
    return svc.get_cart_by_user(user_id)
