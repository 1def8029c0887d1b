# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_order_service
from storefront.domain.schemas import CreateOrderIn, MessageOut, OrderOut, PageOut
from storefront.services.order_service import OrderService
from storefront.utils.settings import (
    DEFAULT_ORDER_SORT_BY,
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_DIR,
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=OrderOut, status_code=201)
def create_order(
    payload: CreateOrderIn,
    svc: OrderService = Depends(get_order_service),
):
    """
    Tworzy zamówienie z koszyka i czyści koszyk.
    Wysyła powiadomienie asynchronicznie.
    """
    return svc.create_order(payload)


@router.delete("/{order_id}", response_model=MessageOut)
def remove_order(order_id: str, svc: OrderService = Depends(get_order_service)):
    svc.remove_order(order_id)
    return MessageOut(message="Order is removed", success=True, status=200)


@router.get("/users/{user_id}", response_model=List[OrderOut])
def get_orders_of_user(user_id: str, svc: OrderService = Depends(get_order_service)):
    return svc.get_orders_of_user(user_id)


@router.get("/", response_model=PageOut[OrderOut])
def get_orders(
    page_number: int = Query(DEFAULT_PAGE_NUMBER),
    page_size: int = Query(DEFAULT_PAGE_SIZE),
    sort_by: str = Query(DEFAULT_ORDER_SORT_BY),
    sort_dir: str = Query(DEFAULT_SORT_DIR),
    svc: OrderService = Depends(get_order_service),
):
    return svc.get_orders(page_number, page_size, sort_by, sort_dir)
