# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Generic, List, TypeVar
from decimal import Decimal
from datetime import datetime

T = TypeVar("T")


class UserCreate(BaseModel):
    """Schema dla tworzenia użytkownika."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)


class UserOut(BaseModel):
    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class ProductOut(BaseModel):
    id: str
    title: str
    price: Decimal
    discounted_price: Decimal

    model_config = ConfigDict(from_attributes=True)


class AddItemToCartIn(BaseModel):
    """Schema dla dodawania produktu do koszyka.

    quantity is validated by the cart service so that a non-positive value is
    reported the same way from HTTP and from direct calls.
    """

    product_id: str = Field(..., min_length=1)
    quantity: int


class CartItemOut(BaseModel):
    id: int
    product: ProductOut
    quantity: int
    total_price: Decimal

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    id: str
    user_id: str
    created_at: datetime
    items: List[CartItemOut]

    model_config = ConfigDict(from_attributes=True)


class CreateOrderIn(BaseModel):
    """Schema dla tworzenia zamówienia z koszyka."""

    user_id: str = Field(..., min_length=1)
    cart_id: str = Field(..., min_length=1)
    billing_name: str = Field(..., min_length=1)
    billing_phone: str = Field(..., min_length=1)
    billing_address: str = Field(..., min_length=1)
    payment_status: str = "NOTPAID"
    order_status: str = "PENDING"


class OrderItemOut(BaseModel):
    id: int
    product: ProductOut
    quantity: int
    total_price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: str
    user_id: str
    billing_name: str
    billing_phone: str
    billing_address: str
    order_date: datetime
    delivered_date: datetime | None = None
    payment_status: str
    order_status: str
    order_amount: Decimal
    items: List[OrderItemOut]

    model_config = ConfigDict(from_attributes=True)


class PageOut(BaseModel, Generic[T]):
    content: List[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    last_page: bool


class MessageOut(BaseModel):
    message: str
    success: bool
    status: int
