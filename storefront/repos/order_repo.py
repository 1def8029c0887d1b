# storefront/repos/order_repo.py
import re
from typing import List, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.errors import InvalidArgumentError

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def resolve_sort_column(sort_by: str):
    """Map a sort field (``order_date`` or ``orderDate``) to an orders column."""
    name = _CAMEL.sub("_", sort_by).lower()
    column = OrderModel.__table__.columns.get(name)
    if column is None:
        raise InvalidArgumentError(f"Unknown sort field: {sort_by}")
    return getattr(OrderModel, name)


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_order(self, order_id: str) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def save_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def delete_order(self, order: OrderModel) -> None:
        self.db.delete(order)
        self.db.flush()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def get_orders_by_user(self, user_id: str) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel).where(OrderModel.user_id == user_id)
            ).scalars().all()
        )

    def get_orders_page(
        self,
        page_number: int,
        page_size: int,
        sort_by: str,
        descending: bool,
    ) -> Tuple[Sequence[OrderModel], int]:
        column = resolve_sort_column(sort_by)
        order_clause = column.desc() if descending else column.asc()

        total = self.db.execute(select(func.count()).select_from(OrderModel)).scalar_one()
        rows = self.db.execute(
            select(OrderModel)
            .order_by(order_clause, OrderModel.id)
            .offset(page_number * page_size)
            .limit(page_size)
        ).scalars().all()
        return rows, total
