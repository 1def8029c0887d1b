# storefront/utils/pagination.py
import math
from typing import Any, Callable, Sequence, Type

from storefront.domain.schemas import PageOut


def build_page(
    page_cls: Type[PageOut],
    rows: Sequence[Any],
    total: int,
    page_number: int,
    page_size: int,
    mapper: Callable[[Any], Any],
) -> PageOut:
    """Wrap one slice of rows into the pageable response shape."""
    total_pages = math.ceil(total / page_size)

    return page_cls(
        content=[mapper(r) for r in rows],
        page_number=page_number,
        page_size=page_size,
        total_elements=total,
        total_pages=total_pages,
        last_page=page_number >= total_pages - 1,
    )
