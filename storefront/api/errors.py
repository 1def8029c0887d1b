# storefront/api/errors.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from storefront.domain.errors import ErrorKind, StoreError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.info("Request failed", path=request.url.path, kind=exc.kind.value, error=exc.message)
    return JSONResponse(
        status_code=_STATUS_BY_KIND[exc.kind],
        content={
            "message": exc.message,
            "code": exc.kind.value,
            "success": False,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
