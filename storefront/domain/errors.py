"""Errors raised by the cart and order services.

There is one recoverable error type, ``StoreError``; ``kind`` tells the
presentation layer how to report it.
"""
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONFLICT = "CONFLICT"


class StoreError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class NotFoundError(StoreError):
    """Referenced user, product, cart, cart item or order does not exist."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.NOT_FOUND, message)


class InvalidArgumentError(StoreError):
    """Bad quantity, empty cart at checkout, unknown sort field, bad page."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.INVALID_ARGUMENT, message)


class ConflictError(StoreError):
    """Cart is locked or was modified concurrently."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.CONFLICT, message)
