"""Product domain exceptions.

Raised by repositories and the Service Layer.  The API layer (Views)
catches these and translates them into appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import AlreadyExistsError, InUseError, NotFoundError


class ProductAlreadyExists(AlreadyExistsError):
    """A product with the same code already exists."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"product with code {code} already exists")


class ProductNotFound(NotFoundError):
    """The requested product does not exist."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"product with ID {product_id} not found")


class ProductInUse(InUseError):
    """The product is still referenced by stock rows."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"product with ID {product_id} is referenced by stocks")
