"""Product service layer (Use Cases).

Orchestrates business logic for the Product entity, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Update and delete first confirm the product exists (``get_by_id``).
- The service stamps ``created_at`` / ``updated_at``; uniqueness of
  ``code`` is left to the repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from django.utils import timezone

from modules.products.entities import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product.

        Raises:
            ProductAlreadyExists: if the code is already taken.
        """
        product = Product.new(name=dto.name, code=dto.code, image_url=dto.image_url)
        self._repo.create(product)
        return product

    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Rewrite an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if the new code collides.
        """
        existing = self._repo.get_by_id(id)
        product = Product(
            id=id,
            name=dto.name,
            code=dto.code,
            image_url=dto.image_url,
            created_at=existing.created_at,
            updated_at=timezone.now(),
        )
        self._repo.update(product)
        return product

    def delete_product(self, id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self._repo.get_by_id(id)
        self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        return self._repo.get_by_id(id)

    def list_products(self) -> List[Product]:
        """Return every product ordered by ID."""
        return self._repo.get_all()
