"""
Catalog - Fixed, ordered collection of products.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from vending_machine.core.exceptions import CatalogError
from vending_machine.domain.products import Product


class Catalog:
    """
    Immutable product catalog.

    Products keep the order they were given in. Ids must be unique.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """
        Build the catalog.

        Args:
            products: Products in display order.

        Raises:
            CatalogError: If two products share an id.
        """
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[int, Product] = {}

        for product in self._products:
            if product.id in self._by_id:
                raise CatalogError(
                    f"Duplicate product id: {product.id}",
                    details={"product_id": product.id},
                )
            self._by_id[product.id] = product

    def find(self, product_id: int) -> Optional[Product]:
        """
        Get a product by id.

        Args:
            product_id: Product id.

        Returns:
            Product or None if not found.
        """
        return self._by_id.get(product_id)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog({len(self)} products)"


def default_catalog() -> Catalog:
    """Catalog the machine is stocked with at start-up."""
    return Catalog(
        [
            Product.drink(1, "Coca-Cola", 15, volume=330),
            Product.snack(2, "Chips", 20, weight=150),
            Product.toy(3, "Action Figure", 50, material="Plastic"),
        ]
    )
