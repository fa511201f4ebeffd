"""
Products sold by the machine.

A product is a single record tagged with its kind. Behaviour that differs
per kind (the extra attribute shown in the description, the verb used
when the product is consumed) is looked up by tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Union

from vending_machine.configs import CURRENCY


class ProductKind(str, Enum):
    """Kinds of product the machine can hold."""

    DRINK = "drink"
    SNACK = "snack"
    TOY = "toy"


@dataclass(frozen=True)
class KindTraits:
    """Per-kind presentation data."""

    attribute_label: str
    attribute_unit: str
    attribute_type: type
    verb: str


KIND_TRAITS: Final[dict[ProductKind, KindTraits]] = {
    ProductKind.DRINK: KindTraits("Volume", "ml", int, "drink"),
    ProductKind.SNACK: KindTraits("Weight", "g", int, "eat"),
    ProductKind.TOY: KindTraits("Material", "", str, "play with"),
}


@dataclass(frozen=True)
class Product:
    """
    Immutable catalog entry.

    Attributes:
        id: Unique product id.
        name: Display name.
        cost: Price in whole currency units.
        kind: Product kind tag.
        attribute: Kind-specific value: volume in ml for drinks,
            weight in g for snacks, material name for toys.
    """

    id: int
    name: str
    cost: int
    kind: ProductKind
    attribute: Union[int, str]

    def __post_init__(self) -> None:
        """Validate the product."""
        if self.id <= 0:
            raise ValueError(f"Product id must be positive, got {self.id}")
        if self.cost < 0:
            raise ValueError("Cost cannot be negative")
        expected = KIND_TRAITS[self.kind].attribute_type
        # bool is an int subclass but never a valid volume or weight
        if not isinstance(self.attribute, expected) or isinstance(self.attribute, bool):
            raise ValueError(
                f"{self.kind.value} attribute must be {expected.__name__}, "
                f"got {type(self.attribute).__name__}"
            )

    @classmethod
    def drink(cls, id: int, name: str, cost: int, volume: int) -> Product:
        """Create a drink; ``volume`` in ml."""
        return cls(id=id, name=name, cost=cost, kind=ProductKind.DRINK, attribute=volume)

    @classmethod
    def snack(cls, id: int, name: str, cost: int, weight: int) -> Product:
        """Create a snack; ``weight`` in g."""
        return cls(id=id, name=name, cost=cost, kind=ProductKind.SNACK, attribute=weight)

    @classmethod
    def toy(cls, id: int, name: str, cost: int, material: str) -> Product:
        """Create a toy."""
        return cls(id=id, name=name, cost=cost, kind=ProductKind.TOY, attribute=material)

    @property
    def volume(self) -> Optional[int]:
        return self.attribute if self.kind is ProductKind.DRINK else None

    @property
    def weight(self) -> Optional[int]:
        return self.attribute if self.kind is ProductKind.SNACK else None

    @property
    def material(self) -> Optional[str]:
        return self.attribute if self.kind is ProductKind.TOY else None

    def summary(self) -> str:
        return summarize(self)

    def describe(self) -> str:
        return describe(self)

    def consume(self) -> str:
        return consume(self)


# =============================================================================
# Kind dispatch
# =============================================================================


def summarize(product: Product) -> str:
    """One-line summary: id, name and cost."""
    return f"Id: {product.id}, Name: {product.name}, Cost: {product.cost}{CURRENCY}"


def describe(product: Product) -> str:
    """
    Full description including the kind-specific attribute.

    Args:
        product: Product to describe.

    Returns:
        e.g. ``"Id: 1, Name: Coca-Cola, Cost: 15kr, Volume: 330ml"``.
    """
    traits = KIND_TRAITS[product.kind]
    return (
        f"{summarize(product)}, "
        f"{traits.attribute_label}: {product.attribute}{traits.attribute_unit}"
    )


def consume(product: Product) -> str:
    """Message shown after the product is bought."""
    return f"You {KIND_TRAITS[product.kind].verb} the {product.name}."
