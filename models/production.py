"""
Production Models

Contains the batch descriptors supplied for a production run and the
consolidated PackagingNeed and ShoppingItem records derived from them.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PackagingSpec:
    """Packaging consumed per finished item, with an inventory snapshot."""
    packaging_type_id: int
    name: str
    quantity_per_yield: float
    current_stock: int = 0
    reorder_threshold: int = 0


@dataclass(frozen=True)
class PackagingBatch:
    """A batch of target_quantity finished items and the packaging they use."""
    target_quantity: float
    packaging: list[PackagingSpec] = field(default_factory=list)


@dataclass(frozen=True)
class PackagingNeed:
    """Packaging required across all batches for one packaging type."""
    packaging_type_id: int
    name: str
    quantity_needed: int
    current_stock: int
    shortfall: int
    is_low_stock: bool


@dataclass(frozen=True)
class ShoppingIngredient:
    """An ingredient line of a batch, weighed at the recipe's base yield."""
    ingredient_name: str
    unit_grams: float | None
    ingredient_id: int | None = None


@dataclass(frozen=True)
class ShoppingBatch:
    """A named batch with the factor its recipe is scaled by."""
    name: str
    scaling_factor: float
    ingredients: list[ShoppingIngredient] = field(default_factory=list)


@dataclass(frozen=True)
class BatchContribution:
    batch_name: str
    grams: float


@dataclass(frozen=True)
class ShoppingItem:
    """Consolidated shopping list entry for one ingredient."""
    ingredient_id: int | None
    name: str
    total_grams: float
    display_quantity: str
    batches: list[BatchContribution]
