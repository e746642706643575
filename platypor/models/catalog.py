"""Action and product catalog models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ActionKind(str, Enum):
    """Instantaneous actions the player can take."""

    PECK = "action_peck"
    GLOW = "action_glow"
    POISON = "action_poison"
    SMOKE = "action_smoke"
    DRINK = "action_drink"
    GAMBLE = "action_gamble"
    POKEMON = "action_pokemon"
    READ = "action_read"

    @classmethod
    def lookup(cls, action_id: str) -> Optional["ActionKind"]:
        """Return the kind for an id, or None if the id is unknown."""
        try:
            return cls(action_id)
        except ValueError:
            return None


class ProductKind(str, Enum):
    """Purchasable products."""

    BEER = "product_beer"
    CIGARETTES = "product_cigarettes"
    INSTRUCTIONS = "product_instructions"
    PURSE = "product_purse"
    SWORD = "product_sword"
    SHIELD = "product_shield"
    VISION = "product_vision"
    BRAIN = "product_brain"
    REACH = "product_reach"
    ACID = "product_acid"
    PROPERTY = "product_property"
    FREEDOM = "product_freedom"

    @classmethod
    def lookup(cls, product_id: str) -> Optional["ProductKind"]:
        """Return the kind for an id, or None if the id is unknown."""
        try:
            return cls(product_id)
        except ValueError:
            return None

    @property
    def is_consumable(self) -> bool:
        """Consumables restock on every purchase instead of being owned once."""
        return self in CONSUMABLE_PRODUCTS

    @property
    def requires_purse(self) -> bool:
        return self in PURSE_GATED_PRODUCTS


CONSUMABLE_PRODUCTS = frozenset({ProductKind.BEER, ProductKind.CIGARETTES})
PURSE_GATED_PRODUCTS = frozenset(
    {ProductKind.BEER, ProductKind.CIGARETTES, ProductKind.SWORD, ProductKind.SHIELD}
)


class ActionDefinition(BaseModel):
    """Action button definition."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    id: str = Field(min_length=1, description="Action identifier")
    text: str = Field(description="Display text")

    @property
    def kind(self) -> Optional[ActionKind]:
        return ActionKind.lookup(self.id)


class ProductDefinition(BaseModel):
    """Product button definition."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    id: str = Field(min_length=1, description="Product identifier")
    text: str = Field(description="Display text")
    price: float = Field(ge=0, description="Price in money")

    @property
    def kind(self) -> Optional[ProductKind]:
        return ProductKind.lookup(self.id)


class Catalog(BaseModel):
    """Complete catalog of actions and products, keyed by id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)  # Immutable model

    actions: list[ActionDefinition] = Field(
        default_factory=list, alias="actionButtons", description="Action definitions in display order"
    )
    products: list[ProductDefinition] = Field(
        default_factory=list, alias="productButtons", description="Product definitions in display order"
    )

    @model_validator(mode="after")
    def check_unique_ids(self) -> "Catalog":
        """Ids are lookup keys, so duplicates are a malformed catalog."""
        for label, entries in (("action", self.actions), ("product", self.products)):
            seen: set[str] = set()
            for entry in entries:
                if entry.id in seen:
                    raise ValueError(f"Duplicate {label} id: {entry.id}")
                seen.add(entry.id)
        return self

    def get_action(self, action_id: str) -> Optional[ActionDefinition]:
        return next((a for a in self.actions if a.id == action_id), None)

    def get_product(self, product_id: str) -> Optional[ProductDefinition]:
        return next((p for p in self.products if p.id == product_id), None)
