"""Player state model."""

from enum import Enum

from pydantic import BaseModel, Field

from platypor.config import DEFAULT_STARTING_MONEY


class Vitality(str, Enum):
    """Life cycle of the player."""

    ALIVE = "alive"
    DEAD = "dead"


class PlayerState(BaseModel):
    """The single mutable player entity.

    Unlike the catalog and balance models this one is mutated in place by the
    engines; construction validates the bounds, after that the engines keep
    every bounded stat clamped into [0, 1].
    """

    # Bounded stats
    stress: float = Field(default=0.0, ge=0.0, le=1.0, description="Stress, death at 1")
    famine: float = Field(default=0.0, ge=0.0, le=1.0, description="Hunger, health drains at 1")
    health: float = Field(default=1.0, ge=0.0, le=1.0, description="Health, death at 0")
    wisdom: float = Field(default=0.0, ge=0.0, le=1.0, description="Wisdom, levels up at 1")
    vigor: float = Field(default=1.0, ge=0.0, le=1.0, description="Readiness to act again")

    money: float = Field(
        default=DEFAULT_STARTING_MONEY, allow_inf_nan=False, description="Money, may dip below zero after a gamble"
    )
    level: int = Field(default=1, ge=1, description="Player level")

    # Inventory
    beers: int = Field(default=0, ge=0)
    cigarettes: int = Field(default=0, ge=0)

    # Equipment
    owns_sword: bool = False
    sword_equipped: bool = False
    owns_shield: bool = False
    shield_equipped: bool = False

    # Upgrades
    owns_instructions: bool = False
    owns_purse: bool = False
    owns_vision: bool = Field(default=False, description="Unlocks the theme toggle")
    owns_memory: bool = Field(default=False, description="Unlocks saving")
    owns_reach: bool = False
    owns_stomach: bool = Field(default=False, description="Halves hunger accrual")
    owns_house: bool = Field(default=False, description="Suppresses stress accrual")
    can_read: bool = False

    # Session bookkeeping
    vitality: Vitality = Field(default=Vitality.ALIVE)
    dialogue_timer: float = Field(default=0.0, ge=0.0, description="Seconds since the last ambient line")

    @property
    def is_dead(self) -> bool:
        return self.vitality == Vitality.DEAD

    @property
    def sword_visible(self) -> bool:
        return self.owns_sword and self.sword_equipped

    @property
    def shield_visible(self) -> bool:
        return self.owns_shield and self.shield_equipped
