"""Data models module for Platypor."""

# Balance
from platypor.models.balance import GameBalance

# Player
from platypor.models.player import PlayerState, Vitality

# Catalog
from platypor.models.catalog import (
    ActionDefinition,
    ActionKind,
    Catalog,
    ProductDefinition,
    ProductKind,
)

# Results
from platypor.models.results import (
    ActionResult,
    DialogueEvent,
    EngineResult,
    PurchaseResult,
    Rejection,
    TickResult,
)

__all__ = [
    # Balance
    "GameBalance",
    # Player
    "PlayerState",
    "Vitality",
    # Catalog
    "ActionDefinition",
    "ActionKind",
    "Catalog",
    "ProductDefinition",
    "ProductKind",
    # Results
    "ActionResult",
    "DialogueEvent",
    "EngineResult",
    "PurchaseResult",
    "Rejection",
    "TickResult",
]
