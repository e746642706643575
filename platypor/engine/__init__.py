"""Game engine package."""

from platypor.engine.action_resolver import ActionResolver
from platypor.engine.avatar import AvatarLayer, derive_avatar_key, sprite_layers
from platypor.engine.economy import Economy
from platypor.engine.equipment import EquipmentManager, EquipmentSlot
from platypor.engine.game_engine import GameEngine
from platypor.engine.lifecycle import Lifecycle
from platypor.engine.rng import RandomSource
from platypor.engine.simulation import TickSimulator
from platypor.engine.stat_calculator import StatCalculator

__all__ = [
    "ActionResolver",
    "AvatarLayer",
    "derive_avatar_key",
    "sprite_layers",
    "Economy",
    "EquipmentManager",
    "EquipmentSlot",
    "GameEngine",
    "Lifecycle",
    "RandomSource",
    "TickSimulator",
    "StatCalculator",
]
