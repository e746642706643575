"""Equipment toggling."""

from enum import Enum

from platypor.models.player import PlayerState
from platypor.models.results import EngineResult, Rejection


class EquipmentSlot(str, Enum):
    """Gear that can be switched on and off."""

    SWORD = "sword"
    SHIELD = "shield"


class EquipmentManager:
    """Handles equipping and unequipping owned gear."""

    @staticmethod
    def toggle(player: PlayerState, slot: EquipmentSlot) -> EngineResult:
        """
        Flip the equipped flag of an owned piece of gear.

        Args:
            player: Player to mutate
            slot: Gear to switch

        Returns:
            EngineResult, rejected if the player is dead or does not own the gear
        """
        if player.is_dead:
            return EngineResult.rejected(Rejection.DEAD)

        if slot == EquipmentSlot.SWORD:
            if not player.owns_sword:
                return EngineResult.rejected(Rejection.NOT_OWNED)
            player.sword_equipped = not player.sword_equipped
        elif slot == EquipmentSlot.SHIELD:
            if not player.owns_shield:
                return EngineResult.rejected(Rejection.NOT_OWNED)
            player.shield_equipped = not player.shield_equipped
        else:
            raise ValueError(f"Unknown equipment slot: {slot}")

        return EngineResult.ok()
