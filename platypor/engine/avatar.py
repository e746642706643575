"""Avatar key derivation for the renderer."""

from enum import IntFlag
from functools import lru_cache

from platypor.models.player import PlayerState


class AvatarLayer(IntFlag):
    """Visible gear layered over the base sprite."""

    NONE = 0
    SWORD = 1
    SHIELD = 2


@lru_cache(maxsize=16)
def _key_for(owns_sword: bool, sword_equipped: bool, owns_shield: bool, shield_equipped: bool) -> AvatarLayer:
    key = AvatarLayer.NONE
    if owns_sword and sword_equipped:
        key |= AvatarLayer.SWORD
    if owns_shield and shield_equipped:
        key |= AvatarLayer.SHIELD
    return key


def derive_avatar_key(player: PlayerState) -> AvatarLayer:
    """Key of the gear currently visible on the avatar."""
    return _key_for(player.owns_sword, player.sword_equipped, player.owns_shield, player.shield_equipped)


def sprite_layers(key: AvatarLayer) -> list[str]:
    """Sprite names in paint order: shield behind the body, sword in front."""
    layers = []
    if AvatarLayer.SHIELD in key:
        layers.append("shield")
    layers.append("base")
    if AvatarLayer.SWORD in key:
        layers.append("sword")
    return layers
