"""Alive/Dead terminal state machine."""

import logging

from platypor.models.player import PlayerState, Vitality
from platypor.models.results import DialogueEvent

logger = logging.getLogger(__name__)


class Lifecycle:
    """Handles the one-way Alive -> Dead transition."""

    @staticmethod
    def should_die(player: PlayerState) -> bool:
        return player.stress >= 1.0 or player.health <= 0.0

    @staticmethod
    def die(player: PlayerState) -> list[DialogueEvent]:
        """
        Move the player to Dead.

        Returns:
            [TERMINAL] on the transition, an empty list if already dead
        """
        if player.is_dead:
            return []

        player.vitality = Vitality.DEAD
        logger.warning(
            f"Player died (stress={player.stress:.3f}, health={player.health:.3f}, level={player.level})"
        )
        return [DialogueEvent.TERMINAL]
