"""Action resolution: readiness gating and per-action effects."""

import logging
from typing import Callable, Optional, assert_never

from platypor.engine.rng import RandomSource
from platypor.engine.stat_calculator import StatCalculator
from platypor.models.balance import GameBalance
from platypor.models.catalog import ActionKind
from platypor.models.player import PlayerState
from platypor.models.results import ActionResult, DialogueEvent, Rejection

logger = logging.getLogger(__name__)

GAMBLE_DRAW_RANGE = 1_000_000

LiteracyHook = Callable[[], None]


class ActionResolver:
    """Validates and applies player actions."""

    @staticmethod
    def is_ready(player: PlayerState) -> bool:
        """Actions and purchases need a full vigor bar."""
        return player.vigor >= 1.0

    @staticmethod
    def check_action(player: PlayerState, action_id: str) -> Optional[Rejection]:
        """
        Run every check that must pass before an action consumes vigor.

        Returns:
            None if the action may proceed, otherwise the rejection reason
        """
        if player.is_dead:
            return Rejection.DEAD

        kind = ActionKind.lookup(action_id)
        if kind is None:
            return Rejection.UNKNOWN_ID

        if not ActionResolver.is_ready(player):
            return Rejection.NOT_READY

        if kind == ActionKind.SMOKE and player.cigarettes <= 0:
            return Rejection.OUT_OF_STOCK
        if kind == ActionKind.DRINK and player.beers <= 0:
            return Rejection.OUT_OF_STOCK

        return None

    @staticmethod
    def perform_action(
        player: PlayerState,
        balance: GameBalance,
        action_id: str,
        rng: RandomSource,
        literacy_hook: Optional[LiteracyHook] = None,
    ) -> ActionResult:
        """
        Perform an action on the player in place.

        Args:
            player: Player to mutate
            balance: Balance configuration
            action_id: Catalog id of the action (e.g. "action_peck")
            rng: Random source for payouts and odds
            literacy_hook: Called once when reading succeeds

        Returns:
            ActionResult with acceptance, rejection reason and dialogue events
        """
        rejection = ActionResolver.check_action(player, action_id)
        if rejection is not None:
            if rejection == Rejection.UNKNOWN_ID:
                logger.warning(f"Unknown action id ignored: {action_id}")
            return ActionResult.rejected(rejection)

        kind = ActionKind(action_id)
        player.vigor = 0.0
        result = ActionResolver._apply(player, balance, kind, rng, literacy_hook)
        StatCalculator.clamp_stats(player)
        return result

    @staticmethod
    def _apply(
        player: PlayerState,
        balance: GameBalance,
        kind: ActionKind,
        rng: RandomSource,
        literacy_hook: Optional[LiteracyHook],
    ) -> ActionResult:
        match kind:
            case ActionKind.PECK:
                player.money += rng.uniform(balance.peck_money_min, balance.peck_money_max)
                return ActionResult.ok()
            case ActionKind.GLOW:
                player.wisdom += rng.uniform(balance.glow_wisdom_min, balance.glow_wisdom_max)
                return ActionResult.ok()
            case ActionKind.POISON:
                player.famine = 0.0
                return ActionResult.ok()
            case ActionKind.SMOKE:
                player.stress -= balance.smoke_stress_reduction
                player.cigarettes -= 1
                return ActionResult.ok()
            case ActionKind.DRINK:
                player.health += balance.drink_health_increase
                player.beers -= 1
                return ActionResult.ok()
            case ActionKind.GAMBLE:
                return ActionResolver._gamble(player, balance, rng)
            case ActionKind.POKEMON:
                return ActionResolver._pokemon(player, balance, rng)
            case ActionKind.READ:
                return ActionResolver._read(player, balance, literacy_hook)
            case _:
                assert_never(kind)

    @staticmethod
    def _gamble(player: PlayerState, balance: GameBalance, rng: RandomSource) -> ActionResult:
        if player.sword_equipped or player.shield_equipped:
            logger.info("Gamble refused by security: player is armed")
            return ActionResult.rejected(Rejection.SECURITY)

        # The threshold is compared literally against the draw, so 3 means 3 in a million
        if rng.below(GAMBLE_DRAW_RANGE) < balance.gamble_jackpot_chance:
            player.money += balance.gamble_jackpot_amount
            logger.info(f"Gamble jackpot: +{balance.gamble_jackpot_amount}")
            return ActionResult.ok(DialogueEvent.GAMBLE_WIN)

        player.money -= balance.gamble_loss_amount
        player.stress += balance.gamble_stress_increase
        return ActionResult.ok(DialogueEvent.GAMBLE_LOSE)

    @staticmethod
    def _pokemon(player: PlayerState, balance: GameBalance, rng: RandomSource) -> ActionResult:
        win_rate = balance.pokemon_base_win_rate
        if player.sword_equipped:
            win_rate += balance.pokemon_sword_bonus
        if player.shield_equipped:
            win_rate += balance.pokemon_shield_bonus

        if rng.chance() < win_rate:
            player.money += rng.uniform(balance.pokemon_win_money_min, balance.pokemon_win_money_max)
            player.wisdom += balance.pokemon_win_wisdom_increase
            player.health -= balance.pokemon_win_health_decrease
            event = DialogueEvent.MINIGAME_WIN
        else:
            player.stress += balance.pokemon_lose_stress_increase
            player.health -= balance.pokemon_lose_health_decrease
            player.money -= rng.uniform(balance.pokemon_lose_money_min, balance.pokemon_lose_money_max)
            event = DialogueEvent.MINIGAME_LOSE

        player.money = max(0.0, player.money)
        return ActionResult.ok(event)

    @staticmethod
    def _read(
        player: PlayerState, balance: GameBalance, literacy_hook: Optional[LiteracyHook]
    ) -> ActionResult:
        if player.level < balance.read_level_requirement:
            return ActionResult.rejected(Rejection.TOO_EARLY, DialogueEvent.LITERACY_TOO_EARLY)

        player.can_read = True
        if literacy_hook is not None:
            try:
                literacy_hook()
            except OSError as e:
                # The player can read either way; only the marker is lost
                logger.error(f"Error writing literacy marker: {e}", exc_info=True)
        return ActionResult.ok(DialogueEvent.LITERACY_SUCCESS)
