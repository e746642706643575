"""Tick simulation: stat drift, leveling and death checks."""

import math

from platypor.engine.lifecycle import Lifecycle
from platypor.engine.rng import RandomSource
from platypor.engine.stat_calculator import StatCalculator
from platypor.models.balance import GameBalance
from platypor.models.player import PlayerState
from platypor.models.results import DialogueEvent, TickResult


class TickSimulator:
    """Advances the player by one frame of elapsed time."""

    @staticmethod
    def advance(
        player: PlayerState, balance: GameBalance, delta_seconds: float, rng: RandomSource
    ) -> TickResult:
        """
        Advance the player state in place.

        Args:
            player: Player to mutate
            balance: Balance configuration
            delta_seconds: Elapsed seconds since the last tick, finite and >= 0
            rng: Random source for the rate variations

        Returns:
            TickResult with the ambient or terminal event fired by this tick

        Raises:
            ValueError: If delta_seconds is negative or not finite
        """
        if not math.isfinite(delta_seconds) or delta_seconds < 0:
            raise ValueError(f"delta_seconds must be finite and >= 0, got {delta_seconds!r}")

        # A zero delta leaves the state exactly as it was, level-up included
        if player.is_dead or delta_seconds == 0:
            return TickResult()

        delta = min(delta_seconds, balance.max_tick_delta)
        spread = balance.variation_range

        # One draw per drifting stat, always in this order
        stress_rate = StatCalculator.varied_rate(balance.stress_gain_time, spread, rng)
        famine_rate = StatCalculator.varied_rate(balance.famine_gain_time, spread, rng)
        health_rate = StatCalculator.varied_rate(balance.health_decay_time, spread, rng)
        vigor_rate = StatCalculator.varied_rate(balance.vigor_recharge_time, spread, rng)

        if not player.owns_house:
            player.stress = StatCalculator.clamp_unit(player.stress + stress_rate * delta)

        # Without the stomach upgrade hunger accrues twice per tick
        famine_gain = famine_rate * delta
        if not player.owns_stomach:
            player.famine += famine_gain
        player.famine = StatCalculator.clamp_unit(player.famine + famine_gain)

        if player.famine >= 1.0:
            player.health = StatCalculator.clamp_unit(player.health - health_rate * delta)

        player.vigor = StatCalculator.clamp_unit(player.vigor + vigor_rate * delta)

        if player.wisdom >= 1.0:
            player.level += 1
            player.wisdom = 0.0

        if Lifecycle.should_die(player):
            return TickResult(events=Lifecycle.die(player), died=True)

        events = []
        player.dialogue_timer += delta
        if player.dialogue_timer >= balance.dialogue_interval:
            player.dialogue_timer = 0.0
            events.append(DialogueEvent.AMBIENT)

        return TickResult(events=events)
