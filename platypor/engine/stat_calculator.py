"""Stat calculation helpers."""

from platypor.engine.rng import RandomSource
from platypor.models.player import PlayerState

BOUNDED_STATS = ("stress", "famine", "health", "wisdom", "vigor")


class StatCalculator:
    """Clamping and rate helpers shared by the engines."""

    @staticmethod
    def clamp_unit(value: float) -> float:
        """Clamp a value into [0, 1]."""
        return min(1.0, max(0.0, value))

    @staticmethod
    def clamp_stats(player: PlayerState) -> None:
        """Clamp every bounded stat of the player in place."""
        for stat_name in BOUNDED_STATS:
            setattr(player, stat_name, StatCalculator.clamp_unit(getattr(player, stat_name)))

    @staticmethod
    def varied_rate(base_time: float, variation_range: float, rng: RandomSource) -> float:
        """
        Draw a per-second rate from a seconds-to-saturate base time.

        Args:
            base_time: Seconds for the stat to go from 0 to 1
            variation_range: Symmetric variation fraction applied to the time
            rng: Random source

        Returns:
            Rate per second (1 / varied time)
        """
        actual_time = base_time * (1 + rng.variation(variation_range))
        return 1.0 / actual_time
