"""Balance configuration model."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from platypor.config import DEFAULT_DIALOGUE_INTERVAL, DEFAULT_MAX_TICK_DELTA


class GameBalance(BaseModel):
    """Every tunable of the simulation, shared read-only by all engines."""

    model_config = ConfigDict(frozen=True, extra="forbid")  # Immutable model

    # Seconds-to-saturate for the drifting stats
    health_decay_time: float = Field(default=10.0, gt=0, description="Seconds for health to drain while starving")
    vigor_recharge_time: float = Field(default=1.5, gt=0, description="Seconds for vigor to refill")
    stress_gain_time: float = Field(default=120.0, gt=0, description="Seconds for stress to saturate")
    famine_gain_time: float = Field(default=60.0, gt=0, description="Seconds for famine to saturate")
    variation_range: float = Field(default=0.1, ge=0, lt=1, description="Symmetric variation applied to each rate draw")

    # Action effects
    peck_money_min: float = Field(default=3.0, ge=0)
    peck_money_max: float = Field(default=9.0, ge=0)

    glow_wisdom_min: float = Field(default=0.03, ge=0)
    glow_wisdom_max: float = Field(default=0.06, ge=0)

    smoke_stress_reduction: float = Field(default=0.28, ge=0)
    drink_health_increase: float = Field(default=0.25, ge=0)

    gamble_jackpot_chance: float = Field(default=3.0, ge=0, description="Threshold against a draw in [0, 1000000)")
    gamble_jackpot_amount: float = Field(default=100000.0, ge=0)
    gamble_loss_amount: float = Field(default=10.0, ge=0)
    gamble_stress_increase: float = Field(default=0.5, ge=0)

    pokemon_base_win_rate: float = Field(default=0.5, ge=0, le=1)
    pokemon_sword_bonus: float = Field(default=0.2, ge=0)
    pokemon_shield_bonus: float = Field(default=0.1, ge=0)

    pokemon_win_money_min: float = Field(default=15.0, ge=0)
    pokemon_win_money_max: float = Field(default=45.0, ge=0)
    pokemon_win_wisdom_increase: float = Field(default=0.334, ge=0)
    pokemon_win_health_decrease: float = Field(default=0.15, ge=0)

    pokemon_lose_money_min: float = Field(default=30.0, ge=0)
    pokemon_lose_money_max: float = Field(default=60.0, ge=0)
    pokemon_lose_stress_increase: float = Field(default=0.3, ge=0)
    pokemon_lose_health_decrease: float = Field(default=0.25, ge=0)

    read_level_requirement: int = Field(default=7, ge=1, description="Level needed before reading works")

    # The freedom product only sells at this exact balance
    freedom_target_money: float = Field(default=48750.0)
    freedom_epsilon: float = Field(default=0.001, gt=0)

    # Tick handling
    max_tick_delta: float = Field(default=DEFAULT_MAX_TICK_DELTA, gt=0, description="Delta seconds clamp")
    dialogue_interval: float = Field(default=DEFAULT_DIALOGUE_INTERVAL, gt=0, description="Seconds between ambient lines")

    @model_validator(mode="after")
    def check_ranges(self) -> "GameBalance":
        """Reject ranges whose minimum exceeds their maximum."""
        ranges = {
            "peck_money": (self.peck_money_min, self.peck_money_max),
            "glow_wisdom": (self.glow_wisdom_min, self.glow_wisdom_max),
            "pokemon_win_money": (self.pokemon_win_money_min, self.pokemon_win_money_max),
            "pokemon_lose_money": (self.pokemon_lose_money_min, self.pokemon_lose_money_max),
        }
        for name, (low, high) in ranges.items():
            if low > high:
                raise ValueError(f"{name}_min ({low}) is greater than {name}_max ({high})")
        return self
