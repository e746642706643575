"""Main game engine owning the player and serializing every mutation."""

import logging
import threading
from typing import Callable, Optional

from platypor.config import DEFAULT_DEATH_EXIT_CODE
from platypor.engine.action_resolver import ActionResolver, LiteracyHook
from platypor.engine.avatar import AvatarLayer, derive_avatar_key
from platypor.engine.economy import Economy
from platypor.engine.equipment import EquipmentManager, EquipmentSlot
from platypor.engine.rng import RandomSource
from platypor.engine.simulation import TickSimulator
from platypor.helpers.debug import log_call
from platypor.models.balance import GameBalance
from platypor.models.catalog import ActionKind, Catalog
from platypor.models.player import PlayerState
from platypor.models.results import ActionResult, EngineResult, PurchaseResult, TickResult

logger = logging.getLogger(__name__)

DeathHandler = Callable[[int], None]


class GameEngine:
    """Single owner of the player state for one session."""

    def __init__(
        self,
        catalog: Catalog,
        balance: Optional[GameBalance] = None,
        initial_state: Optional[PlayerState] = None,
        rng: Optional[RandomSource] = None,
        literacy_hook: Optional[LiteracyHook] = None,
        on_death: Optional[DeathHandler] = None,
        death_exit_code: int = DEFAULT_DEATH_EXIT_CODE,
    ) -> None:
        """
        Initialize game engine.

        Args:
            catalog: Action and product definitions
            balance: Balance configuration, defaults to GameBalance()
            initial_state: Optional initial player state
            rng: Random source, defaults to the process-wide generator
            literacy_hook: Called when the player learns to read
            on_death: Called once with the exit code when the player dies
            death_exit_code: Status handed to on_death
        """
        self._catalog = catalog
        self._balance = balance or GameBalance()
        self._state = initial_state or PlayerState()
        self._rng = rng or RandomSource()
        self._literacy_hook = literacy_hook
        self._on_death = on_death
        self._death_exit_code = death_exit_code
        # All engine calls run under this lock, one call at a time
        self._lock = threading.Lock()

    @property
    def state(self) -> PlayerState:
        """Get the live player state (read it, do not mutate it)."""
        return self._state

    @property
    def balance(self) -> GameBalance:
        return self._balance

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def is_dead(self) -> bool:
        return self._state.is_dead

    @property
    def death_exit_code(self) -> int:
        return self._death_exit_code

    def snapshot(self) -> PlayerState:
        """Get a detached copy of the player state."""
        with self._lock:
            return self._state.model_copy(deep=True)

    def tick(self, delta_seconds: float) -> TickResult:
        """
        Advance the simulation by one frame.

        Raises:
            ValueError: If delta_seconds is negative or not finite
        """
        with self._lock:
            result = TickSimulator.advance(self._state, self._balance, delta_seconds, self._rng)
        if result.died and self._on_death is not None:
            self._on_death(self._death_exit_code)
        return result

    @log_call
    def perform_action(self, action_id: str) -> ActionResult:
        with self._lock:
            return ActionResolver.perform_action(
                self._state, self._balance, action_id, self._rng, self._literacy_hook
            )

    @log_call
    def purchase(self, product_id: str) -> PurchaseResult:
        with self._lock:
            return Economy.purchase(self._state, self._balance, self._catalog, product_id)

    @log_call
    def toggle_equipment(self, slot: EquipmentSlot) -> EngineResult:
        with self._lock:
            return EquipmentManager.toggle(self._state, slot)

    def can_purchase(self, product_id: str) -> bool:
        """Whether the product would be accepted right now, readiness included."""
        with self._lock:
            product = self._catalog.get_product(product_id)
            if product is None or self._state.is_dead:
                return False
            return ActionResolver.is_ready(self._state) and Economy.can_purchase(
                self._state, self._balance, product
            )

    def avatar_key(self) -> AvatarLayer:
        with self._lock:
            return derive_avatar_key(self._state)

    def control_states(self) -> dict[str, dict[str, bool]]:
        """
        Which controls a renderer should enable or show.

        Returns:
            Dict with "actions" and "products" (id -> enabled) and "hud" flags
        """
        with self._lock:
            player = self._state
            alive = not player.is_dead
            ready = alive and ActionResolver.is_ready(player)

            actions = {}
            for action in self._catalog.actions:
                enabled = ready
                if action.kind == ActionKind.DRINK:
                    enabled = enabled and player.owns_purse and player.beers > 0
                elif action.kind == ActionKind.SMOKE:
                    enabled = enabled and player.owns_purse and player.cigarettes > 0
                actions[action.id] = enabled

            products = {
                product.id: ready and Economy.can_purchase(player, self._balance, product)
                for product in self._catalog.products
            }

            hud = {
                "toggle_sword_visible": player.owns_purse,
                "toggle_sword_enabled": alive and player.owns_sword,
                "toggle_shield_visible": player.owns_purse,
                "toggle_shield_enabled": alive and player.owns_shield,
                "consumables_visible": player.owns_purse,
                "save_enabled": player.owns_memory,
                "theme_enabled": player.owns_vision,
            }
            return {"actions": actions, "products": products, "hud": hud}
