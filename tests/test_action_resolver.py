"""Tests for ActionResolver."""

import pytest

from platypor.engine.action_resolver import ActionResolver
from platypor.engine.rng import RandomSource
from platypor.models.player import PlayerState, Vitality
from platypor.models.results import DialogueEvent, Rejection


class TestActionGating:
    """Checks that run before an action takes effect."""

    def test_not_ready_is_noop(self, balance, neutral_rng):
        """Partial vigor rejects the action without touching the state."""
        player = PlayerState(vigor=0.99, money=10.0)
        before = player.model_dump()
        result = ActionResolver.perform_action(player, balance, "action_peck", neutral_rng)
        assert result.accepted is False
        assert result.rejection == Rejection.NOT_READY
        assert player.model_dump() == before

    def test_unknown_action_is_noop(self, player, balance, neutral_rng):
        """Unknown ids are ignored and keep the vigor bar full."""
        result = ActionResolver.perform_action(player, balance, "action_fly", neutral_rng)
        assert result.rejection == Rejection.UNKNOWN_ID
        assert player.vigor == 1.0

    def test_dead_player_is_noop(self, balance, neutral_rng):
        """No action is accepted after death."""
        player = PlayerState(vitality=Vitality.DEAD, money=5.0)
        before = player.model_dump()
        result = ActionResolver.perform_action(player, balance, "action_peck", neutral_rng)
        assert result.rejection == Rejection.DEAD
        assert player.model_dump() == before

    def test_accepted_action_spends_vigor(self, player, balance, neutral_rng):
        """Any accepted action empties the vigor bar."""
        result = ActionResolver.perform_action(player, balance, "action_poison", neutral_rng)
        assert result.accepted is True
        assert player.vigor == 0.0


class TestSimpleActions:
    """Peck, glow, poison, smoke and drink."""

    def test_peck_payout_bounds(self, balance):
        """Peck pays within [peck_money_min, peck_money_max)."""
        rng = RandomSource.seeded(7)
        player = PlayerState()
        for _ in range(500):
            player.vigor = 1.0
            player.money = 0.0
            ActionResolver.perform_action(player, balance, "action_peck", rng)
            assert balance.peck_money_min <= player.money < balance.peck_money_max

    def test_peck_uses_low_end_of_range(self, balance, scripted_rng):
        """A zero draw pays exactly the minimum."""
        player = PlayerState(money=0.0)
        ActionResolver.perform_action(player, balance, "action_peck", scripted_rng(floats=(0.0,)))
        assert player.money == pytest.approx(3.0)

    def test_glow_payout_bounds(self, balance):
        """Glow grants wisdom within [glow_wisdom_min, glow_wisdom_max)."""
        rng = RandomSource.seeded(11)
        for _ in range(200):
            player = PlayerState()
            ActionResolver.perform_action(player, balance, "action_glow", rng)
            assert balance.glow_wisdom_min <= player.wisdom < balance.glow_wisdom_max

    def test_glow_clamps_wisdom(self, balance, scripted_rng):
        """Wisdom never exceeds 1 after glowing."""
        player = PlayerState(wisdom=0.99)
        ActionResolver.perform_action(player, balance, "action_glow", scripted_rng(floats=(0.9,)))
        assert player.wisdom == 1.0

    def test_poison_resets_famine(self, balance, neutral_rng):
        """Poison empties the famine bar."""
        player = PlayerState(famine=0.8)
        ActionResolver.perform_action(player, balance, "action_poison", neutral_rng)
        assert player.famine == 0.0

    def test_smoke_without_cigarettes_is_noop(self, balance, neutral_rng):
        """No cigarettes: stress, stock and vigor are untouched."""
        player = PlayerState(stress=0.5, cigarettes=0)
        result = ActionResolver.perform_action(player, balance, "action_smoke", neutral_rng)
        assert result.accepted is False
        assert result.rejection == Rejection.OUT_OF_STOCK
        assert result.events == []
        assert player.stress == 0.5
        assert player.cigarettes == 0
        assert player.vigor == 1.0

    def test_smoke_reduces_stress(self, balance, neutral_rng):
        """Smoking uses one cigarette and lowers stress by the configured amount."""
        player = PlayerState(stress=0.5, cigarettes=2)
        result = ActionResolver.perform_action(player, balance, "action_smoke", neutral_rng)
        assert result.accepted is True
        assert player.stress == pytest.approx(0.5 - 0.28)
        assert player.cigarettes == 1

    def test_smoke_clamps_stress_at_zero(self, balance, neutral_rng):
        """Stress does not go negative."""
        player = PlayerState(stress=0.1, cigarettes=1)
        ActionResolver.perform_action(player, balance, "action_smoke", neutral_rng)
        assert player.stress == 0.0

    def test_drink_without_beer_is_noop(self, balance, neutral_rng):
        """No beer: nothing changes."""
        player = PlayerState(health=0.5, beers=0)
        result = ActionResolver.perform_action(player, balance, "action_drink", neutral_rng)
        assert result.rejection == Rejection.OUT_OF_STOCK
        assert player.health == 0.5
        assert player.vigor == 1.0

    def test_drink_restores_health(self, balance, neutral_rng):
        """Drinking uses one beer and restores health, capped at 1."""
        player = PlayerState(health=0.9, beers=1)
        ActionResolver.perform_action(player, balance, "action_drink", neutral_rng)
        assert player.health == 1.0
        assert player.beers == 0


class TestGamble:
    """Gambling odds and the armed-player rule."""

    @pytest.mark.parametrize("armed", [{"sword_equipped": True}, {"shield_equipped": True}])
    def test_armed_player_is_refused(self, balance, scripted_rng, armed):
        """Equipped gear blocks gambling even when the draw would jackpot."""
        player = PlayerState(money=50.0, owns_sword=True, owns_shield=True, **armed)
        rng = scripted_rng(ints=(0,))
        result = ActionResolver.perform_action(player, balance, "action_gamble", rng)
        assert result.accepted is False
        assert result.rejection == Rejection.SECURITY
        assert player.money == 50.0
        assert player.stress == 0.0
        assert player.vigor == 0.0

    def test_jackpot(self, balance, scripted_rng):
        """A draw below the threshold pays the jackpot."""
        player = PlayerState(money=50.0)
        result = ActionResolver.perform_action(player, balance, "action_gamble", scripted_rng(ints=(2,)))
        assert result.events == [DialogueEvent.GAMBLE_WIN]
        assert player.money == pytest.approx(100050.0)

    def test_threshold_is_exclusive(self, balance, scripted_rng):
        """A draw equal to the threshold loses."""
        player = PlayerState(money=50.0, stress=0.2)
        result = ActionResolver.perform_action(player, balance, "action_gamble", scripted_rng(ints=(3,)))
        assert result.events == [DialogueEvent.GAMBLE_LOSE]
        assert player.money == pytest.approx(40.0)
        assert player.stress == pytest.approx(0.7)

    def test_loss_can_leave_money_negative(self, balance, scripted_rng):
        """The gamble itself does not floor money."""
        player = PlayerState(money=4.0)
        ActionResolver.perform_action(player, balance, "action_gamble", scripted_rng(ints=(999_999,)))
        assert player.money == pytest.approx(-6.0)


class TestPokemon:
    """Mini-game win rate and payouts."""

    def test_gear_raises_win_rate(self, balance, scripted_rng):
        """A draw of 0.6 loses bare-handed but wins with a sword."""
        bare = PlayerState(money=100.0)
        ActionResolver.perform_action(bare, balance, "action_pokemon", scripted_rng(floats=(0.6,)))

        armed = PlayerState(money=100.0, owns_sword=True, sword_equipped=True)
        result = ActionResolver.perform_action(armed, balance, "action_pokemon", scripted_rng(floats=(0.6,)))

        assert bare.money < 100.0
        assert result.events == [DialogueEvent.MINIGAME_WIN]

    def test_win_effects(self, balance, scripted_rng):
        """Winning pays money and wisdom at a health cost."""
        player = PlayerState(money=10.0, owns_sword=True, sword_equipped=True)
        ActionResolver.perform_action(player, balance, "action_pokemon", scripted_rng(floats=(0.6,)))
        assert player.money == pytest.approx(10.0 + 15.0 + 30.0 * 0.6)
        assert player.wisdom == pytest.approx(0.334)
        assert player.health == pytest.approx(0.85)

    def test_lose_effects_clamp_money(self, balance, scripted_rng):
        """Losing costs stress, health and money, floored at zero."""
        player = PlayerState(money=20.0)
        result = ActionResolver.perform_action(player, balance, "action_pokemon", scripted_rng(floats=(0.6,)))
        assert result.events == [DialogueEvent.MINIGAME_LOSE]
        assert player.stress == pytest.approx(0.3)
        assert player.health == pytest.approx(0.75)
        assert player.money == 0.0

    def test_shield_bonus(self, balance, scripted_rng):
        """The shield adds its own bonus: 0.55 wins with a shield."""
        player = PlayerState(money=0.0, owns_shield=True, shield_equipped=True)
        result = ActionResolver.perform_action(player, balance, "action_pokemon", scripted_rng(floats=(0.55,)))
        assert result.events == [DialogueEvent.MINIGAME_WIN]


class TestRead:
    """Literacy."""

    def test_too_early(self, balance, neutral_rng):
        """Below the level requirement reading only fires the too-early line."""
        calls = []
        player = PlayerState(level=6)
        result = ActionResolver.perform_action(
            player, balance, "action_read", neutral_rng, literacy_hook=lambda: calls.append(1)
        )
        assert result.accepted is False
        assert result.rejection == Rejection.TOO_EARLY
        assert result.events == [DialogueEvent.LITERACY_TOO_EARLY]
        assert player.can_read is False
        assert calls == []

    def test_success(self, balance, neutral_rng):
        """At the required level the player learns to read and the marker hook runs."""
        calls = []
        player = PlayerState(level=7)
        result = ActionResolver.perform_action(
            player, balance, "action_read", neutral_rng, literacy_hook=lambda: calls.append(1)
        )
        assert result.accepted is True
        assert result.events == [DialogueEvent.LITERACY_SUCCESS]
        assert player.can_read is True
        assert calls == [1]

    def test_marker_failure_keeps_literacy(self, balance, neutral_rng):
        """A marker that cannot be written does not undo or abort the read."""

        def failing_hook():
            raise PermissionError("read-only state directory")

        player = PlayerState(level=7)
        result = ActionResolver.perform_action(
            player, balance, "action_read", neutral_rng, literacy_hook=failing_hook
        )
        assert result.accepted is True
        assert result.events == [DialogueEvent.LITERACY_SUCCESS]
        assert player.can_read is True
        assert player.vigor == 0.0
