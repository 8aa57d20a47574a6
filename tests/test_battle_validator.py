"""Tests for BattleValidator."""

import pytest

from animearena.engine import BattleValidator
from animearena.errors import BattleError, DeadFighterError, InvalidPowerError, SameFighterError
from animearena.models import Character, Universe


class TestBattleValidator:
    """Test suite for BattleValidator."""

    def test_accepts_valid_pair(self, eren, gojo):
        """Test that a normal matchup passes."""
        assert BattleValidator.validate_for_battle(eren, gojo) is None
        assert BattleValidator.check(eren, gojo) == (True, "")

    def test_rejects_same_fighter(self, eren):
        """Test that a fighter cannot fight itself."""
        with pytest.raises(SameFighterError):
            BattleValidator.validate_for_battle(eren, eren)

    def test_rejects_copy_with_same_id(self, eren):
        """Test that a copy sharing the character id counts as the same fighter."""
        with pytest.raises(SameFighterError):
            BattleValidator.validate_for_battle(eren, eren.model_copy())

    def test_allows_distinct_fighters_with_same_name(self, mikasa):
        """Test that matching names alone do not reject a pair."""
        other = Character.base("Mikasa", health=50, power=10, universe=Universe.ATTACK_ON_TITAN)
        BattleValidator.validate_for_battle(mikasa, other)

    @pytest.mark.parametrize("dead_first", [True, False])
    def test_rejects_dead_fighter(self, eren, gojo, dead_first):
        """Test that a zero-health fighter on either side is rejected."""
        target = eren if dead_first else gojo
        target.health = 0
        with pytest.raises(DeadFighterError) as exc_info:
            BattleValidator.validate_for_battle(eren, gojo)
        assert exc_info.value.name == target.name

    @pytest.mark.parametrize("power", [0, -10])
    def test_rejects_non_positive_power(self, eren, power):
        """Test that non-positive power is rejected."""
        weak = Character.base("Armin", health=70, power=power, universe=Universe.ATTACK_ON_TITAN)
        with pytest.raises(InvalidPowerError):
            BattleValidator.validate_for_battle(eren, weak)
        with pytest.raises(InvalidPowerError):
            BattleValidator.validate_for_battle(weak, eren)

    def test_dead_checked_before_power(self, eren):
        """Test that a dead, powerless fighter reports as dead."""
        husk = Character.base("Ymir", health=0, power=0, universe=Universe.ATTACK_ON_TITAN)
        with pytest.raises(DeadFighterError):
            BattleValidator.validate_for_battle(eren, husk)

    def test_check_returns_message(self, eren):
        """Test the non-raising form."""
        is_valid, error = BattleValidator.check(eren, eren)
        assert is_valid is False
        assert "Eren" in error

    def test_errors_share_base(self):
        """Test that validation errors derive from BattleError."""
        for error_type in (SameFighterError, DeadFighterError, InvalidPowerError):
            assert issubclass(error_type, BattleError)

    def test_validation_has_no_side_effects(self, eren, gojo):
        """Test that validating does not touch fighter state."""
        before = (eren.health, eren.shield, gojo.health, gojo.shield)
        BattleValidator.validate_for_battle(eren, gojo)
        assert (eren.health, eren.shield, gojo.health, gojo.shield) == before


class PlainFighter:
    """Minimal fighter without a character id."""

    def __init__(self, name: str, health: int, power: int) -> None:
        self.name = name
        self.health = health
        self.power = power

    def attack_value(self) -> int:
        return self.power

    def take_damage(self, amount: int) -> None:
        self.health = max(self.health - amount, 0)


class TestBattleValidatorWithPlainFighters:
    """Test suite for validating fighters that are not Characters."""

    def test_accepts_plain_fighters(self, eren):
        """Test that fighters without an id are accepted."""
        a = PlainFighter("Kaneki", health=100, power=20)
        b = PlainFighter("Touka", health=80, power=18)
        BattleValidator.validate_for_battle(a, b)
        BattleValidator.validate_for_battle(a, eren)
        BattleValidator.validate_for_battle(eren, a)

    def test_same_plain_fighter_rejected(self):
        """Test that fighters without an id compare by identity."""
        a = PlainFighter("Kaneki", health=100, power=20)
        with pytest.raises(SameFighterError):
            BattleValidator.validate_for_battle(a, a)

    def test_plain_fighter_checks_health_and_power(self, eren):
        """Test dead and powerless plain fighters are rejected."""
        with pytest.raises(DeadFighterError):
            BattleValidator.validate_for_battle(eren, PlainFighter("Hinami", health=0, power=5))
        with pytest.raises(InvalidPowerError):
            BattleValidator.validate_for_battle(eren, PlainFighter("Hide", health=40, power=0))
