"""Pytest configuration and fixtures."""

import pytest

from animearena.engine import BattleArena
from animearena.models import Character, Universe


@pytest.fixture
def mikasa():
    """Base character with a small shield."""
    return Character.base("Mikasa", health=90, power=25, universe=Universe.ATTACK_ON_TITAN, shield=15)


@pytest.fixture
def eren():
    """Shifter without a shield (attack 50)."""
    return Character.shifter(
        "Eren", health=120, power=30, universe=Universe.ATTACK_ON_TITAN, titan_form="Attack Titan"
    )


@pytest.fixture
def gojo():
    """Energy user with cursed energy 250 and shield 10 (attack 53)."""
    return Character.energy_user(
        "Gojo", health=110, power=28, universe=Universe.JUJUTSU_KAISEN, cursed_energy=250, shield=10
    )


class RecordingObserver:
    """Observer that remembers every notification."""

    def __init__(self, arena=None) -> None:
        self.calls = []
        self.arena = arena
        self.arena_states = []

    def on_battle_start(self, first: str, second: str) -> None:
        self.calls.append(("start", first, second))

    def on_strike(self, event) -> None:
        self.calls.append(("strike", event.round_number, event.attacker))
        if self.arena is not None:
            self.arena_states.append((self.arena.state, self.arena.current_round))

    def on_battle_end(self, winner: str) -> None:
        self.calls.append(("end", winner))


@pytest.fixture
def observer():
    """Recording battle observer."""
    return RecordingObserver()


@pytest.fixture
def arena_with_observer():
    """Arena paired with an observer that records its state on every attack."""
    arena = BattleArena()
    return arena, RecordingObserver(arena)
