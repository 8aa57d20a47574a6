"""Battle arena running a fixed-round fight between two characters."""

import logging
from typing import Optional, Protocol

from animearena.config import ROUND_LIMIT
from animearena.models.battle import BattleReport, BattleState, RoundEvent
from animearena.models.character import Character

logger = logging.getLogger(__name__)


class BattleObserver(Protocol):
    """Receives battle start, per-attack and end notifications."""

    def on_battle_start(self, first: str, second: str) -> None:
        ...

    def on_strike(self, event: RoundEvent) -> None:
        ...

    def on_battle_end(self, winner: str) -> None:
        ...


class LoggingObserver:
    """Observer that writes announcements to the log."""

    def on_battle_start(self, first: str, second: str) -> None:
        logger.info(f"Battle started: {first} vs {second}")

    def on_strike(self, event: RoundEvent) -> None:
        logger.info(event.describe())

    def on_battle_end(self, winner: str) -> None:
        logger.info(f"Winner: {winner}")


class BattleArena:
    """Runs turn-based combat between two fighters.

    Callers are expected to run BattleValidator first; the arena itself never
    rejects a matchup. The observer is only used for the duration of a single
    fight call and is never stored.
    """

    def __init__(self, rounds: int = ROUND_LIMIT) -> None:
        """Initialize arena with the number of rounds per fight."""
        self._rounds = rounds
        self._state = BattleState.NOT_STARTED
        self._current_round = 0

    @property
    def state(self) -> BattleState:
        """Get the state of the most recent fight."""
        return self._state

    @property
    def current_round(self) -> int:
        """Round in progress, or the last round fought once concluded (0 if none)."""
        return self._current_round

    def fight(
        self, a: Character, b: Character, observer: Optional[BattleObserver] = None
    ) -> BattleReport:
        """
        Run one complete fight. `a` attacks first in every round.

        Args:
            a: First fighter
            b: Second fighter
            observer: Optional listener, notified at start, after every attack and at the end

        Returns:
            BattleReport with every attack and the winner
        """
        self._state = BattleState.NOT_STARTED
        self._current_round = 0
        if observer is not None:
            observer.on_battle_start(a.name, b.name)

        events: list[RoundEvent] = []
        for round_number in range(1, self._rounds + 1):
            if a.health == 0 or b.health == 0:
                break
            self._state = BattleState.ROUND_IN_PROGRESS
            self._current_round = round_number

            events.append(self._strike(round_number, a, b, observer))
            if b.health == 0:
                break
            events.append(self._strike(round_number, b, a, observer))

        self._state = BattleState.CONCLUDED

        # Strictly greater health wins; otherwise the second fighter does
        winner = a if a.health > b.health else b
        logger.debug(
            f"Fight concluded after {self._current_round} round(s): {a.name}={a.health}, {b.name}={b.health}"
        )

        if observer is not None:
            observer.on_battle_end(winner.name)

        return BattleReport(
            first=a.name,
            second=b.name,
            winner=winner.name,
            rounds_fought=self._current_round,
            ended_by_knockout=a.health == 0 or b.health == 0,
            events=events,
        )

    @staticmethod
    def _strike(
        round_number: int,
        attacker: Character,
        defender: Character,
        observer: Optional[BattleObserver],
    ) -> RoundEvent:
        attack = attacker.attack_value()
        logger.debug(f"Round {round_number}: {attacker.name} attacks {defender.name} for {attack}")
        damage = defender.take_damage(attack)
        event = RoundEvent(
            round_number=round_number,
            attacker=attacker.name,
            defender=defender.name,
            attack=attack,
            damage=damage,
        )
        if observer is not None:
            observer.on_strike(event)
        return event
