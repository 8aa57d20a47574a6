"""Pre-battle validation."""

import logging

from animearena.errors import (
    BattleError,
    DeadFighterError,
    InvalidPowerError,
    SameFighterError,
)
from animearena.models.fighter import Fighter

logger = logging.getLogger(__name__)


class BattleValidator:
    """Checks that two fighters may engage."""

    @staticmethod
    def validate_for_battle(a: Fighter, b: Fighter) -> None:
        """
        Validate a matchup, raising on the first failed precondition.

        Args:
            a: First fighter
            b: Second fighter

        Raises:
            SameFighterError: If a and b are the same fighter
            DeadFighterError: If either fighter has no health left
            InvalidPowerError: If either fighter has non-positive power
        """
        if BattleValidator._same_fighter(a, b):
            raise SameFighterError(a.name)

        for fighter in (a, b):
            if fighter.health == 0:
                raise DeadFighterError(fighter.name)

        for fighter in (a, b):
            if fighter.power <= 0:
                raise InvalidPowerError(fighter.name, fighter.power)

    @staticmethod
    def check(a: Fighter, b: Fighter) -> tuple[bool, str]:
        """
        Validate a matchup without raising.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            BattleValidator.validate_for_battle(a, b)
        except BattleError as e:
            logger.debug(f"Matchup {a.name} vs {b.name} rejected: {e}")
            return False, str(e)
        return True, ""

    @staticmethod
    def _same_fighter(a: Fighter, b: Fighter) -> bool:
        """Same object, or both carry the same character id. Fighters without an id compare by identity."""
        if a is b:
            return True
        a_id = getattr(a, "character_id", None)
        return a_id is not None and a_id == getattr(b, "character_id", None)
