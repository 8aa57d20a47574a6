"""Battle engine package."""

from animearena.engine.arena import BattleArena, BattleObserver, LoggingObserver
from animearena.engine.attack import attack_value
from animearena.engine.battle_validator import BattleValidator
from animearena.engine.roster import (
    describe_health,
    names_above_health,
    pick_random,
    rank_by_power,
)

__all__ = [
    "BattleArena",
    "BattleObserver",
    "LoggingObserver",
    "BattleValidator",
    "attack_value",
    "describe_health",
    "names_above_health",
    "pick_random",
    "rank_by_power",
]
