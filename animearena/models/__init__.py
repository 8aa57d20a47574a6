"""Data models module for AnimeArena."""

# Universe
from animearena.models.universe import Universe

# Fighters
from animearena.models.fighter import Fighter
from animearena.models.character import Character, CharacterKind, DamageReport

# Battle
from animearena.models.battle import BattleReport, BattleState, RoundEvent

__all__ = [
    # Universe
    "Universe",
    # Fighters
    "Fighter",
    "Character",
    "CharacterKind",
    "DamageReport",
    # Battle
    "BattleReport",
    "BattleState",
    "RoundEvent",
]
