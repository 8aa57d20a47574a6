"""Collection helpers over groups of fighters."""

import random
from typing import Optional, Sequence, TypeVar

from animearena.models.fighter import Fighter

T = TypeVar("T")


def describe_health(fighters: Sequence[Fighter]) -> list[str]:
    """Format each fighter as 'Name (HP: n)'."""
    return [f"{f.name} (HP: {f.health})" for f in fighters]


def names_above_health(fighters: Sequence[Fighter], threshold: int) -> list[str]:
    """Names of fighters whose health is strictly above threshold."""
    return [f.name for f in fighters if f.health > threshold]


def rank_by_power(fighters: Sequence[Fighter]) -> list[str]:
    """'Name:power' entries, strongest first. Ties keep their input order."""
    ranked = sorted(fighters, key=lambda f: f.power, reverse=True)
    return [f"{f.name}:{f.power}" for f in ranked]


def pick_random(items: Sequence[T], rng: Optional[random.Random] = None) -> Optional[T]:
    """
    Pick a random element.

    Args:
        items: Items to pick from
        rng: Optional random generator (module-level random if not set)

    Returns:
        Random element, or None if items is empty
    """
    if not items:
        return None
    return (rng or random).choice(items)
