"""Attack value computation."""

from animearena.config import ENERGY_DIVISOR, SHIFTER_ATTACK_BONUS
from animearena.models.character import Character, CharacterKind


def attack_value(character: Character) -> int:
    """
    Compute a character's attack value from its variant.

    Only power and the variant's fixed parameters are used, so repeated calls
    return the same value regardless of health or shield.

    Args:
        character: Character to compute the attack value for

    Returns:
        Attack value
    """
    if character.kind == CharacterKind.SHIFTER:
        return character.power + SHIFTER_ATTACK_BONUS
    elif character.kind == CharacterKind.ENERGY_USER:
        return character.power + character.cursed_energy // ENERGY_DIVISOR
    return character.power
