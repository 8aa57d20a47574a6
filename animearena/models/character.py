"""Character model."""

import logging
import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from animearena.config import SHIELD_CAP
from animearena.errors import InvalidAmountError
from animearena.models.universe import Universe

logger = logging.getLogger(__name__)


class CharacterKind(str, Enum):
    """Character variant, fixed at construction."""

    BASE = "base"
    SHIFTER = "shifter"
    ENERGY_USER = "energy_user"


class DamageReport(BaseModel):
    """Outcome of a single damage application."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    incoming: int = Field(ge=0, description="Raw incoming damage")
    absorbed: int = Field(ge=0, description="Damage absorbed by the shield")
    dealt: int = Field(ge=0, description="Damage passed through to health")
    shield: int = Field(ge=0, description="Shield after the hit")
    health: int = Field(ge=0, description="Health after the hit")


class Character(BaseModel):
    """A fighter with a depletable shield in front of its health."""

    model_config = ConfigDict(validate_assignment=True)

    character_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), frozen=True, description="Unique character identifier"
    )
    name: str = Field(min_length=1, frozen=True, description="Character name")
    power: int = Field(frozen=True, description="Base attack power")
    universe: Universe = Field(frozen=True, description="Universe the character comes from")
    kind: CharacterKind = Field(default=CharacterKind.BASE, frozen=True, description="Character variant")
    titan_form: Optional[str] = Field(default=None, frozen=True, description="Titan form (shifters only)")
    cursed_energy: int = Field(
        default=0, ge=0, frozen=True, description="Auxiliary resource used by energy users"
    )

    # Mutable combat state
    health: int = Field(ge=0, description="Current health points")
    shield: int = Field(default=0, description=f"Shield points, clamped to [0, {SHIELD_CAP}]")

    @field_validator("shield")
    @classmethod
    def clamp_shield(cls, value: int) -> int:
        """Clamp shield into range instead of rejecting it."""
        return min(max(value, 0), SHIELD_CAP)

    @classmethod
    def base(cls, name: str, health: int, power: int, universe: Universe, shield: int = 0) -> "Character":
        return cls(name=name, health=health, power=power, universe=universe, shield=shield)

    @classmethod
    def shifter(
        cls,
        name: str,
        health: int,
        power: int,
        universe: Universe,
        shield: int = 0,
        titan_form: Optional[str] = None,
    ) -> "Character":
        return cls(
            name=name,
            health=health,
            power=power,
            universe=universe,
            shield=shield,
            kind=CharacterKind.SHIFTER,
            titan_form=titan_form,
        )

    @classmethod
    def energy_user(
        cls, name: str, health: int, power: int, universe: Universe, cursed_energy: int, shield: int = 0
    ) -> "Character":
        return cls(
            name=name,
            health=health,
            power=power,
            universe=universe,
            shield=shield,
            kind=CharacterKind.ENERGY_USER,
            cursed_energy=cursed_energy,
        )

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def attack_value(self) -> int:
        """Attack value for the character's variant."""
        from animearena.engine.attack import attack_value

        return attack_value(self)

    def take_damage(self, amount: int) -> DamageReport:
        """
        Apply incoming damage, draining the shield before health.

        Args:
            amount: Raw incoming damage (must be non-negative)

        Returns:
            DamageReport describing what the shield absorbed and what reached health

        Raises:
            InvalidAmountError: If amount is not a non-negative integer
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidAmountError(amount)

        damage = amount
        absorbed = 0
        if self.shield > 0:
            absorbed = min(self.shield, damage)
            self.shield -= absorbed
            damage -= absorbed
            logger.info(f"{self.name}: shield absorbed {absorbed}. Shield now: {self.shield}")

        self.health = max(self.health - damage, 0)
        logger.info(f"{self.name} took {damage} damage. HP now: {self.health}")

        return DamageReport(
            incoming=amount,
            absorbed=absorbed,
            dealt=damage,
            shield=self.shield,
            health=self.health,
        )

    def status_line(self) -> str:
        """One-line status summary."""
        return (
            f"Name: {self.name} | HP: {self.health} | Power: {self.power} | "
            f"Shield: {self.shield} | Universe: {self.universe.title}"
        )
