"""Battle models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from animearena.models.character import DamageReport


class BattleState(str, Enum):
    """Arena lifecycle."""

    NOT_STARTED = "not_started"
    ROUND_IN_PROGRESS = "round_in_progress"
    CONCLUDED = "concluded"


class RoundEvent(BaseModel):
    """One attack inside a round."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    round_number: int = Field(ge=1, description="Round the attack happened in")
    attacker: str = Field(description="Attacker name")
    defender: str = Field(description="Defender name")
    attack: int = Field(description="Attack value used for the hit")
    damage: DamageReport = Field(description="Defender's damage report")

    def describe(self) -> str:
        """Transcript line for the attack."""
        return f"Round {self.round_number}: {self.attacker} attacks for {self.attack}"


class BattleReport(BaseModel):
    """Result of a complete arena run."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    first: str = Field(description="Name of the fighter attacking first")
    second: str = Field(description="Name of the fighter attacking second")
    winner: str = Field(description="Winner name")
    rounds_fought: int = Field(ge=0, description="Rounds in which at least one attack landed")
    ended_by_knockout: bool = Field(default=False, description="Whether a fighter reached 0 health")
    events: list[RoundEvent] = Field(default_factory=list, description="Attacks in order")
