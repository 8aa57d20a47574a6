"""Fighter capability."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Fighter(Protocol):
    """Anything that can enter the arena."""

    name: str
    health: int
    power: int

    def attack_value(self) -> int:
        ...

    def take_damage(self, amount: int) -> Any:
        ...
