"""Battle error types."""


class BattleError(Exception):
    """Base for errors that prevent a battle from running."""


class SameFighterError(BattleError):
    def __init__(self, name: str):
        super().__init__(f"'{name}' cannot fight itself")
        self.name = name


class DeadFighterError(BattleError):
    def __init__(self, name: str):
        super().__init__(f"'{name}' has no health left and cannot battle")
        self.name = name


class InvalidPowerError(BattleError):
    def __init__(self, name: str, power: int):
        super().__init__(f"'{name}' has invalid power {power}; power must be positive")
        self.name = name
        self.power = power


class InvalidAmountError(BattleError, ValueError):
    def __init__(self, amount: object):
        super().__init__(f"Damage amount must be a non-negative integer, got {amount!r}")
        self.amount = amount
