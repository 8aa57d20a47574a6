"""Central configuration defaults and constants for AnimeArena."""

import os

# Logging Defaults
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = os.getenv("ANIMEARENA_LOG_LEVEL", "WARNING").upper()
DEFAULT_LOG_FORMAT = os.getenv("ANIMEARENA_LOG_FORMAT", "[%(name)-19s - %(levelname)5s] %(message)s")

# Demo Defaults
_seed_env = os.getenv("ANIMEARENA_SEED")
DEFAULT_SEED = int(_seed_env) if _seed_env else None  # None means unseeded random picks
DEFAULT_HEALTH_THRESHOLD = int(os.getenv("ANIMEARENA_HEALTH_THRESHOLD", "50"))  # Roster filter cutoff

# Game Rules (fixed, not read from the environment)
ROUND_LIMIT = 3
SHIELD_CAP = 100
SHIFTER_ATTACK_BONUS = 20
ENERGY_DIVISOR = 10
