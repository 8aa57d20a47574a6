"""Console demo: builds a roster, runs one battle and prints the transcript."""

import argparse
import logging
import random
from typing import Optional, Sequence

from animearena.config import (
    DEFAULT_HEALTH_THRESHOLD,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SEED,
    LOG_LEVELS,
)
from animearena.engine import (
    BattleArena,
    BattleValidator,
    describe_health,
    names_above_health,
    pick_random,
    rank_by_power,
)
from animearena.errors import DeadFighterError, InvalidPowerError, SameFighterError
from animearena.models import Character, RoundEvent, Universe

logger = logging.getLogger(__name__)


def transcript_lines(event: RoundEvent) -> list[str]:
    """Lines describing one attack and what the defender's shield and health did."""
    damage = event.damage
    lines = [event.describe()]
    if damage.absorbed:
        lines.append(f"Shield absorbed {damage.absorbed}. Shield now: {damage.shield}")
    lines.append(f"{event.defender} took {damage.dealt} damage. HP now: {damage.health}")
    return lines


class ConsoleObserver:
    """Prints the battle transcript as it happens."""

    def on_battle_start(self, first: str, second: str) -> None:
        print(f"\nBattle started: {first} vs {second}")

    def on_strike(self, event: RoundEvent) -> None:
        for line in transcript_lines(event):
            print(line)

    def on_battle_end(self, winner: str) -> None:
        print(f"Winner: {winner}")


def build_roster() -> list[Character]:
    """Create the demo characters."""
    mikasa = Character.base("Mikasa", health=90, power=25, universe=Universe.ATTACK_ON_TITAN, shield=15)
    eren = Character.shifter(
        "Eren",
        health=120,
        power=30,
        universe=Universe.ATTACK_ON_TITAN,
        shield=30,
        titan_form="Attack Titan",
    )
    gojo = Character.energy_user(
        "Gojo", health=110, power=28, universe=Universe.JUJUTSU_KAISEN, cursed_energy=250, shield=10
    )
    return [mikasa, eren, gojo]


def run_battle(a: Character, b: Character, arena: Optional[BattleArena] = None) -> int:
    """
    Validate and run one battle.

    Returns:
        Exit code: 0 if the battle ran, 1 if validation rejected it
    """
    try:
        BattleValidator.validate_for_battle(a, b)
    except SameFighterError as e:
        print(f"Error: a fighter cannot battle itself ({e.name})")
        return 1
    except DeadFighterError as e:
        print(f"Error: dead fighter cannot battle ({e.name})")
        return 1
    except InvalidPowerError as e:
        print(f"Error: {e.name} has invalid power {e.power}")
        return 1

    arena = arena or BattleArena()
    arena.fight(a, b, observer=ConsoleObserver())
    return 0


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="animearena", description="Run the anime character battle demo.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for the random picks")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_HEALTH_THRESHOLD,
        help="Health cutoff for the filter line",
    )
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=DEFAULT_LOG_FORMAT)
    rng = random.Random(args.seed)

    fighters = build_roster()
    eren, gojo = fighters[1], fighters[2]

    print("Polymorphism demo:")
    for fighter in fighters:
        print(fighter.status_line())
        print(f"Attack damage: {fighter.attack_value()}")

    random_fighter = pick_random(fighters, rng)
    if random_fighter is not None:
        print(f"\nRandom character: {random_fighter.name}")
    random_universe = pick_random(list(Universe), rng)
    if random_universe is not None:
        print(f"Random universe: {random_universe.title}")

    exit_code = run_battle(eren, gojo)
    logger.debug(f"Battle finished with exit code {exit_code}")

    print("\nFunctional Programming results:")
    print("map ->", describe_health(fighters))
    print("filter ->", names_above_health(fighters, args.threshold))
    print("sorted ->", rank_by_power(fighters))

    return exit_code
