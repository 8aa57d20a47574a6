"""Universe enum."""

from enum import Enum


class Universe(str, Enum):
    """Anime universe a character comes from."""

    ATTACK_ON_TITAN = "attack_on_titan"
    JUJUTSU_KAISEN = "jujutsu_kaisen"
    DEMON_SLAYER = "demon_slayer"

    @property
    def title(self) -> str:
        """Human-readable universe name."""
        return _TITLES[self]


_TITLES = {
    Universe.ATTACK_ON_TITAN: "Attack on Titan",
    Universe.JUJUTSU_KAISEN: "Jujutsu Kaisen",
    Universe.DEMON_SLAYER: "Demon Slayer",
}
