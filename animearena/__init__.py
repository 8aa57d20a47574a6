"""AnimeArena: character battles with shields, variants and a three-round arena."""

__version__ = "0.1.0"
