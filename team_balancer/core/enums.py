"""Shared enums used across features.

This module provides a single source of truth for enums used in both algorithms and schemas.
"""

from enum import Enum


class Tier(str, Enum):
    """League of Legends rank tiers, lowest first."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"


class Division(str, Enum):
    """Rank divisions inside a tier, strongest first."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"


class Role(str, Enum):
    """Lane positions as reported in match participant ``teamPosition``."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"
    UNKNOWN = "UNKNOWN"


# Scan order used when picking the majority role; UNKNOWN is never counted.
COUNTED_ROLES = (Role.TOP, Role.JUNGLE, Role.MIDDLE, Role.BOTTOM, Role.UTILITY)


class SplitMode(str, Enum):
    """Team split policies."""

    BALANCED = "balanced"
    DUO = "duo"
    RANDOM = "random"

    @classmethod
    def parse(cls, value: str | None) -> "SplitMode":
        """Resolve a mode name, falling back to BALANCED for anything unrecognized."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.BALANCED
