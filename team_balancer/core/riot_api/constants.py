"""Riot API constants and enum definitions."""

from enum import Enum


class Region(str, Enum):
    """Riot API regions for regional routing (account-v1, match-v5)."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


class Platform(str, Enum):
    """Riot API platforms for platform routing (summoner-v4, league-v4)."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    PH2 = "ph2"
    RU = "ru"
    SG2 = "sg2"
    TH2 = "th2"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"


class RankedQueue(str, Enum):
    """``queueType`` values found on league entries."""

    SOLO = "RANKED_SOLO_5x5"
    FLEX = "RANKED_FLEX_SR"
    FLEX_TT = "RANKED_FLEX_TT"


AUTH_HEADER = "X-Riot-Token"
