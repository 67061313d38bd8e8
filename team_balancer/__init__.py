"""Riot API backed player scoring and team balancing service."""

__version__ = "0.1.0"
