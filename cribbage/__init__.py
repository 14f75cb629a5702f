"""Core rules engine package for two-player cribbage."""

__all__ = [
    "cards",
    "deck",
    "scoring",
    "mechanics",
    "pegging",
    "state",
    "game",
    "service",
    "rules_schema",
]
