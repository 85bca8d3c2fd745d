"""Replays deposit, withdrawal and dispute transactions into per-client account balances."""

__version__ = "0.1.0"
