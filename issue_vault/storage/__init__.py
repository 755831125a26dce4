"""Storage of exported vault documents."""

from .manager import VaultWriter

__all__ = ["VaultWriter"]
