"""Configuration utilities for ledger gateway services."""

from .base import Environment, ServiceSettings

__all__ = ["Environment", "ServiceSettings"]
