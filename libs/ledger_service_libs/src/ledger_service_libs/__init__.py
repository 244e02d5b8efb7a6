"""Shared infrastructure for ledger gateway services: logging, config, errors."""
