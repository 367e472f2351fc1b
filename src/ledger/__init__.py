"""Ledger: local bookkeeping storage."""

__version__ = "0.1.0"
