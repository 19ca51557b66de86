"""Invoke transaction building."""

from .factory import DEFAULT_FEE_SETTINGS, FeeSettings, TransactionVersion, build_transaction

__all__ = [
    "TransactionVersion",
    "FeeSettings",
    "DEFAULT_FEE_SETTINGS",
    "build_transaction",
]
