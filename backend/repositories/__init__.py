"""Persistence layer: abstract interface and implementations."""

from .base import StoreError, StoreParseError, StoreProtocol
from .record_store import RecordStore

__all__ = ["StoreError", "StoreParseError", "StoreProtocol", "RecordStore"]
