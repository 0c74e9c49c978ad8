"""Streaming layer: record-at-a-time reading of collection files."""

from .reader import RECORD_PATH, CollectionReader

__all__ = ["RECORD_PATH", "CollectionReader"]
