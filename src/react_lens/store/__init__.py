"""Persistence for shareable scan results."""

from react_lens.store.share_store import SharedScan, ShareStore

__all__ = ["ShareStore", "SharedScan"]
