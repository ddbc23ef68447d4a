"""Source ingestion — file discovery and repository fetching."""

from react_lens.ingestion.discovery import discover_files

__all__ = ["discover_files"]
