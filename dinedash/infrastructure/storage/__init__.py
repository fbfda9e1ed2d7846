"""Local short-lived storage for inbound images awaiting transcoding"""

from .staging_store import StagedFile, StagingStore

__all__ = ["StagedFile", "StagingStore"]
