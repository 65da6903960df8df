"""
Archive models for hg-vendor.

This package provides Pydantic data models describing the mercurial-devel
source archive and the plan for fetching it.
"""

from .archive_source import (
    ArchiveSource,
    FetchPlan,
    FetchStatus,
)

__all__ = [
    "ArchiveSource",
    "FetchPlan",
    "FetchStatus",
]
