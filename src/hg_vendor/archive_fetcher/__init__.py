"""
Archive fetcher.

This package handles:
1. Downloading the release archive
2. Extracting it as it streams in
3. Renaming the extracted directory
"""

from .fetcher import ArchiveFetcher

__all__ = ["ArchiveFetcher"]
