"""
hg-vendor fetches a pinned mercurial-devel source release and unpacks it
as ``mercurial-devel`` in the working directory.
"""

from hg_vendor.archive_fetcher import ArchiveFetcher
from hg_vendor.archive_models import ArchiveSource, FetchPlan, FetchStatus
from hg_vendor.vendor_config import DEFAULT_HG_VERSION, VendorConfig
from hg_vendor.vendor_logger import VendorLogger

__all__ = [
    "ArchiveFetcher",
    "ArchiveSource",
    "FetchPlan",
    "FetchStatus",
    "DEFAULT_HG_VERSION",
    "VendorConfig",
    "VendorLogger",
]
