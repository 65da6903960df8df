"""
Pydantic data model for the mercurial-devel source archive, and the plan
object the fetcher executes.

The archive host serves one gzip-compressed tarball per release tag. Its
single top-level directory carries the version in its name, which the
fetcher strips by renaming it to ``destination_name``.
"""

import os
import pathlib
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hg_vendor.vendor_config import DEFAULT_HG_VERSION, VERSION_PATTERN, VendorConfig

HEPTAPOD_ARCHIVE_URL = (
    "https://foss.heptapod.net/mercurial/mercurial-devel/-/archive/"
    "{version}/mercurial-devel-{version}.tar.gz"
)


class ArchiveSource(BaseModel):
    """
    A downloadable release archive.

    Contains the URL template, the name of the directory the archive unpacks
    to, and the canonical name that directory is renamed to.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(DEFAULT_HG_VERSION, pattern=VERSION_PATTERN)
    url_template: str = Field(HEPTAPOD_ARCHIVE_URL, description="URL with a {version} slot")
    source_dir_template: str = Field(
        "mercurial-devel-{version}", description="Top-level directory inside the archive"
    )
    destination_name: str = Field("mercurial-devel", description="Name after renaming")
    archive_type: str = Field("tar.gz", description="Archive type")

    @property
    def url(self) -> str:
        return self.url_template.format(version=self.version)

    @property
    def extracted_dir_name(self) -> str:
        return self.source_dir_template.format(version=self.version)


class FetchStatus:
    """Enumeration of fetch statuses."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class FetchPlan:
    """
    A plan to fetch one archive into one working directory.

    Captures all information needed to download, extract and rename.
    """

    def __init__(
            self,
            source: ArchiveSource,
            working_directory: str,
            status: str = FetchStatus.PENDING,
    ):
        """
        Initialize a fetch plan.

        Args:
            source: The archive to fetch
            working_directory: Directory the archive is extracted into
            status: Current fetch status
        """
        self.source = source
        self.working_directory = pathlib.Path(working_directory)
        self.status = status
        self.error_message: Optional[str] = None

    @classmethod
    def from_config(cls, config: VendorConfig) -> "FetchPlan":
        """
        Create a plan for the version and working directory named in ``config``.
        The working directory defaults to the CWD at the time of the call.
        """
        working_directory = config.working_directory or os.getcwd()
        return cls(ArchiveSource(version=config.version), working_directory)

    @property
    def url(self) -> str:
        return self.source.url

    @property
    def extracted_path(self) -> pathlib.Path:
        return self.working_directory / self.source.extracted_dir_name

    @property
    def destination_path(self) -> pathlib.Path:
        return self.working_directory / self.source.destination_name

    def __repr__(self) -> str:
        return (
            f"FetchPlan(version={self.source.version}, "
            f"status={self.status}, url={self.url})"
        )
