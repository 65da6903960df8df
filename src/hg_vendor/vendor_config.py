"""
Configuration parameters for hg-vendor.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HG_VERSION = "6.7.2"

# Characters that need no escaping in a URL path segment or a file name.
VERSION_PATTERN = r"^[0-9A-Za-z][0-9A-Za-z._+-]*$"


class VendorConfig(BaseModel):
    """
    Configuration parameters for a vendoring run.

    Nothing is read from the environment or from files; callers construct
    the config directly or via ``from_dict``.
    """

    model_config = ConfigDict(extra="forbid")

    version: str = Field(
        DEFAULT_HG_VERSION,
        pattern=VERSION_PATTERN,
        description="mercurial-devel release to download",
    )
    working_directory: Optional[str] = Field(
        None, description="Directory to extract into; the process CWD when unset"
    )
    check_status: bool = Field(
        False,
        description="Fail on non-2xx responses instead of handing the body to tar",
    )
    timeout: Optional[float] = Field(
        None, gt=0, description="Socket timeout in seconds; None blocks indefinitely"
    )
    chunk_size: int = Field(64 * 1024, gt=0, description="Read size for the gzip stream")

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "VendorConfig":
        """
        Create a VendorConfig instance from a dictionary
        """
        return cls(**env)
