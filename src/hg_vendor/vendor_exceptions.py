"""
This module contains the exceptions raised by the hg-vendor fetcher.
"""


class VendorException(Exception):
    """
    Exceptions raised by the hg-vendor fetcher. ``exit_code`` is the process
    exit status the CLI reports for the failure.
    """

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)


class NetworkFailure(VendorException):
    """DNS, TLS, connection or timeout errors, including failures mid-stream."""

    exit_code = 7


class HttpStatusFailure(VendorException):
    """The server answered with a non-2xx status and status checking is enabled."""

    exit_code = 22

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ArchiveFormatFailure(VendorException):
    """The response body is not a complete, valid gzip-compressed tarball."""

    exit_code = 2


class FilesystemFailure(VendorException):
    """Writing or renaming under the working directory failed."""

    exit_code = 1
