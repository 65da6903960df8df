"""
Archive fetcher implementation.

Streams the release tarball from the archive host straight into tar
extraction, then renames the versioned top-level directory.
"""

import contextlib
import gzip
import http.client
import logging
import os
import pathlib
import tarfile
import zlib
from typing import Optional

import requests
import urllib3

from hg_vendor.archive_models import FetchPlan, FetchStatus
from hg_vendor.vendor_config import VendorConfig
from hg_vendor.vendor_exceptions import (
    ArchiveFormatFailure,
    FilesystemFailure,
    HttpStatusFailure,
    NetworkFailure,
    VendorException,
)
from hg_vendor.vendor_logger import VendorLogger

# The body is read undecoded from response.raw, so no content coding may be negotiated.
REQUEST_HEADERS = {"Accept-Encoding": "identity"}


def _is_truncated_body(error: BaseException) -> bool:
    """
    Check whether a transport error means the server closed the connection
    before the announced Content-Length was delivered.
    """
    seen = set()
    while error is not None and id(error) not in seen:
        seen.add(id(error))
        if isinstance(error, http.client.IncompleteRead):
            return True
        # urllib3 wraps the IncompleteRead as ProtocolError(message, cause)
        if any(isinstance(arg, http.client.IncompleteRead) for arg in error.args):
            return True
        error = error.__cause__ or error.__context__
    return False


class ArchiveFetcher:
    """
    Downloads, extracts and renames the mercurial-devel source archive.

    Each step blocks until it completes or fails; nothing is retried and
    partially written files are left in place on failure.
    """

    def __init__(
        self,
        config: VendorConfig,
        logger: VendorLogger,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the archive fetcher.

        Args:
            config: Version, working directory and transport settings
            logger: Logger for progress and error messages
            session: HTTP session to issue the request with; a new
                requests.Session when omitted
        """
        self.config = config
        self.logger = logger
        self.session = session if session is not None else requests.Session()

    def fetch(self, plan: FetchPlan) -> pathlib.Path:
        """
        Execute a fetch plan.

        Args:
            plan: The fetch plan to execute

        Returns:
            Path of the renamed destination directory

        Raises:
            VendorException: the subclass matching the failing step
        """
        self.logger.log(
            f"Downloading mercurial-devel {plan.source.version} from {plan.url}",
            logging.INFO,
        )
        plan.status = FetchStatus.IN_PROGRESS

        try:
            with self._open_stream(plan) as response:
                self._extract(plan, response)
            self._rename(plan)
        except VendorException as e:
            plan.status = FetchStatus.FAILED
            plan.error_message = str(e)
            self.logger.log(
                f"Failed to fetch mercurial-devel {plan.source.version}",
                logging.ERROR,
                str(e),
            )
            raise

        plan.status = FetchStatus.COMPLETED
        self.logger.log(
            f"Successfully extracted mercurial-devel {plan.source.version} to {plan.destination_path}",
            logging.INFO,
        )
        return plan.destination_path

    def _open_stream(self, plan: FetchPlan) -> requests.Response:
        """
        Issue the GET request and return the unread response.

        The status is only enforced when ``check_status`` is set; otherwise
        whatever body the server returns is handed to extraction.
        """
        try:
            response = self.session.get(
                plan.url,
                headers=REQUEST_HEADERS,
                stream=True,
                allow_redirects=True,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(f"GET {plan.url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            message = f"GET {plan.url} returned HTTP {response.status_code}"
            if self.config.check_status:
                response.close()
                raise HttpStatusFailure(message, response.status_code)
            self.logger.log(f"{message}, extracting the body anyway", logging.WARNING)

        return response

    def _extract(self, plan: FetchPlan, response: requests.Response) -> None:
        """
        Decompress and unpack the response body into the working directory.

        The gzip stream is drained after the tar end-of-archive marker so a
        truncated transfer or a bad CRC is reported rather than ignored.
        """
        self.logger.log(
            f"Extracting {plan.source.archive_type} stream into {plan.working_directory}",
            logging.DEBUG,
        )
        try:
            with gzip.GzipFile(fileobj=response.raw, mode="rb") as compressed:
                with tarfile.open(fileobj=compressed, mode="r|") as archive:
                    archive.extractall(path=plan.working_directory, filter="tar")
                while compressed.read(self.config.chunk_size):
                    pass
        except (gzip.BadGzipFile, tarfile.TarError, EOFError, zlib.error) as e:
            raise ArchiveFormatFailure(f"Invalid archive from {plan.url}: {e}") from e
        except (
            requests.exceptions.RequestException,
            urllib3.exceptions.HTTPError,
            http.client.HTTPException,
        ) as e:
            if _is_truncated_body(e):
                raise ArchiveFormatFailure(f"Truncated archive from {plan.url}: {e}") from e
            raise NetworkFailure(f"Reading {plan.url} failed: {e}") from e
        except OSError as e:
            raise FilesystemFailure(
                f"Extracting into {plan.working_directory} failed: {e}"
            ) from e

    def _rename(self, plan: FetchPlan) -> None:
        """
        Rename the versioned directory to its canonical name. An existing
        destination is never replaced or moved into.
        """
        extracted = plan.extracted_path
        destination = plan.destination_path

        if destination.exists() or destination.is_symlink():
            raise FilesystemFailure(f"Destination already exists: {destination}")
        if not extracted.is_dir():
            raise FilesystemFailure(f"Extracted directory not found: {extracted}")

        # rename(2) replaces an empty target directory, so on POSIX the name is
        # claimed with mkdir first and rename only ever replaces that claim.
        claimed = False
        try:
            if os.name == "posix":
                destination.mkdir()
                claimed = True
            extracted.rename(destination)
        except FileExistsError as e:
            raise FilesystemFailure(f"Destination already exists: {destination}") from e
        except OSError as e:
            if claimed:
                with contextlib.suppress(OSError):
                    destination.rmdir()
            raise FilesystemFailure(
                f"Renaming {extracted} to {destination} failed: {e}"
            ) from e

        self.logger.log(f"Renamed {extracted.name} to {destination.name}", logging.DEBUG)
