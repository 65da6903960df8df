"""
Command line entry point. Takes no arguments: fetches the pinned
mercurial-devel release into the current working directory.
"""

import logging
import sys
from typing import List, Optional

import requests

from hg_vendor.archive_fetcher import ArchiveFetcher
from hg_vendor.archive_models import FetchPlan
from hg_vendor.vendor_config import VendorConfig
from hg_vendor.vendor_exceptions import VendorException
from hg_vendor.vendor_logger import VendorLogger


def run(config: VendorConfig, logger: VendorLogger, session=None) -> int:
    """
    Fetch the archive described by ``config`` and return the process exit code.
    Failures reach stderr through the fetcher's ERROR log record.
    """
    if session is None:
        with requests.Session() as owned_session:
            return run(config, logger, session=owned_session)

    fetcher = ArchiveFetcher(config, logger, session=session)
    plan = FetchPlan.from_config(config)
    try:
        fetcher.fetch(plan)
    except VendorException as e:
        return e.exit_code
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        print("usage: hg-vendor", file=sys.stderr)
        return 2

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(VendorConfig(), VendorLogger())
