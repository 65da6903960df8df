import pytest

from hg_vendor.vendor_logger import VendorLogger
from tests.test_utils import make_tarball


@pytest.fixture
def logger():
    return VendorLogger()


@pytest.fixture
def tarball():
    return make_tarball("6.7.2")
