"""
Tests for the archive source model, fetch plans and vendor configuration.
"""

import pathlib

import pytest
from pydantic import ValidationError

from hg_vendor.archive_models import ArchiveSource, FetchPlan, FetchStatus
from hg_vendor.vendor_config import DEFAULT_HG_VERSION, VendorConfig


class TestArchiveSource:
    """Tests for ArchiveSource."""

    def test_url_for_pinned_version(self):
        """The default source points at the 6.7.2 Heptapod archive."""
        source = ArchiveSource()
        assert source.version == "6.7.2"
        assert source.url == (
            "https://foss.heptapod.net/mercurial/mercurial-devel/-/archive/"
            "6.7.2/mercurial-devel-6.7.2.tar.gz"
        )

    def test_extracted_dir_name(self):
        source = ArchiveSource(version="6.7.2")
        assert source.extracted_dir_name == "mercurial-devel-6.7.2"
        assert source.destination_name == "mercurial-devel"

    def test_other_version_changes_url_and_source_dir_only(self):
        """Version 6.8.0 moves URL and source dir together; destination is fixed."""
        source = ArchiveSource(version="6.8.0")
        assert source.url == (
            "https://foss.heptapod.net/mercurial/mercurial-devel/-/archive/"
            "6.8.0/mercurial-devel-6.8.0.tar.gz"
        )
        assert source.extracted_dir_name == "mercurial-devel-6.8.0"
        assert source.destination_name == "mercurial-devel"

    @pytest.mark.parametrize("version", ["", "6.7/2", "../6.7.2", "6.7 2", "6.7.2?x=1"])
    def test_rejects_versions_needing_escaping(self, version):
        with pytest.raises(ValidationError):
            ArchiveSource(version=version)

    def test_is_immutable(self):
        source = ArchiveSource()
        with pytest.raises(ValidationError):
            source.version = "6.8.0"


class TestFetchPlan:
    """Tests for FetchPlan."""

    def test_paths_rooted_at_working_directory(self, tmp_path):
        plan = FetchPlan(ArchiveSource(version="6.8.0"), str(tmp_path))

        assert plan.status == FetchStatus.PENDING
        assert plan.error_message is None
        assert plan.extracted_path == tmp_path / "mercurial-devel-6.8.0"
        assert plan.destination_path == tmp_path / "mercurial-devel"

    def test_from_config_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        plan = FetchPlan.from_config(VendorConfig())

        assert plan.working_directory.resolve() == pathlib.Path(tmp_path).resolve()
        assert plan.source.version == DEFAULT_HG_VERSION

    def test_from_config_uses_configured_directory(self, tmp_path):
        config = VendorConfig(version="6.8.0", working_directory=str(tmp_path))
        plan = FetchPlan.from_config(config)

        assert plan.working_directory == tmp_path
        assert "6.8.0" in repr(plan)


class TestVendorConfig:
    """Tests for VendorConfig."""

    def test_defaults(self):
        config = VendorConfig()
        assert config.version == "6.7.2"
        assert config.working_directory is None
        assert config.check_status is False
        assert config.timeout is None

    def test_from_dict(self):
        config = VendorConfig.from_dict({"version": "6.8.0", "check_status": True})
        assert config.version == "6.8.0"
        assert config.check_status is True

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            VendorConfig.from_dict({"retries": 3})

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            VendorConfig(timeout=0)
