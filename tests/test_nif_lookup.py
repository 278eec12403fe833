"""
Tests for core.services.nif_lookup - local + remote orchestration.
"""

import pytest

from core.domain.models import NifReport, RemoteStatus
from core.services.nif_lookup import lookup_nif


class StubChecker:
    """NifStatusChecker stub that records the identifiers it was asked about."""

    def __init__(self, status):
        self.status = status
        self.calls = []

    def build_url(self, nif):
        return f"https://example.test/?q={nif}"

    def check(self, nif):
        self.calls.append(nif)
        return self.status


class TestLookupNif:

    def test_offline_skips_remote(self):
        checker = StubChecker(RemoteStatus.VALID_KNOWN)
        report = lookup_nif("500960046", checker=checker, offline=True)

        assert isinstance(report, NifReport)
        assert report.local_valid is True
        assert report.remote_status is None
        assert report.lookup_url is None
        assert checker.calls == []

    def test_offline_without_checker(self):
        report = lookup_nif("123456780", offline=True)
        assert report.local_valid is False

    def test_online_combines_both(self):
        checker = StubChecker(RemoteStatus.VALID_KNOWN)
        report = lookup_nif("500960046", checker=checker)

        assert report.nif == "500960046"
        assert report.local_valid is True
        assert report.remote_status == RemoteStatus.VALID_KNOWN
        assert report.lookup_url == "https://example.test/?q=500960046"
        assert checker.calls == ["500960046"]

    def test_locally_invalid_still_looked_up(self):
        checker = StubChecker(RemoteStatus.ERROR)
        report = lookup_nif("000000001", checker=checker)

        assert report.local_valid is False
        assert report.remote_status == RemoteStatus.ERROR
        assert checker.calls == ["000000001"]

    def test_online_requires_checker(self):
        with pytest.raises(ValueError):
            lookup_nif("500960046")

    def test_checked_at_is_utc(self):
        report = lookup_nif("500960046", offline=True)
        assert report.checked_at.utcoffset().total_seconds() == 0

    def test_long_identifier_online(self):
        """Arbitrary-length input keeps the remote verdict instead of failing."""
        checker = StubChecker(RemoteStatus.UNKNOWN)
        long_nif = "9" * 65
        report = lookup_nif(long_nif, checker=checker)

        assert report.nif == long_nif
        assert report.local_valid is False
        assert report.remote_status == RemoteStatus.UNKNOWN
        assert checker.calls == [long_nif]

    def test_long_identifier_offline(self):
        report = lookup_nif("1" * 200, offline=True)
        assert report.local_valid is False
