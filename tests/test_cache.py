"""Tests for the result cache and request fingerprint."""

import threading

import pytest

from fsc_classifier.pipeline.cache import ResultCache, fingerprint
from fsc_classifier.schemas.contracts import CategoryMatch, ClassificationRequest, ClassificationResult


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def result() -> ClassificationResult:
    return ClassificationResult(
        company_description="Makes glue.",
        matches=(CategoryMatch(code="5610", title="Adhesives", reason="Glue maker", confidence="high"),),
    )


class TestFingerprint:
    def test_case_and_whitespace_insensitive(self) -> None:
        a = ClassificationRequest(company_name="Acme Corp", website_url="acme.com", email_domain="acme.com")
        b = ClassificationRequest(company_name="  ACME corp ", website_url="ACME.com ", email_domain=" Acme.COM")

        assert fingerprint(a) == fingerprint(b)

    def test_attachment_order_ignored(self) -> None:
        a = ClassificationRequest(company_name="Acme", attachment_refs=("file_b", "file_a"))
        b = ClassificationRequest(company_name="Acme", attachment_refs=("file_a", "file_b"))

        assert fingerprint(a) == fingerprint(b)

    def test_missing_and_empty_fields_equal(self) -> None:
        a = ClassificationRequest(company_name="Acme", website_url=None)
        b = ClassificationRequest(company_name="Acme", website_url="")

        assert fingerprint(a) == fingerprint(b)

    def test_different_requests_differ(self) -> None:
        a = ClassificationRequest(company_name="Acme", website_url="acme.com")
        b = ClassificationRequest(company_name="Acme", website_url="acme.org")

        assert fingerprint(a) != fingerprint(b)


class TestResultCache:
    def test_miss(self, clock: FakeClock) -> None:
        cache = ResultCache(ttl_seconds=60, clock=clock)

        assert cache.get("missing") is None

    def test_hit_within_ttl(self, clock: FakeClock, result: ClassificationResult) -> None:
        cache = ResultCache(ttl_seconds=60, clock=clock)
        cache.put("k", result)
        clock.now += 59.9

        assert cache.get("k") is result

    def test_expires_at_ttl(self, clock: FakeClock, result: ClassificationResult) -> None:
        cache = ResultCache(ttl_seconds=60, clock=clock)
        cache.put("k", result)
        clock.now += 60

        assert cache.get("k") is None
        assert len(cache) == 0

    def test_put_replaces_wholesale(self, clock: FakeClock, result: ClassificationResult) -> None:
        cache = ResultCache(ttl_seconds=60, clock=clock)
        cache.put("k", result)
        clock.now += 50
        fresh = ClassificationResult(company_description="Fresh.")
        cache.put("k", fresh)
        clock.now += 50

        # Timestamp restarts on replacement
        assert cache.get("k") is fresh

    def test_bounded(self, clock: FakeClock, result: ClassificationResult) -> None:
        cache = ResultCache(ttl_seconds=60, max_entries=2, clock=clock)
        cache.put("a", result)
        cache.put("b", result)
        cache.put("c", result)

        assert len(cache) == 2
        assert cache.get("a") is None
        assert cache.get("c") is result

    def test_invalid_configuration(self) -> None:
        with pytest.raises(ValueError):
            ResultCache(ttl_seconds=0)
        with pytest.raises(ValueError):
            ResultCache(max_entries=0)

    def test_concurrent_writers(self, result: ClassificationResult) -> None:
        cache = ResultCache(ttl_seconds=60, max_entries=50)

        def writer(prefix: str) -> None:
            for i in range(200):
                cache.put(f"{prefix}-{i}", result)
                cache.get(f"{prefix}-{i // 2}")

        threads = [threading.Thread(target=writer, args=(str(n),)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 50
