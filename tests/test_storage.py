"""Tests for the in-memory report store."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import pytest

from seo_report.storage import InMemoryReportStore


class TestInMemoryReportStore:
    """Test cases for InMemoryReportStore."""

    @pytest.fixture
    def store(self):
        return InMemoryReportStore()

    def test_create_assigns_incrementing_ids(self, store, sample_report):
        """Test ids start at 1 and increase."""
        first = store.create(sample_report)
        second = store.create(sample_report)

        assert first.id == 1
        assert second.id == 2
        assert len(store) == 2

    def test_create_copies_scores(self, store, sample_report):
        """Test denormalized score columns."""
        stored = store.create(sample_report)

        assert stored.url == "https://example.com/coffee"
        assert stored.domain == "example.com"
        assert stored.overall_score == 73
        assert stored.meta_tags_score == 100
        assert stored.content_structure_score == 80
        assert stored.image_optimization_score == 65
        assert stored.page_speed_score == 77

    def test_get(self, store, sample_report):
        """Test lookup by id."""
        stored = store.create(sample_report)
        assert store.get(stored.id) == stored
        assert store.get(99) is None

    def test_get_by_url_returns_first(self, store, sample_report):
        """Test lookup by URL returns the earliest match."""
        first = store.create(sample_report)
        store.create(sample_report)
        store.create(replace(sample_report, url="https://other.example.com/"))

        assert store.get_by_url("https://example.com/coffee").id == first.id
        assert store.get_by_url("https://missing.example.com/") is None

    def test_all_in_insertion_order(self, store, sample_report):
        """Test all() returns reports in insertion order."""
        store.create(sample_report)
        store.create(replace(sample_report, url="https://other.example.com/"))

        assert [r.url for r in store.all()] == [
            "https://example.com/coffee",
            "https://other.example.com/",
        ]

    def test_report_round_trip(self, store, sample_report):
        """Test the stored JSON blob rebuilds the original report."""
        stored = store.create(sample_report)
        assert stored.to_report() == sample_report

    def test_stored_blob_cannot_be_changed_by_callers(self, store, sample_report):
        """Test editing a returned report dict leaves the stored report intact."""
        stored = store.create(sample_report)

        data = store.get(stored.id).report_data
        data["scores"]["overall"] = 0
        data["headings"].clear()
        store.all()[0].to_dict()["reportData"]["url"] = "https://tampered.example.com/"

        fresh = store.get(stored.id)
        assert fresh.report_data["scores"]["overall"] == 73
        assert len(fresh.report_data["headings"]) == 3
        assert fresh.report_data["url"] == "https://example.com/coffee"
        assert fresh.to_report() == sample_report

    def test_to_dict(self, store, sample_report):
        """Test camelCase serialization of a stored record."""
        data = store.create(sample_report).to_dict()

        assert data["id"] == 1
        assert data["overallScore"] == 73
        assert data["reportData"]["url"] == "https://example.com/coffee"
        assert "createdAt" in data

    def test_concurrent_creates_get_unique_ids(self, store, sample_report):
        """Test ids stay unique under concurrent writers."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: store.create(sample_report), range(50)))

        assert sorted(r.id for r in results) == list(range(1, 51))
