# src/seo_report/storage.py
"""Report store abstraction with an in-memory implementation.

The store is an explicit object owned by whoever serves requests; there is no
module-level instance. Reports are append-only: create, then read by id or by
URL.
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from seo_report.models import AnalysisReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredReport:
    """A report as kept by the store."""

    id: int
    url: str
    domain: str
    overall_score: int
    meta_tags_score: int
    content_structure_score: int
    image_optimization_score: int
    page_speed_score: int
    created_at: datetime
    report: AnalysisReport

    @property
    def report_data(self) -> Dict[str, Any]:
        """The report as a JSON-ready dict, built fresh on every access."""
        return self.report.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "domain": self.domain,
            "overallScore": self.overall_score,
            "metaTagsScore": self.meta_tags_score,
            "contentStructureScore": self.content_structure_score,
            "imageOptimizationScore": self.image_optimization_score,
            "pageSpeedScore": self.page_speed_score,
            "createdAt": self.created_at.isoformat(),
            "reportData": self.report_data,
        }

    def to_report(self) -> AnalysisReport:
        return self.report


class AbstractReportStore(ABC):
    """Abstract base class defining the report store interface."""

    @abstractmethod
    def create(self, report: AnalysisReport) -> StoredReport:
        """Store a report and assign it the next id.

        Args:
            report: The finished analysis report

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    def get(self, report_id: int) -> Optional[StoredReport]:
        """Retrieve a report by id, or None."""
        pass

    @abstractmethod
    def get_by_url(self, url: str) -> Optional[StoredReport]:
        """Retrieve the first report stored for a URL, or None."""
        pass

    @abstractmethod
    def all(self) -> List[StoredReport]:
        """All stored reports in insertion order."""
        pass


class InMemoryReportStore(AbstractReportStore):
    """Process-local store. Contents do not survive a restart."""

    def __init__(self):
        self._reports: Dict[int, StoredReport] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, report: AnalysisReport) -> StoredReport:
        with self._lock:
            stored = StoredReport(
                id=self._next_id,
                url=report.url,
                domain=report.domain,
                overall_score=report.scores.overall,
                meta_tags_score=report.scores.meta_tags,
                content_structure_score=report.scores.content_structure,
                image_optimization_score=report.scores.image_optimization,
                page_speed_score=report.scores.page_speed,
                created_at=datetime.now(),
                report=report,
            )
            self._reports[stored.id] = stored
            self._next_id += 1

        logger.debug(f"Stored report {stored.id} for {stored.url}")
        return stored

    def get(self, report_id: int) -> Optional[StoredReport]:
        return self._reports.get(report_id)

    def get_by_url(self, url: str) -> Optional[StoredReport]:
        with self._lock:
            reports = list(self._reports.values())
        return next((r for r in reports if r.url == url), None)

    def all(self) -> List[StoredReport]:
        with self._lock:
            return list(self._reports.values())

    def __len__(self) -> int:
        return len(self._reports)
