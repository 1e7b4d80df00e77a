"""SEO report engine: fetch a page and produce a heuristic SEO quality report."""

__version__ = "0.1.0"

from seo_report.analyzer import SEOAnalyzer
from seo_report.config import AnalysisThresholds, Config
from seo_report.exceptions import AnalysisError, InvalidURLError, SEOReportError
from seo_report.models import (
    AnalysisReport,
    CategoryScores,
    HeadingFinding,
    ImageFinding,
    KeywordFinding,
    MetaTagFindings,
    PageSpeedFindings,
    Recommendation,
    UrlFindings,
)
from seo_report.report_generator import ReportGenerator
from seo_report.storage import AbstractReportStore, InMemoryReportStore, StoredReport

__all__ = [
    "SEOAnalyzer",
    "AnalysisThresholds",
    "Config",
    "AnalysisError",
    "InvalidURLError",
    "SEOReportError",
    "AnalysisReport",
    "CategoryScores",
    "HeadingFinding",
    "ImageFinding",
    "KeywordFinding",
    "MetaTagFindings",
    "PageSpeedFindings",
    "Recommendation",
    "UrlFindings",
    "ReportGenerator",
    "AbstractReportStore",
    "InMemoryReportStore",
    "StoredReport",
]
