"""Report assembler: runs every analyzer over one page and builds the report."""

import logging
from typing import Optional
from urllib.parse import urlparse

from seo_report.config import AnalysisThresholds, Config, default_thresholds
from seo_report.crawler import WebCrawler
from seo_report.exceptions import AnalysisError
from seo_report.headings import HeadingAnalyzer
from seo_report.image_analyzer import ImageAnalyzer
from seo_report.keyword_density import KeywordDensityAnalyzer
from seo_report.markup import AbstractMarkup, SoupMarkup
from seo_report.meta_tags import MetaTagAnalyzer
from seo_report.models import AnalysisInput, AnalysisReport
from seo_report.page_speed import PageSpeedEstimator
from seo_report.recommendations import RecommendationGenerator
from seo_report.scoring import Scorer
from seo_report.url_analyzer import URLAnalyzer
from seo_report.utils import format_timestamp, validate_url

logger = logging.getLogger(__name__)


class SEOAnalyzer:
    """Fetches a page and produces its AnalysisReport.

    The page is fetched and parsed once. The five content analyzers share no
    state and only read the parsed document; the scorer and recommendation
    generator only read their finished output.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        thresholds: Optional[AnalysisThresholds] = None,
        crawler: Optional[WebCrawler] = None,
    ):
        """Initialize the analyzer.

        Args:
            config: Runtime configuration (user agent, timeout)
            thresholds: Scoring thresholds (defaults reproduce the stock rules)
            crawler: Optional pre-built crawler
        """
        self.config = config or Config()
        self.thresholds = thresholds or default_thresholds
        self.crawler = crawler or WebCrawler(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
        )

        self.meta_tag_analyzer = MetaTagAnalyzer()
        self.heading_analyzer = HeadingAnalyzer()
        self.image_analyzer = ImageAnalyzer(self.thresholds)
        self.keyword_analyzer = KeywordDensityAnalyzer(self.thresholds)
        self.url_analyzer = URLAnalyzer()
        self.page_speed_estimator = PageSpeedEstimator(self.thresholds)
        self.scorer = Scorer(self.thresholds)
        self.recommendation_generator = RecommendationGenerator(self.thresholds)

    def analyze_url(self, url: str) -> AnalysisReport:
        """Fetch a URL and analyze it.

        Args:
            url: Absolute http(s) URL

        Returns:
            The complete AnalysisReport

        Raises:
            InvalidURLError: If the URL is malformed
            AnalysisError: If the page cannot be fetched
        """
        analysis_input = AnalysisInput(url=validate_url(url))
        page = self.crawler.fetch(analysis_input.url)

        try:
            return self.analyze_html(analysis_input.url, page.html)
        except Exception as e:
            logger.error(f"Failed to analyze {analysis_input.url}: {e}")
            raise AnalysisError(analysis_input.url, str(e)) from e

    def analyze_html(self, url: str, html: str) -> AnalysisReport:
        """Analyze HTML that has already been fetched.

        Args:
            url: The URL the HTML came from
            html: Raw HTML text

        Returns:
            The complete AnalysisReport
        """
        logger.info(f"Analyzing {url} ({len(html)} chars of HTML)")
        document = SoupMarkup(html)
        return self.analyze_document(url, document)

    def analyze_document(self, url: str, document: AbstractMarkup) -> AnalysisReport:
        meta_tags = self.meta_tag_analyzer.analyze(document)
        headings = self.heading_analyzer.analyze(document)
        images = self.image_analyzer.analyze(document)
        keywords = self.keyword_analyzer.analyze(document)
        url_analysis = self.url_analyzer.analyze(url)
        page_speed = self.page_speed_estimator.analyze(document)

        logger.debug(
            f"Findings for {url}: {len(headings)} headings, {len(images)} images, "
            f"{len(keywords)} keywords, desktop speed {page_speed.desktop_speed}"
        )

        scores = self.scorer.score(meta_tags, headings, images, page_speed)
        recommendations = self.recommendation_generator.generate(
            meta_tags, headings, images, keywords, page_speed
        )

        logger.info(
            f"Scores for {url}: overall={scores.overall}, meta={scores.meta_tags}, "
            f"structure={scores.content_structure}, images={scores.image_optimization}, "
            f"speed={scores.page_speed}"
        )

        return AnalysisReport(
            url=url,
            domain=urlparse(url).hostname or "",
            generated_at=format_timestamp(),
            scores=scores,
            meta_tags=meta_tags,
            headings=tuple(headings),
            images=tuple(images),
            keywords=tuple(keywords),
            url_analysis=url_analysis,
            page_speed=page_speed,
            recommendations=tuple(recommendations),
        )
