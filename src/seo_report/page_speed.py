"""
Page Speed Estimator

Estimates desktop and mobile speed scores from static markup signals:
- HTML document size
- Number of images
- Number of scripts
- Number of stylesheets

Without a real browser we can only estimate. Nothing here touches the
network.
"""

import logging
from typing import Optional

from seo_report.config import AnalysisThresholds, default_thresholds
from seo_report.constants import (
    LARGE_HTML_ISSUE,
    MISSING_VIEWPORT_ISSUE,
    NO_PRELOAD_ISSUE,
    RENDER_BLOCKING_JS_ISSUE,
    TOO_MANY_IMAGES_ISSUE,
)
from seo_report.markup import AbstractMarkup
from seo_report.models import PageSpeedFindings
from seo_report.utils import clamp, round_half_up

logger = logging.getLogger(__name__)


class PageSpeedEstimator:
    """Estimate a 0-100 speed score from page complexity."""

    def __init__(self, thresholds: Optional[AnalysisThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    def analyze(self, document: AbstractMarkup) -> PageSpeedFindings:
        """
        Estimate page speed from a parsed document.

        Args:
            document: Parsed markup (its raw length is the HTML size)

        Returns:
            PageSpeedFindings with scores and detected issues
        """
        html_size = document.raw_length
        image_count = document.count("img")
        script_count = document.count("script")
        css_count = document.count("link", {"rel": "stylesheet"})

        desktop_speed = self.estimate_desktop_speed(html_size, image_count, script_count, css_count)
        mobile_speed = self.estimate_mobile_speed(desktop_speed)

        critical, moderate = [], []

        if image_count > self.thresholds.max_images:
            critical.append(TOO_MANY_IMAGES_ISSUE.format(limit=self.thresholds.max_images))

        if script_count > self.thresholds.max_scripts:
            critical.append(RENDER_BLOCKING_JS_ISSUE.format(count=script_count))

        if html_size > self.thresholds.large_html_bytes:
            moderate.append(LARGE_HTML_ISSUE)

        # Preloads only count inside <head> when the document has one
        if not document.exists("link", {"rel": "preload"}, within=document.head):
            moderate.append(NO_PRELOAD_ISSUE)

        if not document.exists("meta", {"name": "viewport"}):
            moderate.append(MISSING_VIEWPORT_ISSUE)

        logger.debug(
            f"Page speed inputs: html={html_size} chars, images={image_count}, "
            f"scripts={script_count}, stylesheets={css_count} -> desktop={desktop_speed}"
        )

        return PageSpeedFindings(
            desktop_speed=desktop_speed,
            mobile_speed=mobile_speed,
            critical_issues=tuple(critical),
            moderate_issues=tuple(moderate),
        )

    def estimate_desktop_speed(
        self, html_size: int, image_count: int, script_count: int, css_count: int
    ) -> int:
        """Complexity-based desktop score, clamped to [0, 100]."""
        t = self.thresholds
        penalty = (
            html_size / 1024 / t.html_kb_per_point
            + image_count * t.image_weight
            + script_count * t.script_weight
            + css_count * t.stylesheet_weight
        )
        return round_half_up(clamp(100 - penalty))

    def estimate_mobile_speed(self, desktop_speed: int) -> int:
        """Mobile is assumed slower than desktop by a fixed factor."""
        return max(0, round_half_up(desktop_speed * self.thresholds.mobile_speed_factor))
