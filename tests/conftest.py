"""Shared fixtures for the SEO report tests."""

import pytest

from seo_report.models import (
    AnalysisReport,
    CategoryScores,
    HeadingFinding,
    HeadingStatus,
    ImageFinding,
    ImageStatus,
    KeywordFinding,
    KeywordStatus,
    MetaTagFindings,
    PageSpeedFindings,
    Recommendation,
    Severity,
    UrlFindings,
)


@pytest.fixture
def sample_html():
    """A small, reasonably well-formed page."""
    return """
    <html>
        <head>
            <title>Fresh Coffee Beans Delivered Weekly | Bean Box</title>
            <meta name="description" content="Subscribe to weekly deliveries of freshly roasted coffee beans from independent roasters around the world.">
            <meta name="keywords" content="coffee, beans, subscription">
            <meta name="viewport" content="width=device-width, initial-scale=1">
            <link rel="canonical" href="https://example.com/coffee">
            <link rel="stylesheet" href="/style.css">
            <link rel="preload" href="/hero.webp" as="image">
        </head>
        <body>
            <h1>Fresh Coffee Beans</h1>
            <h2>How it works</h2>
            <h2>Our roasters</h2>
            <img src="/images/hero.webp" alt="Barista pouring coffee into a white cup">
            <img src="/images/logo.png" alt="">
            <p>Coffee coffee coffee beans roasted fresh every week.</p>
        </body>
    </html>
    """


@pytest.fixture
def sample_report():
    """A fully populated report for exporter and store tests."""
    return AnalysisReport(
        url="https://example.com/coffee",
        domain="example.com",
        generated_at="Oct 17, 2026, 3:04 PM",
        scores=CategoryScores(
            overall=73,
            meta_tags=100,
            content_structure=80,
            page_speed=77,
            image_optimization=65,
        ),
        meta_tags=MetaTagFindings(
            title="Fresh Coffee Beans Delivered Weekly | Bean Box",
            description="Subscribe to weekly deliveries of freshly roasted coffee beans.",
            keywords=("coffee", "beans", "subscription"),
            canonical="https://example.com/coffee",
        ),
        headings=(
            HeadingFinding("H1", "Fresh Coffee Beans"),
            HeadingFinding("H2", "How it works"),
            HeadingFinding("H4", "Details, with commas", HeadingStatus.WARNING, "Skipped H3 in hierarchy"),
        ),
        images=(
            ImageFinding("hero.webp", "Barista pouring coffee into a white cup", ImageStatus.DESCRIPTIVE),
            ImageFinding("logo.png", "", ImageStatus.MISSING),
        ),
        keywords=(
            KeywordFinding("coffee", 37.5, KeywordStatus.OVER_OPTIMIZED),
            KeywordFinding("beans", 12.5, KeywordStatus.OVER_OPTIMIZED),
            KeywordFinding("roasted", 0.4, KeywordStatus.UNDER_OPTIMIZED),
        ),
        url_analysis=UrlFindings(
            length=26,
            contains_underscores=False,
            https_enabled=True,
            mobile_friendly=True,
            www_redirect_note="Properly configured",
        ),
        page_speed=PageSpeedFindings(
            desktop_speed=77,
            mobile_speed=54,
            critical_issues=(),
            moderate_issues=("No preloaded resources", "Missing viewport meta tag"),
        ),
        recommendations=(
            Recommendation(Severity.CRITICAL, "Add alt text to 1 image that is missing it"),
            Recommendation(Severity.MODERATE, "Fix heading hierarchy issues (avoid skipping heading levels)"),
            Recommendation(Severity.SUGGESTION, "Add Open Graph and Twitter Card meta tags for better social sharing"),
        ),
    )
