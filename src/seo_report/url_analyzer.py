"""URL structure analysis."""

from urllib.parse import urlparse

from seo_report.constants import MOBILE_FRIENDLY_PLACEHOLDER, WWW_REDIRECT_PLACEHOLDER
from seo_report.models import UrlFindings


class URLAnalyzer:
    """Derives structural facts from the URL string. Never fetches anything.

    ``mobile_friendly`` and ``www_redirect_note`` are fixed values rather than
    measurements.
    """

    def analyze(self, url: str) -> UrlFindings:
        """Analyze URL structure.

        Args:
            url: Absolute URL to analyze

        Returns:
            UrlFindings for the URL
        """
        parsed = urlparse(url)

        return UrlFindings(
            length=len(url),
            contains_underscores="_" in url,
            https_enabled=parsed.scheme == "https",
            mobile_friendly=MOBILE_FRIENDLY_PLACEHOLDER,
            www_redirect_note=WWW_REDIRECT_PLACEHOLDER,
        )
