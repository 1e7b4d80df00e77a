"""Exceptions raised by the SEO report engine."""

from typing import Optional


class SEOReportError(Exception):
    """Base class for all SEO report errors."""


class InvalidURLError(SEOReportError, ValueError):
    """Raised when a URL is not an absolute http(s) URL."""

    DEFAULT_MESSAGE = "Please enter a valid URL including http:// or https://"

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        self.message = message or self.DEFAULT_MESSAGE
        super().__init__(self.message)


class AnalysisError(SEOReportError):
    """Raised when a page cannot be fetched or analyzed.

    This is the only error the engine raises once a URL has been validated.
    There is never a partial report.
    """

    def __init__(self, url: str, cause: str):
        self.url = url
        self.cause = cause
        self.message = f"Failed to analyze URL: {cause}"
        super().__init__(self.message)
