"""Web crawler for fetching the page under analysis."""

import logging
import time
from typing import Optional

import requests

from seo_report.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from seo_report.exceptions import AnalysisError
from seo_report.models import FetchedPage

logger = logging.getLogger(__name__)


class WebCrawler:
    """Fetches a single page over HTTP.

    Exactly one attempt is made per call; there is no retry policy. Any
    network failure, timeout or non-2xx status raises AnalysisError.
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: int = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the web crawler.

        Args:
            user_agent: Custom user agent string for requests
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout

        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        })

    def fetch(self, url: str) -> FetchedPage:
        """Fetch a URL and return its HTML.

        Args:
            url: The URL to fetch

        Returns:
            FetchedPage with the response body

        Raises:
            AnalysisError: On timeout, connection failure or HTTP error status
        """
        logger.info(f"Fetching {url}")

        try:
            start_time = time.time()
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
            elapsed = time.time() - start_time
            response.raise_for_status()
            if not 200 <= response.status_code < 300:
                # raise_for_status() lets a final 3xx through
                raise self._failure(url, f"HTTP {response.status_code}")

        except requests.exceptions.Timeout as e:
            raise self._failure(url, f"Request timeout after {self.timeout}s") from e

        except requests.exceptions.HTTPError as e:
            raise self._failure(url, str(e)) from e

        except requests.exceptions.ConnectionError as e:
            raise self._failure(url, f"Connection error: {e}") from e

        except requests.exceptions.RequestException as e:
            raise self._failure(url, str(e)) from e

        # requests assumes ISO-8859-1 for text/* without a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = response.apparent_encoding

        logger.debug(
            f"Fetched {url}: status={response.status_code}, "
            f"{len(response.text)} chars in {elapsed:.2f}s"
        )

        return FetchedPage(
            url=url,
            html=response.text,
            status_code=response.status_code,
            final_url=response.url,
            elapsed=elapsed,
        )

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _failure(url: str, cause: str) -> AnalysisError:
        logger.error(f"Failed to fetch {url}: {cause}")
        return AnalysisError(url, cause)
