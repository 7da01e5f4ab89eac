"""Fetch raw search results from the Naver English-Korean dictionary"""

import requests  # type: ignore[import-untyped]

from ..config.settings import settings
from ..exceptions import DictionaryRequestError
from ..logging_config import get_logger
from .constants import DictionaryConstants
from .interfaces import DictionaryClientInterface

logger = get_logger(__name__)


class DictionaryClient(DictionaryClientInterface):
    """Issues one blocking search request per term, without retries"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ):
        self.base_url = base_url or settings.dictionary.base_url
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self.timeout = float(
            timeout if timeout is not None else settings.dictionary.request_timeout
        )
        self.session = requests.Session()
        headers = DictionaryConstants.DEFAULT_HEADERS.copy()
        headers["User-Agent"] = user_agent or settings.dictionary.user_agent
        self.session.headers.update(headers)

    def build_url(self, term: str) -> str:
        """Embed the term into the search query template"""
        return self.base_url + DictionaryConstants.SEARCH_PATH_TEMPLATE.format(
            term=term
        )

    def lookup(self, term: str) -> bytes | None:
        """Return the response body for ``term``, or None on any failure"""
        try:
            return self._fetch(term)
        except DictionaryRequestError as e:
            logger.error(f"HTTP request error: {e}")
            return None

    def _fetch(self, term: str) -> bytes | None:
        url = self.build_url(term)
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DictionaryRequestError(term, url, e) from e

        if r.status_code != 200:
            logger.warning(f"Dictionary returned HTTP {r.status_code} for {term}")
            return None

        try:
            body = r.content
        except (requests.RequestException, OSError) as e:
            logger.error(f"failed to read response for {term}: {e}")
            return None

        logger.debug(f"Received {len(body)} bytes for {term}")
        return body
