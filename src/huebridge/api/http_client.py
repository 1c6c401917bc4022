from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from huebridge.errors import ResponseDecodeError
from huebridge.logging_mixin import LoggingMixin

DEFAULT_TIMEOUT = 5


class HttpClient(LoggingMixin):
    """Plain HTTP access to ``http://<address>/api/<app key>``.

    Verbs hand back the raw response; ``decode`` reads, checks and closes it.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = 0,
        session: Optional[requests.Session] = None,
    ):
        # a session passed in stays the caller's: no adapters mounted, not closed here
        self.owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url
        self.timeout = timeout
        self.debug = False

        if retries and self.owns_session:
            # connection failures only, the bridge never sees a retried read
            retry = Retry(total=retries, connect=retries, read=0, status=0, backoff_factor=0.3)
            self.session.mount("http://", HTTPAdapter(max_retries=retry))

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _log(self, method: str, url: str):
        if self.debug:
            self.logger.info("%s %s", method, url)

    def get(self, path: str) -> requests.Response:
        url = self.url(path)
        self._log("GET", url)
        return self.session.get(url, timeout=self.timeout)

    def post(self, path: str, payload: Optional[dict] = None) -> requests.Response:
        url = self.url(path)
        self._log("POST", url)
        if payload is None:
            return self.session.post(url, timeout=self.timeout)
        return self.session.post(url, json=payload, timeout=self.timeout)

    def put(self, path: str, payload: dict) -> requests.Response:
        url = self.url(path)
        self._log("PUT", url)
        return self.session.put(url, json=payload, timeout=self.timeout)

    def decode(self, response: requests.Response) -> Any:
        with response:
            response.raise_for_status()
            try:
                return response.json()
            except ValueError as e:
                raise ResponseDecodeError(
                    f"Invalid JSON from {response.url}: {response.text[:200]!r}"
                ) from e

    def close(self):
        if self.owns_session:
            self.session.close()
