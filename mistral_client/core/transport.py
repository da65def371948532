from typing import Any, Dict

import requests
from requests.adapters import HTTPAdapter


class HTTPTransport:
    """Low-level HTTP transport using a pooled requests session."""

    def __init__(
        self,
        timeout: float = 120,
        session: requests.Session = None,
        pool_maxsize: int = 10,
    ):
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_connections=pool_maxsize, pool_maxsize=pool_maxsize)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        self._session = session

    def request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str] = None,
        json: Any = None,
        stream: bool = False,
    ) -> requests.Response:
        """Send one request; the body is left unread when streaming."""
        return self._session.request(
            method.upper(),
            url,
            headers=headers,
            json=json,
            stream=stream,
            timeout=self.timeout,
            allow_redirects=True,
        )

    def close(self):
        self._session.close()
