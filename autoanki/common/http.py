"""HTTP transport shared by every save job.

A single `Transport` is built once per run and handed to each job. Jobs only
read from it; the underlying requests session keeps pooled connections.
"""

from typing import Dict, Mapping, NamedTuple, Optional

import requests

from autoanki.common.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from autoanki.common.errors import NetworkError


class Response(NamedTuple):
    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def build_cookie_header(cookies: Mapping[str, str]) -> str:
    """Render session cookies as a Cookie header value: `a=1; b=2`."""
    return "; ".join(f"{name}={value}" for name, value in cookies.items())


class Transport:
    """Thin wrapper over a requests session that raises NetworkError."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch(self, url: str) -> bytes:
        """GET a page and return its raw body."""
        try:
            resp = self.session.get(
                url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(url, str(e)) from e
        return resp.content

    def submit(self, url: str, headers: Mapping[str, str], form: Mapping[str, str]) -> Response:
        """POST url-encoded form fields; non-2xx statuses are returned, not raised."""
        try:
            resp = self.session.post(
                url,
                headers=dict(headers),
                data=dict(form),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(url, str(e)) from e
        return Response(resp.status_code, resp.text or "")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def request_headers(cookies: Mapping[str, str], user_agent: str = DEFAULT_USER_AGENT) -> Dict[str, str]:
    """Headers attached to the AnkiWeb save request."""
    return {
        "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
        "Cookie": build_cookie_header(cookies),
        "User-Agent": user_agent,
    }
