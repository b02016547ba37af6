"""HTTP access to a clojuredocs-style documentation API.

Only used to build new snapshots; nothing else in docsnap touches the
network.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Protocol
from urllib.parse import quote

import requests
from requests import exceptions as req_exc

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://api.clojuredocs.org"

TRANSIENT_HTTP_STATUSES = {429, 500, 502, 503, 504}


class RemoteError(Exception):
    """Raised when the documentation API cannot be reached or answers badly."""


class DocsSource(Protocol):
    """Per-symbol documentation data in the shapes stored in a snapshot."""

    def search(self, namespace: str | None, query: str) -> list[dict[str, Any]]: ...

    def examples(self, namespace: str, name: str) -> list[dict[str, Any]]: ...

    def see_also(self, namespace: str, name: str) -> list[dict[str, Any]]: ...

    def comments(self, namespace: str, name: str) -> list[dict[str, Any]]: ...


def _segment(value: str) -> str:
    return quote(value, safe="")


class HttpDocsSource:
    """DocsSource backed by the clojuredocs JSON API."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 45,
        max_retries: int = 4,
        backoff_base_s: float = 1.0,
    ) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._max_retries = max_retries
        self._backoff_base_s = backoff_base_s

    def __enter__(self) -> HttpDocsSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _get_json(self, *segments: str) -> Any:
        url = "/".join([self._base_url, *(_segment(s) for s in segments)])
        last_error: Exception | None = None

        for attempt in range(self._max_retries + 1):
            try:
                resp = self._session.get(url, timeout=self._timeout_s)
            except req_exc.RequestException as exc:
                last_error = exc
                if attempt >= self._max_retries:
                    break
                logger.debug("Retrying %s after error: %s", url, exc)
                time.sleep(self._backoff_base_s * (2**attempt))
                continue

            if (
                resp.status_code in TRANSIENT_HTTP_STATUSES
                and attempt < self._max_retries
            ):
                logger.debug("Retrying %s after HTTP %d", url, resp.status_code)
                time.sleep(self._backoff_base_s * (2**attempt))
                continue
            if resp.status_code == 404:
                return None
            if resp.status_code >= 400:
                msg = f"Failed to fetch {url}: HTTP {resp.status_code}"
                raise RemoteError(msg)
            try:
                return resp.json()
            except ValueError as exc:
                msg = f"Invalid JSON from {url}: {exc}"
                raise RemoteError(msg) from exc

        msg = f"Failed to fetch {url}: {last_error}"
        raise RemoteError(msg)

    def search(self, namespace: str | None, query: str) -> list[dict[str, Any]]:
        if namespace is None:
            result = self._get_json("search", query)
        else:
            result = self._get_json("search", namespace, query)
        return list(result or [])

    def examples(self, namespace: str, name: str) -> list[dict[str, Any]]:
        result = self._get_json("examples", namespace, name)
        if not result:
            return []
        if not isinstance(result, dict):
            msg = f"Unexpected examples payload for {namespace}/{name}: {result!r}"
            raise RemoteError(msg)
        return list(result.get("examples") or [])

    def see_also(self, namespace: str, name: str) -> list[dict[str, Any]]:
        return list(self._get_json("see-also", namespace, name) or [])

    def comments(self, namespace: str, name: str) -> list[dict[str, Any]]:
        return list(self._get_json("comments", namespace, name) or [])


__all__ = ["DEFAULT_BASE_URL", "DocsSource", "HttpDocsSource", "RemoteError"]
