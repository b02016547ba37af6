"""Remote documentation sources used to build snapshots."""

from remote.client import DEFAULT_BASE_URL, DocsSource, HttpDocsSource, RemoteError

__all__ = ["DEFAULT_BASE_URL", "DocsSource", "HttpDocsSource", "RemoteError"]
