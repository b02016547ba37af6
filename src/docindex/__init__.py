"""Document index for the active snapshot."""

from docindex.document_index import DocumentIndex, SnapshotMeta
from docindex.service import DocsService

__all__ = ["DocsService", "DocumentIndex", "SnapshotMeta"]
