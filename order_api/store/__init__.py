# Order persistence
from .document_store import DocumentInfo, DocumentStore, MalformedDocument, parse_document

__all__ = ["DocumentInfo", "DocumentStore", "MalformedDocument", "parse_document"]
