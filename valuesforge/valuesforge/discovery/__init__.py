from .walker import discover_documents, is_candidate

__all__ = ["discover_documents", "is_candidate"]
