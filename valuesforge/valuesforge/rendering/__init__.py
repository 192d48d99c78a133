from .engine import build_environment, render_document
from .io import atomic_write_text, read_document

__all__ = ["atomic_write_text", "build_environment", "read_document", "render_document"]
