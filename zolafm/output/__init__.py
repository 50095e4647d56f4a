from .writer import DocumentWriter

__all__ = ["DocumentWriter"]
