from .models import RawDocument
from .parser import parse_metadata
from .serializer import TOML_DELIMITER, render_document, render_metadata
from .splitter import YAML_DELIMITER, split_header

__all__ = [
    "RawDocument",
    "TOML_DELIMITER",
    "YAML_DELIMITER",
    "parse_metadata",
    "render_document",
    "render_metadata",
    "split_header",
]
