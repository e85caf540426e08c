# Config
from .config import ParserConfig

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsing
from .parsers import (
    Comment,
    Document,
    NoDocumentsError,
    ParseError,
    ParseErrorKind,
    Stream,
    StreamParser,
    TextStreamParser,
    WrongDocumentCountError,
    parse_all,
    parse_first,
    parse_single,
    render,
)

__all__ = [
    # Config
    "ParserConfig",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Model
    "Comment",
    "Document",
    "Stream",
    "render",
    # Parsing
    "StreamParser",
    "TextStreamParser",
    "parse_all",
    "parse_first",
    "parse_single",
    # Errors
    "NoDocumentsError",
    "ParseError",
    "ParseErrorKind",
    "WrongDocumentCountError",
]
