from .base import StreamParser
from .errors import (
    NoDocumentsError,
    ParseError,
    ParseErrorKind,
    WrongDocumentCountError,
)
from .models import Comment, Document, Stream, render
from .stream_parser import TextStreamParser, parse_all, parse_first, parse_single

__all__ = [
    "Comment",
    "Document",
    "NoDocumentsError",
    "ParseError",
    "ParseErrorKind",
    "Stream",
    "StreamParser",
    "TextStreamParser",
    "WrongDocumentCountError",
    "parse_all",
    "parse_first",
    "parse_single",
    "render",
]
