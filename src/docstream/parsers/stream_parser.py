# parsers/stream_parser.py

import logging
from time import monotonic

from docstream.config import ParserConfig
from docstream.observability import names
from docstream.observability.base import MetricsHook, NoOpMetricsHook

from .base import StreamParser
from .models import Comment, Document, Stream

logger = logging.getLogger(__name__)


class TextStreamParser(StreamParser):
    """
    Lossless multi-document text parser.
    - Splits on lines holding only the separator
    - Lifts a leading comment line off each document
    - Keeps every other character verbatim
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized TextStreamParser with separator=%r, comment_marker=%r",
            self.config.separator,
            self.config.comment_marker,
        )

    def parse_all(self, text: str) -> Stream:
        start = monotonic()
        documents: list[Document] = []

        # Line endings are taken as consistent; any CRLF means CRLF throughout
        eol = "\r\n" if "\r\n" in text else "\n"
        separator = f"{eol}{self.config.separator}{eol}"

        # Empty input has no documents, not one empty document
        if text:
            for segment in text.split(separator):
                documents.append(self._parse_document(segment))

        stream = Stream(documents=tuple(documents), separator=separator)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.PARSE_INPUT_SIZE, len(text))
        self.metrics_hook.increment(names.PARSE_DOCUMENTS_TOTAL, len(documents))
        logger.debug(
            "Parsed %d documents from %d characters", len(documents), len(text)
        )
        return stream

    def _parse_document(self, segment: str) -> Document:
        if not segment:
            return Document()

        marker = self.config.comment_marker
        if not segment.startswith(marker):
            return Document(content=segment)

        line, newline, rest = segment.partition("\n")
        prefix = marker
        comment_text = line[len(marker) :]
        if comment_text.startswith(" "):
            prefix += " "
            comment_text = comment_text[1:]
        if newline and comment_text.endswith("\r"):
            comment_text = comment_text[:-1]
            newline = "\r" + newline

        return Document(
            comment=Comment(text=comment_text, prefix=prefix),
            content=newline + rest if newline else None,
        )


_default_parser = TextStreamParser()


def parse_all(text: str) -> Stream:
    """Parse every document in `text`. Never raises."""
    return _default_parser.parse_all(text)


def parse_first(text: str) -> Document:
    """Return the first document.

    Raises:
        NoDocumentsError: If `text` holds no documents.
    """
    return _default_parser.parse_first(text)


def parse_single(text: str) -> Document:
    """Return the only document.

    Raises:
        WrongDocumentCountError: If `text` holds zero or several documents.
    """
    return _default_parser.parse_single(text)
