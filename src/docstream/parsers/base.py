# parsers/base.py

import logging
from abc import ABC, abstractmethod
from typing import NoReturn

from docstream.observability import names
from docstream.observability.base import MetricsHook, NoOpMetricsHook

from .errors import NoDocumentsError, ParseError, WrongDocumentCountError
from .models import Document, Stream

logger = logging.getLogger(__name__)


class StreamParser(ABC):
    metrics_hook: MetricsHook = NoOpMetricsHook()

    @abstractmethod
    def parse_all(self, text: str) -> Stream:
        """
        Parse text into a stream of documents.

        Requirements:
        - Never raises; no documents is an empty stream
        - Rendering the result reproduces `text` exactly
        - Stateless across calls
        """
        raise NotImplementedError

    def parse_first(self, text: str) -> Document:
        stream = self.parse_all(text)
        if len(stream) < 1:
            self._fail(NoDocumentsError())
        return stream.documents[0]

    def parse_single(self, text: str) -> Document:
        stream = self.parse_all(text)
        if len(stream) != 1:
            self._fail(WrongDocumentCountError(len(stream)))
        return stream.documents[0]

    def _fail(self, error: ParseError) -> NoReturn:
        logger.error("Parse expectation failed: %s", error)
        self.metrics_hook.increment(
            names.PARSE_ERRORS_TOTAL, labels={"kind": error.kind.value}
        )
        raise error
