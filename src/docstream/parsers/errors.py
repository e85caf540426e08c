# parsers/errors.py

from enum import Enum


class ParseErrorKind(str, Enum):
    """Which cardinality expectation was not met."""

    NO_DOCUMENTS = "no_documents"
    WRONG_DOCUMENT_COUNT = "wrong_document_count"


class ParseError(Exception):
    """Base class for parser errors.

    Catch this to treat every unmet expectation the same way.
    """

    def __init__(self, kind: ParseErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class NoDocumentsError(ParseError):
    def __init__(self) -> None:
        super().__init__(
            ParseErrorKind.NO_DOCUMENTS,
            "expected at least one document, but found none",
        )


class WrongDocumentCountError(ParseError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            ParseErrorKind.WRONG_DOCUMENT_COUNT,
            f"expected exactly one document, but found {count}",
        )
