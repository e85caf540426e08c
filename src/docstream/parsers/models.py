# parsers/models.py

from collections.abc import Iterator
from dataclasses import dataclass

DOCUMENT_SEPARATOR = "\n---\n"


@dataclass(frozen=True)
class Comment:
    """A single comment line attached to a document.

    `text` excludes the marker and the newline. `prefix` is the marker
    exactly as it appeared in the input, so rendering reproduces it.
    """

    text: str
    prefix: str = "# "

    def render(self) -> str:
        return self.prefix + self.text

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Document:
    """One document of a stream: optional comment, then optional content.

    Content keeps the newline that separated it from the comment.
    """

    comment: Comment | None = None
    content: str | None = None

    def render(self) -> str:
        out = []
        if self.comment is not None:
            out.append(self.comment.render())
        if self.content is not None:
            out.append(self.content)
        return "".join(out)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Stream:
    documents: tuple[Document, ...] = ()
    separator: str = DOCUMENT_SEPARATOR

    def with_document(self, document: Document) -> "Stream":
        return Stream(
            documents=(*self.documents, document),
            separator=self.separator,
        )

    def render(self) -> str:
        return self.separator.join(d.render() for d in self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __str__(self) -> str:
        return self.render()


def render(node: Comment | Document | Stream) -> str:
    """Reconstruct the exact source text of a parsed node."""
    return node.render()
