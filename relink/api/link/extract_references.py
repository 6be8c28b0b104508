"""Link Extractor: references of a Document in document order."""

from collections.abc import Iterator

from ..config.ScanConfig import ScanConfig
from ..scan.Document import Document
from ._parsers import MarkdownParser
from .Reference import Reference


class _DocumentReferences:
    """Lazy, restartable sequence of a document's references.

    Every iteration re-parses the immutable document text, so it can be walked
    any number of times and always yields the same references.
    """

    def __init__(self, document: Document, parser: MarkdownParser):
        self.document = document
        self.parser = parser

    def __iter__(self) -> Iterator[Reference]:
        for ref in self.parser.parse(self.document.text):
            yield Reference(
                path=self.document.path,
                line_number=ref.line_number,
                column_number=ref.column_number,
                start=ref.offset,
                end=ref.offset + len(ref.raw_target),
                raw_target=ref.raw_target,
                link_kind=ref.link_type,
                label=ref.alias,
                is_embed=ref.is_embed,
                angle_brackets=ref.angle_brackets,
            )


def extract_references(document: Document, scan_config: ScanConfig | None = None) -> _DocumentReferences:
    """Return the references of ``document`` (ascending line, then column)."""
    scan_config = scan_config or ScanConfig()
    parser = MarkdownParser(
        skip_front_matter=scan_config.skip_front_matter,
        skip_inline_code=scan_config.skip_inline_code,
    )
    return _DocumentReferences(document, parser)
