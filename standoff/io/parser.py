import logging
import os
from typing import Iterable

from ..annotations import DuplicateIdError, GrammarError, parse_annotation
from ..document import Document

logger = logging.getLogger(__name__)


class AnnotationsReader:
    """Parse standoff annotation lines into a Document."""

    def __init__(self, lines: Iterable[str], doc_id: str | None = None, text: str | None = None):
        """
        :param lines: Annotation lines, e.g. an open .ann file
        :param doc_id: Document id passed through to the Document
        :param text: Raw document text passed through to the Document
        """
        self.lines = lines
        self.doc_id = doc_id
        self.text = text

    def __call__(self):
        document = Document(doc_id=self.doc_id, text=self.text)
        for line_num, ann in self.parse_lines():
            try:
                document.add_annotation(ann)
            except DuplicateIdError as err:
                raise DuplicateIdError(err.id, line_num=line_num) from err
        logger.debug("Read %d annotations for document %s", len(document), self.doc_id)
        return document

    def parse_lines(self):
        """
        Yield (line number, annotation) for each non-blank line, dispatching on the first character.
        """
        for line_num, line in enumerate(self.lines, start=1):
            if not line.strip():
                continue
            try:
                yield line_num, parse_annotation(line)
            except GrammarError as err:
                raise err.with_line_num(line_num) from err


def read_document(ann_path: str, txt_path: str | None = None, doc_id: str | None = None):
    """
    Read a .ann file and, optionally, the matching .txt file.
    :param ann_path: Path to the annotation file
    :param txt_path: Path to the document text
    :param doc_id: Document id. Default: file name of ann_path without extension
    """
    if doc_id is None:
        doc_id = os.path.splitext(os.path.basename(ann_path))[0]
    text = None
    if txt_path is not None:
        with open(txt_path, "r", encoding="utf-8", newline="") as in_f:
            text = in_f.read()
    with open(ann_path, "r", encoding="utf-8") as in_f:
        return AnnotationsReader(in_f, doc_id=doc_id, text=text)()
