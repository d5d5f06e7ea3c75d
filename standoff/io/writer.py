import logging

from ..document import Document

logger = logging.getLogger(__name__)


class AnnotationsWriter:
    """Serialize a Document back to standoff lines, in insertion order."""

    def __init__(self, document: Document):
        self.document = document

    def __call__(self):
        return [str(ann) for ann in self.document]

    def dumps(self):
        lines = self()
        return "".join(f"{line}\n" for line in lines)

    def write(self, output):
        """
        :param output: Path or writable text file object
        """
        if hasattr(output, "write"):
            output.write(self.dumps())
        else:
            with open(output, "w", encoding="utf-8", newline="\n") as out_f:
                out_f.write(self.dumps())
        logger.debug("Wrote %d annotations for document %s", len(self.document), self.document.doc_id)
