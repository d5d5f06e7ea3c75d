import logging
import os
import sys
from argparse import ArgumentParser

from .annotations import AnnotationError
from .document import Renumber
from .io import AnnotationsWriter, read_document

logger = logging.getLogger("standoff")


def argparser():
    ap = ArgumentParser(description="Renumber the entities of brat standoff files in text order.")
    ap.add_argument("files", metavar="ANN", nargs="+", help="annotation files (.ann)")
    ap.add_argument("-o", "--output-dir", default=None,
                    help="write renumbered files to this directory (default: stdout)")
    ap.add_argument("--start", type=int, default=0, help="number of the first entity (default: 0)")
    ap.add_argument("--keep-attributes", action="store_true",
                    help="do not rewrite attribute targets")
    ap.add_argument("--validate", action="store_true",
                    help="check that all references resolve before renumbering")
    ap.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    return ap


def process(ann_path, args):
    txt_path = os.path.splitext(ann_path)[0] + ".txt"
    document = read_document(ann_path, txt_path=txt_path if os.path.isfile(txt_path) else None)
    if args.validate:
        document.validate()
    renumbered = Renumber(document)(start=args.start, remap_attributes=not args.keep_attributes)
    writer = AnnotationsWriter(renumbered)
    if args.output_dir is None:
        writer.write(sys.stdout)
    else:
        os.makedirs(args.output_dir, exist_ok=True)
        writer.write(os.path.join(args.output_dir, os.path.basename(ann_path)))
    logger.info("Renumbered %s", ann_path)


def main(argv=None):
    args = argparser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    for ann_path in args.files:
        try:
            process(ann_path, args)
        except (AnnotationError, OSError) as err:
            logger.error("%s: %s", ann_path, err)
            return 1
    return 0
