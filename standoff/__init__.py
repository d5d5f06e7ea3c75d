from .annotations import (Annotation, AnnotationError, Attribute, DuplicateIdError, Entity, EquivalenceGroup, Event,
                          GrammarError, Note, NotFoundError, Relation, TypeMismatchError, parse_annotation)
from .document import Document, ReferenceGraph, Renumber
from .io import AnnotationsReader, AnnotationsWriter, read_document
from .version import __version__
