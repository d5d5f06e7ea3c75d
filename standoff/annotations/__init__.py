from .data import (Annotation, Attribute, Entity, EquivalenceGroup, Event, Note, Relation,
                   parse_annotation)
from .errors import AnnotationError, DuplicateIdError, GrammarError, NotFoundError, TypeMismatchError
