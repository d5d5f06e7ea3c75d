from .parser import AnnotationsReader, read_document
from .writer import AnnotationsWriter
