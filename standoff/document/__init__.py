from .document import Document
from .references import ReferenceGraph
from .remap import Renumber
