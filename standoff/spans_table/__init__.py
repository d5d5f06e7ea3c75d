from .convert import Convert
from .unify import OverlapComponentUnifier
