from .constants import DEFAULT_NAME
from .errors import AnimalError, InvalidAbstractInstantiation, UnimplementedAbstractOperation
