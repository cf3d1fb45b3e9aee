import inspect
from abc import ABC, abstractmethod
from typing import Optional

from animal_package.constants import DEFAULT_NAME
from animal_package.errors import InvalidAbstractInstantiation


class Animal(ABC):
    def __new__(cls, *args, **kwargs):
        if inspect.isabstract(cls):
            raise InvalidAbstractInstantiation(cls)
        return super().__new__(cls)

    def __init__(self, name: Optional[str] = None):
        self.name = name or DEFAULT_NAME

    @abstractmethod
    def speak(self):
        """Generic sound; subclasses must override and may delegate here via super()."""
        line = f"{self.name} speaking generically.."
        print(line)
        return line
