from typing import Optional

from animal_package.constants import DEFAULT_NAME
from animal_package.errors import InvalidAbstractInstantiation, UnimplementedAbstractOperation


class Animal:
    def __init__(self, name: Optional[str] = None):
        self.name = name or DEFAULT_NAME
        if type(self) is Animal:
            raise InvalidAbstractInstantiation(Animal)

    def say(self):
        raise UnimplementedAbstractOperation("say")
