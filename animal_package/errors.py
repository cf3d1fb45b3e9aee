class AnimalError(Exception):
    """Base class for errors raised by animal_package."""


class InvalidAbstractInstantiation(AnimalError, TypeError):
    """Raised when an abstract animal type is constructed directly."""

    def __init__(self, cls: type):
        self.cls = cls
        super().__init__(f"Can not instantiate abstract class {cls.__name__}")


class UnimplementedAbstractOperation(AnimalError, NotImplementedError):
    """Raised when an abstract operation is called without an override."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"abstract method {operation}")
