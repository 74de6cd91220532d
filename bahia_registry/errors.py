"""
Registry Errors
===============

Bounded Context: Segment registry error taxonomy

Two failure kinds only:
- InvalidSegmentError: rejected input on add (blank name, non-positive length)
- SegmentNotFoundError: status update/query on an unregistered segment

Both derive from RegistryError and from the builtin they specialize
(ValueError / KeyError).
"""


class RegistryError(Exception):
    """Base class for lane registry errors"""
    pass


class InvalidSegmentError(RegistryError, ValueError):
    """Raised when a segment name is blank or its length is not positive"""
    pass


class SegmentNotFoundError(RegistryError, KeyError):
    """Raised when the referenced segment is not registered"""

    def __init__(self, name: str):
        super().__init__(name)

    @property
    def name(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f"El tramo indicado no existe: {self.name}"
