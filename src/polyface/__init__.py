"""
polyface: runtime interfaces for Python classes

Declare a fixed set of interface method names, register per-class
implementations, then resolve the implementation that applies to any value
or classify plain values against the registered classes.

Example usage:
    >>> from polyface import InterfaceRegistry
    >>> class Dog: ...
    >>> people = InterfaceRegistry(["talk", "walk"], name="Person")
    >>> people.set_implementation(Dog, "talk", lambda dog: "woof")
    >>> dog = Dog()
    >>> people.get_implementation(dog, "talk")(dog)
    'woof'
"""

from .errors import InvalidArgumentError, InvalidStateError, PolyfaceError
from .kinds import DATA_TYPES, UNDEFINED, Kind, kind_of
from .logging_config import setup_logging
from .registry import INSTANCE_PREDICATE, InterfaceRegistry

__version__ = '0.1.0'
__all__ = [
    'DATA_TYPES',
    'INSTANCE_PREDICATE',
    'InterfaceRegistry',
    'InvalidArgumentError',
    'InvalidStateError',
    'Kind',
    'PolyfaceError',
    'UNDEFINED',
    'kind_of',
    'setup_logging',
]
