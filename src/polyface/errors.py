"""Exceptions raised by polyface."""


class PolyfaceError(Exception):
    """Base class for all polyface errors."""


class InvalidArgumentError(PolyfaceError, ValueError):
    """A caller passed a malformed argument.

    Raised for a bad interface declaration, a type identity that is not a
    class, an undeclared method name or a non-callable implementation.
    """


class InvalidStateError(PolyfaceError, RuntimeError):
    """A registered instance predicate turned out not to be callable."""
