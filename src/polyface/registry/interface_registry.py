"""
Interface registry: per-class dispatch of named interface methods

This module provides:
- InterfaceRegistry: a lock-guarded dispatch table mapping a class to the
  implementations of a fixed set of interface methods
- INSTANCE_PREDICATE: the reserved method used to classify plain values
"""

import logging
import threading
from collections.abc import Callable, Collection, Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Union

from ..errors import InvalidArgumentError, InvalidStateError
from ..kinds import Kind, is_data_kind, kind_of


logger = logging.getLogger(__name__)

# Reserved method every registry declares; returns True when a plain value
# is a valid representation of the class it is registered for.
INSTANCE_PREDICATE = "__isobjectinstance__"


def _normalize_interfaces(interfaces: Any) -> frozenset:
    """Validate a method-name collection and freeze it with the reserved name."""
    if (isinstance(interfaces, (str, bytes, Mapping))
            or not isinstance(interfaces, Collection)):
        raise InvalidArgumentError(
            f"expected a collection of method names, got {interfaces!r}"
        )
    bad = [name for name in interfaces if not isinstance(name, str)]
    if bad:
        raise InvalidArgumentError(f"method names must be strings, got {bad!r}")
    return frozenset(interfaces) | {INSTANCE_PREDICATE}


class InterfaceRegistry:
    """Thread-safe, dict-backed interface dispatch table.

    Args:
        interfaces: Collection of interface method names. Duplicates collapse
            and ``INSTANCE_PREDICATE`` is always added.
        name: Optional interface name, used in logs and reports.
    """

    def __init__(self, interfaces: Collection = (), name: Optional[str] = None):
        self._interfaces = _normalize_interfaces(interfaces)
        self._name = name
        self._lock = threading.Lock()
        # class -> {method name -> implementation}, in first-registration order
        self._class_map: Dict[type, Dict[str, Callable]] = {}

    def __repr__(self) -> str:
        label = f"{self._name!r}, " if self._name else ""
        return (f"InterfaceRegistry({label}methods={sorted(self._interfaces)}, "
                f"classes={len(self)})")

    def __len__(self) -> int:
        with self._lock:
            return len(self._class_map)

    def __contains__(self, cls: object) -> bool:
        with self._lock:
            return cls in self._class_map

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def interfaces(self) -> frozenset:
        """Declared method names, including the reserved predicate."""
        return self._interfaces

    @property
    def class_map(self) -> Mapping:
        """Read-only view of the dispatch table."""
        return MappingProxyType(self._class_map)

    def registered_classes(self) -> List[type]:
        with self._lock:
            return list(self._class_map)

    def implementations_of(self, cls: type) -> Dict[str, Callable]:
        with self._lock:
            return dict(self._class_map.get(cls, {}))

    def missing_methods(self, cls: type) -> List[str]:
        """Declared methods that *cls* has no implementation for."""
        implemented = self.implementations_of(cls)
        return sorted(
            name for name in self._interfaces
            if name != INSTANCE_PREDICATE and name not in implemented
        )

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def set_implementation(self, cls: type, method_name: str, fn: Callable) -> None:
        """Register *fn* as the implementation of *method_name* for *cls*.

        Re-registering the same pair replaces the previous function.
        """
        if not isinstance(cls, type):
            raise InvalidArgumentError(f"expected a class, got {cls!r}")
        if not callable(fn):
            raise InvalidArgumentError(
                f"implementation of {method_name!r} must be callable, got {fn!r}"
            )
        if not isinstance(method_name, str) or method_name not in self._interfaces:
            raise InvalidArgumentError(
                f"Unknown interface method: {method_name!r}. "
                f"Available: {sorted(self._interfaces)}"
            )
        with self._lock:
            methods = self._class_map.setdefault(cls, {})
            replaced = methods.get(method_name)
            methods[method_name] = fn
        if replaced is not None and replaced is not fn:
            logger.debug("Replaced %s.%s", cls.__qualname__, method_name)
        else:
            logger.debug("Registered %s.%s", cls.__qualname__, method_name)

    def set_is_object_instance(self, cls: type, predicate: Callable[[Any], bool]) -> None:
        """Register the classification predicate for *cls*."""
        self.set_implementation(cls, INSTANCE_PREDICATE, predicate)

    def implementation(self, cls: type, method_name: str):
        """Decorator form of :meth:`set_implementation`.

        Example:
            >>> @registry.implementation(Dog, "talk")
            ... def dog_talk(dog):
            ...     return "woof"
        """
        def decorator(fn):
            self.set_implementation(cls, method_name, fn)
            return fn
        return decorator

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _lookup(self, cls: type, method_name: str) -> Any:
        if not isinstance(method_name, str):
            return None
        with self._lock:
            methods = self._class_map.get(cls)
            if methods is None:
                return None
            return methods.get(method_name)

    def get_implementation(
        self,
        value: Any,
        method_name: str,
        default: Optional[Callable] = None,
        data_type: Optional[Callable] = None,
    ) -> Optional[Callable]:
        """Return the implementation of *method_name* that applies to *value*.

        Data values (primitives and None) always get *data_type*. Classes are
        looked up as themselves, any other value by its exact runtime class.
        Returns *default* when nothing callable is registered. The returned
        function is never called here.
        """
        kind = kind_of(value)
        if is_data_kind(kind):
            return data_type
        key = value if kind is Kind.CLASS else type(value)
        impl = self._lookup(key, method_name)
        if callable(impl):
            return impl
        return default

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_object_instance(self, value: Any, cls: type) -> bool:
        """True when *value* is an instance of, or a valid representation of, *cls*.

        A real instance short-circuits; otherwise the predicate registered
        for *cls* decides. Classes without a predicate never match.
        """
        if not isinstance(cls, type):
            raise InvalidArgumentError(f"expected a class, got {cls!r}")
        if isinstance(value, cls):
            return True
        predicate = self._lookup(cls, INSTANCE_PREDICATE)
        if predicate is None:
            return False
        if not callable(predicate):
            raise InvalidStateError(
                f"{INSTANCE_PREDICATE} implementation for {cls.__qualname__} "
                f"is not callable: {predicate!r}"
            )
        return predicate(value)

    def class_of_object(self, value: Any) -> Union[type, Kind]:
        """Return the first registered class *value* belongs to.

        Data values return their kind tag directly. Classes are tried in the
        order they were first registered; with no match the value's own kind
        (``Kind.OBJECT`` or ``Kind.CLASS``) is returned.
        """
        kind = kind_of(value)
        if is_data_kind(kind):
            return kind
        for cls in self.registered_classes():
            if self.is_object_instance(value, cls):
                return cls
        return kind
