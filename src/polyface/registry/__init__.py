"""
In-process Interface Registry

This package provides:
1. InterfaceRegistry — dict-backed per-class dispatch of interface methods
2. INSTANCE_PREDICATE — reserved method name used by classification
"""

from .interface_registry import (
    INSTANCE_PREDICATE,
    InterfaceRegistry,
)

__all__ = [
    'INSTANCE_PREDICATE',
    'InterfaceRegistry',
]
