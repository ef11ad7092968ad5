import pytest

from polyface import InterfaceRegistry


class A:
    def __init__(self, first="Ada", last="Lovelace"):
        self.first = first
        self.last = last


class B:
    def __init__(self, first="Bob", last="Builder"):
        self.first = first
        self.last = last


class C:
    pass


def a_talk(obj):
    return f"A {obj.first} talks"


def a_walk(obj):
    return "A walks"


def a_full_name(obj):
    return f"{obj.first} {obj.last}"


def b_talk(obj):
    return f"B {obj.first} talks"


def b_walk(obj):
    return "B walks"


def b_full_name(obj):
    return f"{obj.last}, {obj.first}"


def c_talk(obj):
    return "C talks"


def c_walk(obj):
    return "C walks"


def c_full_name(obj):
    return "C"


def default_impl(obj):
    return "default"


def data_type_impl(obj):
    return "data"


PERSON_METHODS = {"talk", "walk", "getFullName"}


@pytest.fixture
def registry():
    return InterfaceRegistry(PERSON_METHODS, name="Person")


@pytest.fixture
def people(registry):
    """A registry with A, B and C implementing every Person method."""
    for cls, talk, walk, full_name in (
        (A, a_talk, a_walk, a_full_name),
        (B, b_talk, b_walk, b_full_name),
        (C, c_talk, c_walk, c_full_name),
    ):
        registry.set_implementation(cls, "talk", talk)
        registry.set_implementation(cls, "walk", walk)
        registry.set_implementation(cls, "getFullName", full_name)
    return registry
