"""Dispatch table reports for an InterfaceRegistry."""

from jinja2 import Environment, PackageLoader

from .registry import INSTANCE_PREDICATE, InterfaceRegistry


def _get_template_env() -> Environment:
    return Environment(
        loader=PackageLoader("polyface", "templates"),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _callable_name(fn) -> str:
    module = getattr(fn, "__module__", None)
    qualname = getattr(fn, "__qualname__", None) or repr(fn)
    return f"{module}.{qualname}" if module else qualname


def dispatch_summary(registry: InterfaceRegistry) -> dict:
    """Return a JSON-serialisable description of the registry's dispatch table."""
    methods = sorted(m for m in registry.interfaces if m != INSTANCE_PREDICATE)
    classes = []
    for cls in registry.registered_classes():
        impls = registry.implementations_of(cls)
        classes.append({
            "class": f"{cls.__module__}.{cls.__qualname__}",
            "implemented": {
                name: _callable_name(fn)
                for name, fn in sorted(impls.items())
                if name != INSTANCE_PREDICATE
            },
            "missing": registry.missing_methods(cls),
            "has_instance_predicate": INSTANCE_PREDICATE in impls,
        })
    return {
        "name": registry.name,
        "methods": methods,
        "classes": classes,
    }


def render_dispatch_table(registry: InterfaceRegistry) -> str:
    """Render the dispatch table as plain text."""
    env = _get_template_env()
    template = env.get_template("dispatch_table.txt.j2")
    return template.render(summary=dispatch_summary(registry))
