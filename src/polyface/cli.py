"""CLI entry point for polyface."""

import argparse
import importlib
import json
import logging
import sys

import yaml

from .config import LOG_LEVELS, InterfaceConfig, build_registry, config_to_yaml, load_config, merge_cli_args
from .errors import InvalidArgumentError, PolyfaceError
from .logging_config import setup_logging
from .registry import INSTANCE_PREDICATE, InterfaceRegistry
from .report import dispatch_summary, render_dispatch_table

logger = logging.getLogger(__name__)


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add declaration flags shared by check and dump."""
    parser.add_argument("--config", type=str, help="Path to YAML interface declaration")
    parser.add_argument("--name", type=str, help="Interface name")
    parser.add_argument(
        "--methods", nargs="+", type=str,
        help="Interface method names (replaces the list from --config)",
    )


def _add_logging_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level", type=str, dest="log_level",
        choices=list(LOG_LEVELS),
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, dest="log_file", help="Also write logs to this file")


def _build_config(args) -> InterfaceConfig:
    """Build an InterfaceConfig from a config file + CLI overrides."""
    if args.config:
        config = load_config(args.config)
    else:
        config = InterfaceConfig()
    return merge_cli_args(config, args)


def _configure_logging(config: InterfaceConfig) -> None:
    setup_logging(level=config.log_level, filename=config.log_file, force=True)


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# polyface check / dump
# ---------------------------------------------------------------------------

def cmd_check(args) -> None:
    """Validate an interface declaration by constructing a registry from it."""
    try:
        config = _build_config(args)
        _configure_logging(config)
        if not config.methods:
            _fail("no interface methods declared (use --methods or a 'methods' list in the config file).")
        registry = build_registry(config)
    except (PolyfaceError, OSError, yaml.YAMLError) as exc:
        _fail(str(exc))
        return

    logger.info("Declaration OK: %r", registry)
    declared = sorted(m for m in registry.interfaces if m != INSTANCE_PREDICATE)
    print(f"Interface: {registry.name or '(unnamed)'}")
    print(f"Methods ({len(declared)}): {', '.join(declared)}")
    print(f"Reserved: {INSTANCE_PREDICATE}")


def cmd_dump(args) -> None:
    """Print the normalized interface declaration as YAML."""
    try:
        config = _build_config(args)
    except (PolyfaceError, OSError, yaml.YAMLError) as exc:
        _fail(str(exc))
        return
    print(config_to_yaml(config), end="")


# ---------------------------------------------------------------------------
# polyface describe
# ---------------------------------------------------------------------------

def _resolve_registry(target: str) -> InterfaceRegistry:
    """Import ``module:attribute`` and return the registry it names."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise InvalidArgumentError(f"expected MODULE:ATTRIBUTE, got {target!r}")
    try:
        obj = importlib.import_module(module_name)
    except Exception as exc:
        raise InvalidArgumentError(
            f"cannot import {module_name!r}: {type(exc).__name__}: {exc}"
        ) from exc
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            raise InvalidArgumentError(f"{module_name!r} has no attribute {attr_path!r}") from None
    if not isinstance(obj, InterfaceRegistry):
        raise InvalidArgumentError(f"{target!r} is not an InterfaceRegistry (got {type(obj).__name__})")
    return obj


def cmd_describe(args) -> None:
    """Print the dispatch table of a registry found at MODULE:ATTRIBUTE."""
    setup_logging(level=args.log_level or "WARNING", filename=args.log_file, force=True)
    try:
        registry = _resolve_registry(args.target)
    except PolyfaceError as exc:
        _fail(str(exc))
        return

    if args.format == "json":
        print(json.dumps(dispatch_summary(registry), indent=2))
    else:
        print(render_dispatch_table(registry), end="")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="polyface",
        description="polyface: runtime interfaces for Python classes",
    )
    subparsers = parser.add_subparsers(dest="command")

    # check
    check_parser = subparsers.add_parser(
        "check", help="Validate an interface declaration",
    )
    _add_common_args(check_parser)
    _add_logging_args(check_parser)
    check_parser.set_defaults(func=cmd_check)

    # dump
    dump_parser = subparsers.add_parser(
        "dump", help="Print the normalized interface declaration as YAML",
    )
    _add_common_args(dump_parser)
    _add_logging_args(dump_parser)
    dump_parser.set_defaults(func=cmd_dump)

    # describe
    describe_parser = subparsers.add_parser(
        "describe", help="Show the dispatch table of a registry",
    )
    describe_parser.add_argument(
        "target", type=str, metavar="MODULE:ATTRIBUTE",
        help="Import path of an InterfaceRegistry, e.g. myapp.people:registry",
    )
    describe_parser.add_argument(
        "--format", choices=["text", "json"], default="text",
        help="Output format (default: text)",
    )
    _add_logging_args(describe_parser)
    describe_parser.set_defaults(func=cmd_describe)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
